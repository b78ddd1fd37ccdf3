import pytest
from models.category import DNACategory
from services.category_detector import (
    CATEGORY_KEYWORDS,
    ACTIVITY_TOKENS,
    detect_categories_in_message,
    sort_categories,
)

# Each case: message and the exact set of categories it should yield
test_cases = [
    {
        "name": "empty message",
        "message": "",
        "expected": set(),
    },
    {
        "name": "no keyword or activity word",
        "message": "Hello, what time do you open?",
        "expected": set(),
    },
    {
        "name": "exact Hebrew keyword for adventure",
        "message": "הרפתקא",
        "expected": {DNACategory.ADVENTURE},
    },
    {
        "name": "keyword plus activity mention (yoga)",
        "message": "יוגה",
        "expected": {DNACategory.WELLNESS, DNACategory.NATURE},
    },
    {
        "name": "activity word without any keyword",
        "message": "אפשר פיקניק?",
        "expected": {DNACategory.NATURE, DNACategory.CULINARY, DNACategory.WELLNESS},
    },
    {
        "name": "activity categories below weight 3 are ignored",
        "message": "ביקב",
        "expected": {DNACategory.CULINARY},
    },
    {
        "name": "hammock corner counts as wellness only",
        "message": "יש זמן לערסלים?",
        "expected": {DNACategory.WELLNESS},
    },
    {
        "name": "English keywords are case-insensitive",
        "message": "We LOVE Wine Tasting",
        "expected": {DNACategory.CULINARY},
    },
]


@pytest.mark.parametrize("case", test_cases, ids=[c["name"] for c in test_cases])
def test_detect_categories(case):
    assert detect_categories_in_message(case["message"]) == case["expected"]


def test_none_message_yields_empty_set():
    assert detect_categories_in_message(None) == set()


def test_every_keyword_detects_its_own_category():
    for category, keywords in CATEGORY_KEYWORDS.items():
        for keyword in keywords:
            assert category in detect_categories_in_message(keyword), keyword


def test_activity_tokens_are_long_enough():
    for tokens in ACTIVITY_TOKENS.values():
        assert all(len(token) >= 4 for token in tokens)
    assert ACTIVITY_TOKENS["סדנת גוף-נפש: 'ממתח לזרימה'"] == ["סדנת", "נפש:", "'ממתח", "לזרימה'"]
    assert ACTIVITY_TOKENS["שחייה בגן השלושה (סחנה)"] == ["שחייה", "השלושה", "סחנה"]


def test_sort_categories_uses_enumeration_order():
    categories = {DNACategory.TEAMBUILDING, DNACategory.ADVENTURE, DNACategory.CULINARY}
    assert sort_categories(categories) == [
        DNACategory.ADVENTURE, DNACategory.CULINARY, DNACategory.TEAMBUILDING
    ]
