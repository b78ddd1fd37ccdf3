import pytest
from models.category import DNACategory
from models.quiz_result import QuizResults
from questions.activity_dna import ACTIVITY_DNA_MAP, get_activity_dna
from services.activity_filtering import filter_activities_by_dna, score_activity, should_show_activity

ZIPLINE = "פעילות זיפליין וגשר חבלים"
JEEP_CONVOY = "שיירת ג'יפים דרך עמק בית שאן"
OLIVE_OIL = "סדנת שמן זית וטעימה + כריכי איכות מפנקים"
SWIMMING = "שחייה בגן השלושה (סחנה)"
SAUL_VIEWPOINT = "עצירה בתצפית הר הגלבוע – הסיפור של הקרב האחרון של המלך שאול"
ROMAN_CITY = "סיור מודרך בעיר הרומית בית שאן (סקיתופוליס)"
HAMMOCKS = "הקמת אזור חברתי לערסלים וקפה קר"
WINERY = "טעימת יין ביקב בוטיק מקומי (רמת שירין, עמק יזרעאל) + כריכי איכות מפנקים"


def make_results(top_categories):
    return QuizResults(scores={}, percentages={}, top_categories=top_categories)


ACTIVITIES = [
    ZIPLINE,                    # adventure 5                       -> 15
    JEEP_CONVOY,                # adventure 5, nature 3, history 1 -> 22 + 6
    OLIVE_OIL,                  # no top category                   -> dropped
    SWIMMING,                   # nature 5                          -> 10
    "activity we do not know",  # no DNA                            -> dropped
    SAUL_VIEWPOINT,             # history 5, nature 3               -> 11 + 4
]


@pytest.fixture
def outdoor_results():
    return make_results(["adventure", "nature", "history"])


def test_filter_ranks_by_relevance(outdoor_results):
    ranked = filter_activities_by_dna(ACTIVITIES, outdoor_results)

    assert [item["index"] for item in ranked] == [1, 0, 5, 3]
    assert [item["relevance_score"] for item in ranked] == [28, 15, 15, 10]
    assert ranked[0]["matched_categories"] == ["adventure", "nature", "history"]
    assert ranked[0]["text"] == JEEP_CONVOY


def test_filter_respects_max_activities(outdoor_results):
    ranked = filter_activities_by_dna(ACTIVITIES, outdoor_results, max_activities=2)

    assert [item["index"] for item in ranked] == [1, 0]


def test_filter_with_no_matches_returns_empty():
    ranked = filter_activities_by_dna([OLIVE_OIL], make_results(["sports", "wellness", "history"]))

    assert ranked == []


def test_planner_activities_rank_for_every_profile():
    # Each category must have planner activities that survive filtering
    for category in DNACategory:
        ranked = filter_activities_by_dna(list(ACTIVITY_DNA_MAP), make_results([category.value]))
        assert ranked, category
        assert all(item["relevance_score"] > 0 for item in ranked)


def test_score_activity_without_top_categories():
    result = score_activity(ZIPLINE, make_results([]))

    assert result == {"relevance_score": 0, "matched_categories": []}


test_cases = [
    {"activity": OLIVE_OIL, "top": ["adventure", "nature", "history"], "expected": False},
    {"activity": SWIMMING, "top": ["adventure", "nature", "history"], "expected": True},
    {"activity": ROMAN_CITY, "top": ["history", "sports", "culinary"], "expected": True},
    {"activity": HAMMOCKS, "top": ["culinary", "sports", "creative"], "expected": False},
    {"activity": "activity we do not know", "top": ["adventure", "nature", "history"], "expected": False},
]


@pytest.mark.parametrize("case", test_cases, ids=[c["activity"] for c in test_cases])
def test_should_show_activity(case):
    assert should_show_activity(case["activity"], make_results(case["top"])) is case["expected"]


def test_should_show_everything_without_results():
    assert should_show_activity("activity we do not know", None) is True


def test_should_show_activity_threshold():
    # wellness weight is 2 for the winery
    results = make_results(["wellness"])
    assert should_show_activity(WINERY, results) is False
    assert should_show_activity(WINERY, results, threshold=2) is True


def test_every_planner_activity_has_a_main_category():
    categories = {c.value for c in DNACategory}
    for text, dna in ACTIVITY_DNA_MAP.items():
        assert set(dna) <= categories, text
        assert all(1 <= weight <= 5 for weight in dna.values()), text
        assert max(dna.values()) >= 3, text


def test_get_activity_dna_normalizes_whitespace():
    assert get_activity_dna("  פעילות   זיפליין וגשר חבלים ") == {"adventure": 5, "sports": 2}
    assert get_activity_dna("unknown") == {}


def test_get_activity_dna_returns_a_copy():
    dna = get_activity_dna(ZIPLINE)
    dna["adventure"] = 0

    assert ACTIVITY_DNA_MAP[ZIPLINE]["adventure"] == 5
