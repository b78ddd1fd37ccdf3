# services/category_detector.py
import re
import logging
from models.category import DNACategory, CATEGORY_ORDER, to_category
from questions.activity_dna import ACTIVITY_DNA_MAP

logger = logging.getLogger(__name__)

# Hebrew stems match inflected forms by substring ("הרפתקא" -> "הרפתקאות")
CATEGORY_KEYWORDS = {
    DNACategory.ADVENTURE: [
        'הרפתקא', 'הרפתקה', 'אתגר', 'אדרנלין', 'ג\'יפ', 'רפלינ', 'זיפליין', 'קטגר',
        'פיינטבול', 'קיאק', 'adventure', 'adrenaline', 'jeep', 'rappel', 'zipline',
        'paintball', 'kayak'
    ],
    DNACategory.NATURE: [
        'טבע', 'נחל', 'מעיין', 'נוף', 'מים', 'שחיי', 'גן השלושה', 'סחנה', 'כנרת', 'עצים',
        'דשא', 'nature', 'stream', 'hiking', 'scenery', 'swimming'
    ],
    DNACategory.HISTORY: [
        'היסטור', 'רומי', 'בית שאן', 'פסיפס', 'מוזיאון', 'מקרא', 'שאול', 'גלבוע', 'מורשת',
        'תרבות', 'history', 'historic', 'roman', 'mosaic', 'museum', 'heritage'
    ],
    DNACategory.CULINARY: [
        'אוכל', 'קולינר', 'יין', 'טעימ', 'ארוחה', 'מסעדה', 'בישול', 'גבינ', 'שמן זית',
        'בירה', 'חומוס', 'culinary', 'wine', 'tasting', 'cooking', 'cheese', 'olive oil',
        'brewery', 'restaurant'
    ],
    DNACategory.SPORTS: [
        'ספורט', 'תחרות', 'ריצ', 'מרוץ', 'חתיר', 'רכיב', 'חץ וקשת', 'משחק', 'כדור', 'צוות',
        'sport', 'competition', 'running', 'rowing', 'cycling', 'archery'
    ],
    DNACategory.CREATIVE: [
        'יצירה', 'אמנות', 'צילום', 'מוזיקה', 'ציור', 'סדנ', 'creative', 'photography',
        'music', 'painting', 'drawing'
    ],
    DNACategory.WELLNESS: [
        'רוגע', 'יוגה', 'עיסוי', 'פינוק', 'בריאות', 'מדיטצי', 'מתיחה', 'רלקס', 'wellness',
        'relax', 'yoga', 'massage', 'meditation'
    ],
    DNACategory.TEAMBUILDING: [
        'גיבוש', 'מנהיגות', 'שיתוף פעולה', 'team building', 'teambuilding', 'leadership',
        'bonding'
    ],
}

ACTIVITY_TOKEN_SPLIT = re.compile(r"[\s\-/()]+")
MIN_ACTIVITY_TOKEN_LENGTH = 4
ACTIVITY_CATEGORY_MIN_WEIGHT = 3


def _activity_tokens(activity_text):
    return [
        word for word in ACTIVITY_TOKEN_SPLIT.split(activity_text.lower())
        if len(word) >= MIN_ACTIVITY_TOKEN_LENGTH
    ]


# Significant words per activity, computed once from the static map
ACTIVITY_TOKENS = {text: _activity_tokens(text) for text in ACTIVITY_DNA_MAP}


def detect_categories_in_message(message):
    """
    Detect DNA categories mentioned in a free-text message.
    Returns a set of DNACategory; empty or missing input yields an empty set.
    """
    detected = set()
    if not message:
        return detected

    lower_message = message.lower()

    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword.lower() in lower_message for keyword in keywords):
            detected.add(category)

    for activity_text, dna in ACTIVITY_DNA_MAP.items():
        if any(word in lower_message for word in ACTIVITY_TOKENS[activity_text]):
            for category, weight in dna.items():
                if weight and weight >= ACTIVITY_CATEGORY_MIN_WEIGHT:
                    detected.add(to_category(category))

    if detected:
        logger.debug(f"Detected categories {sorted(c.value for c in detected)} in message")
    return detected


def sort_categories(categories):
    """Categories in enumeration order (sets have no stable order for responses)."""
    return sorted(categories, key=lambda c: CATEGORY_ORDER[to_category(c)])
