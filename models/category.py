# models/category.py
from enum import Enum
from typing import Dict, Union


class DNACategory(str, Enum):
    """Team DNA activity-preference categories.

    Declaration order is the enumeration order used to break ties.
    """
    ADVENTURE = "adventure"
    NATURE = "nature"
    HISTORY = "history"
    CULINARY = "culinary"
    SPORTS = "sports"
    CREATIVE = "creative"
    WELLNESS = "wellness"
    TEAMBUILDING = "teambuilding"


CATEGORY_ORDER = {category: position for position, category in enumerate(DNACategory)}


CATEGORY_METADATA: Dict[DNACategory, Dict[str, str]] = {
    DNACategory.ADVENTURE: {
        "name": "הרפתקאות ואקסטרים",
        "name_en": "Adventure & Extreme",
        "icon": "🚀",
        "description": "ג'יפים, אומגות, רפלינג ואתגרים שמעלים את הדופק",
        "color": "from-orange-500 to-red-600",
    },
    DNACategory.NATURE: {
        "name": "טבע ומים",
        "name_en": "Nature & Water",
        "icon": "🌿",
        "description": "מעיינות, נחלים ותצפיות נוף בגלבוע ובעמק",
        "color": "from-green-500 to-emerald-600",
    },
    DNACategory.HISTORY: {
        "name": "היסטוריה ומורשת",
        "name_en": "History & Heritage",
        "icon": "🏛️",
        "description": "בית שאן הרומית, פסיפסים וסיפורי המקרא",
        "color": "from-amber-500 to-yellow-700",
    },
    DNACategory.CULINARY: {
        "name": "קולינריה ויין",
        "name_en": "Culinary & Wine",
        "icon": "🍷",
        "description": "טעימות יין, סדנאות בישול ואוכל מקומי",
        "color": "from-rose-500 to-pink-600",
    },
    DNACategory.SPORTS: {
        "name": "ספורט ותחרות",
        "name_en": "Sports & Competition",
        "icon": "🏆",
        "description": "מרוצים, חתירה, חץ וקשת ומשחקי קבוצה",
        "color": "from-blue-500 to-indigo-600",
    },
    DNACategory.CREATIVE: {
        "name": "יצירה ואמנות",
        "name_en": "Creative & Art",
        "icon": "🎨",
        "description": "סדנאות יצירה, צילום ומוזיקה",
        "color": "from-purple-500 to-fuchsia-600",
    },
    DNACategory.WELLNESS: {
        "name": "רוגע ובריאות",
        "name_en": "Wellness & Relaxation",
        "icon": "🧘",
        "description": "יוגה, פינוק ומנוחה בטבע",
        "color": "from-teal-400 to-cyan-600",
    },
    DNACategory.TEAMBUILDING: {
        "name": "גיבוש צוותי",
        "name_en": "Team Building",
        "icon": "🤝",
        "description": "פעילויות ODT, מנהיגות ושיתוף פעולה",
        "color": "from-sky-500 to-blue-700",
    },
}


def to_category(value: Union[DNACategory, str]) -> DNACategory:
    """Coerce an enum member or its string value; unknown values raise ValueError."""
    if isinstance(value, DNACategory):
        return value
    try:
        return DNACategory(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown DNA category: {value!r}")


def get_category_metadata(category: Union[DNACategory, str]) -> Dict[str, str]:
    category = to_category(category)
    return dict(CATEGORY_METADATA[category], category=category.value)


def list_categories():
    """All categories with metadata, in enumeration order."""
    return [get_category_metadata(category) for category in DNACategory]
