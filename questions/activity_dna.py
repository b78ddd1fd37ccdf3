# questions/activity_dna.py
import re

# Activity description -> category weights (1-5). Keys are the exact texts
# shown in the four sections of the day planner.
ACTIVITY_DNA_MAP = {
    # Morning opening: energy, icebreakers and adventure
    "הליכת בשביל המים לאורך נחל הקיבוצים (ראלי מכשולים צוותי) - מומלץ מאד":
        {"nature": 5, "teambuilding": 4, "adventure": 3, "sports": 2},
    "אתגר רכבי שטח דרך גבעות הגלבוע":
        {"adventure": 5, "nature": 3, "sports": 2},
    "שיירת ג'יפים דרך עמק בית שאן":
        {"adventure": 5, "nature": 3, "history": 1},
    "ביקור בבית אהרון אהרונסון (רוכש וגואל אדמות הארץ)":
        {"history": 5},
    "חוויית כדור פורח בשחר מעל העמק ובריכות הדגים":
        {"adventure": 4, "nature": 4, "wellness": 2},
    "תחרות התמצאות ביער בית אלפא - וצפייה בשקנאים שעוברים בשבר סורי אפריקאי":
        {"sports": 4, "nature": 4, "teambuilding": 3},
    "מסלול הרים בפארק חרוד - הקרב של עין ג'אלוט נגד המונגולים":
        {"nature": 4, "history": 4, "sports": 2},
    "ריצת שליחים לאורך קניון הבזלת של בית שאן":
        {"sports": 5, "teambuilding": 3, "nature": 2},
    "מרוץ קיאקים צוותי באתר ירדנית":
        {"sports": 4, "adventure": 4, "nature": 3, "teambuilding": 3},
    "רכיבה על סוסים עם תחנות עבודת צוות":
        {"teambuilding": 4, "nature": 3, "adventure": 3},
    "קרב פיינטבול: תרחיש 'כבוש את העמק!' - בניר דוד":
        {"adventure": 5, "sports": 4, "teambuilding": 3},
    "תחרות חץ וקשת במי נחל הקיבוצים":
        {"sports": 5, "nature": 3},
    "אתגר rappelling וטיפוס בצוקי הר הגלבוע":
        {"adventure": 5, "sports": 3, "nature": 2},
    "משיכת חבל על דשאי מעיין חרוד":
        {"sports": 4, "teambuilding": 4},
    "פארק מכשולי מים מתנפחים (התקנה ניידת ליד גן השלושה)":
        {"adventure": 4, "sports": 3, "nature": 2},
    "יוגה קבוצתית או מתיחת כוח בחוץ ליד המעיינות":
        {"wellness": 5, "nature": 3},
    "תחרות חתירה בכנרת (סירות או קיאקים)":
        {"sports": 5, "nature": 3, "teambuilding": 3},
    "ציד אוצר - משימה יצירתית ברחבי העמק":
        {"creative": 4, "teambuilding": 4, "adventure": 2},
    "פעילות זיפליין וגשר חבלים":
        {"adventure": 5, "sports": 2},
    "חקירת רכס הגלבוע הנופי ברכבי שטח":
        {"adventure": 4, "nature": 4},
    "שליחי צוות 'מירוץ למיליון: מהדורת הגלבוע' עם רמזים היסטוריים":
        {"teambuilding": 5, "history": 3, "sports": 3},
    "לייזר טאג או קרב כדורי צבע בשדות":
        {"adventure": 4, "sports": 4},
    "ציד אוצר בטבע עם רמזים הקשורים לסיפורים המקראיים של הגלבוע":
        {"history": 4, "nature": 3, "teambuilding": 3, "creative": 2},
    "'מצא את חרב המלך שאול' משחק חידות היסטורי (מבוסס סיפור)":
        {"history": 5, "creative": 3, "teambuilding": 3},
    "טיול קצר לתצפית פסגת הגלבוע לשיחת פתיחה וקפה":
        {"nature": 4, "wellness": 2},

    # Midday cool-down: springs, water and rest
    "אתגר רכבים חשמלים דרך 4 מעיינות-ניווט לרגלי הגלבוע המערבי - מומלץ מאד":
        {"adventure": 4, "nature": 4, "teambuilding": 3},
    "שחייה בגן השלושה (סחנה)":
        {"nature": 5, "wellness": 4},
    "פיקניק תחת עצי דקל ליד מעיין עין מודע":
        {"nature": 4, "culinary": 3, "wellness": 3},
    "בניית צוות 'אתגר בניית רפסודה' במעיין רדוד":
        {"teambuilding": 5, "creative": 3, "nature": 2},
    "מרוץ שליחים בין צינורות נחל הקיבוצים":
        {"sports": 4, "nature": 3, "adventure": 2},
    "גלישת סאפ במקטע הרגוע של נהר הירדן":
        {"nature": 4, "sports": 3, "wellness": 2},
    "שיעור יוגה במעיינות הגלבוע":
        {"wellness": 5, "nature": 3},
    "משחקי מים מיני-אולימפיים בדשאי גן השלושה":
        {"sports": 4, "nature": 3, "teambuilding": 3},
    "תחרות 'שף המעיין' – אפיית לחם על אבנים טבעיות":
        {"culinary": 5, "teambuilding": 3, "creative": 2},
    "הקמת אזור חברתי לערסלים וקפה קר":
        {"wellness": 5, "culinary": 2},
    "פינת עיסוי עם מטפלים מקצועיים (רוטציה קבוצתית)":
        {"wellness": 5},
    "סדנת גוף-נפש: 'ממתח לזרימה'":
        {"wellness": 5, "creative": 2},
    "תחרות צילום נושאי פלורה פאונה ומים בסחנה":
        {"creative": 5, "nature": 4},
    "קרב בלוני מים (תמיד כיף לצוותי משרד!)":
        {"sports": 3, "teambuilding": 3, "adventure": 2},
    "קיאקים ואתגר חתירה קבוצתי - קצה דרום הכנרת":
        {"sports": 4, "adventure": 3, "nature": 3, "teambuilding": 3},
    "מעגל מוזיקה אקוסטית באוויר הפתוח ליד המעיין":
        {"creative": 5, "wellness": 3},
    "מפגש מיינדפולנס תחת עצי אקליפטוס":
        {"wellness": 5, "nature": 3},
    "פינת אמנות יצירתית: 'צייר את המעיין'":
        {"creative": 5, "nature": 2},
    "בר מיצים טריים וסמוזי המופעל על ידי חברי הצוות":
        {"culinary": 4, "teambuilding": 3},
    "'אתגר שקט' – תקשורת ללא מילים במהלך הליכת הנהר":
        {"teambuilding": 5, "nature": 3, "wellness": 2},
    "זמן מדיטציה והתבוננות ליד נחל הקיבוצים":
        {"wellness": 5, "nature": 4},
    "טעימת בירה מקררת ממבשלת בירה מקומית":
        {"culinary": 5},
    "פעילות טיפול בוץ טבעי (כיף וידידותי לצילום)":
        {"wellness": 4, "nature": 3, "creative": 2},
    "הליכה יחפה קלה לאורך נתיב תעלת המים":
        {"nature": 4, "wellness": 4},
    "'אתגר זן ליחפים – תחרות איזון על אבנים עגלגלות ליד המעיינות החמים, טבריה":
        {"wellness": 4, "sports": 3, "nature": 3},

    # History and identity
    "סיור מודרך באמפי תאטרון של העיר הרומית בית שאן (סקיתופוליס) - מומלץ מאד":
        {"history": 5, "creative": 2},
    "חקור את פסיפס בית הכנסת בית אלפא וסמליותו":
        {"history": 5, "creative": 3},
    "ביקור בגן הזיכרון לאסף שמיר ודובי שמיר אב ובנו שנפלו בקרב- גילבוע":
        {"history": 5},
    "סיור מודרך בעיר הרומית בית שאן (סקיתופוליס)":
        {"history": 5},
    "עצירה בתצפית הר הגלבוע – הסיפור של הקרב האחרון של המלך שאול":
        {"history": 5, "nature": 3},
    "ביקור במוזיאון האמנות של קיבוץ עין חרוד (הפסקה יצירתית)":
        {"creative": 5, "history": 3},
    "מעגל סיפורים: 'ממלכות שאול לעם הסטארטאפים – מנהיגות לאורך הדורות'":
        {"history": 4, "teambuilding": 4},
    "ביקור בגן גארו אוסטרלי לכיף קל":
        {"nature": 4, "wellness": 2},
    "ביקור בחוות חלב קיבוצית מקומית – טעימה, למידה וצחוק":
        {"culinary": 4, "history": 2, "nature": 2},
    "מפגש סיפור מקראי על רכס הגלבוע - ממלכת שאול":
        {"history": 5, "nature": 2},
    "'מצא את הפסוק המוסתר' – משחק היסטורי אינטראקטיבי":
        {"history": 4, "teambuilding": 3, "creative": 2},
    "מפלי מים גועשים ישרות לכינרת-פנינת חמדה":
        {"nature": 5},
    "תחרות טריוויה היסטורית עם פרסים":
        {"history": 4, "teambuilding": 3},
    "ביקור במוזיאון בסחנה (יישובים עתיקים בעמק)":
        {"history": 5},
    "ביקור במוזיאון חומה ומגדל בניר דוד":
        {"history": 5},
    "פעילות 'קפסולת זמן' – השוואה בין עבודת צוות עתיקה ומודרנית":
        {"teambuilding": 4, "history": 3, "creative": 3},
    "ביקור במרחצאות הרומיים של חמת גדר (הרחבה אופציונלית)":
        {"history": 4, "wellness": 4},
    "דיון מנהיגות: 'מה צוותים מודרניים יכולים ללמוד מהקיבוץ?'":
        {"teambuilding": 5, "history": 3},

    # Culinary, wine and celebration
    "חוויה קולינרית: ארוחה עשירה במסעדה כשרה עם אוכל מזרחי אותנטי - בבית שאן- מומלץ מאד":
        {"culinary": 5},
    "טעימת יין ביקב בוטיק מקומי (רמת שירין, עמק יזרעאל) + כריכי איכות מפנקים":
        {"culinary": 5, "wellness": 2},
    "סדנת שמן זית וטעימה + כריכי איכות מפנקים":
        {"culinary": 5, "creative": 2},
    "תחרות בניית טבון בטבע 'אתגר חביטות של מאסטר שף הצוות' + כריכי איכות מפנקים":
        {"culinary": 4, "teambuilding": 4, "nature": 2},
    "'מסע טעמים בגליל' – טעימה עיוורת של מוצרים מקומיים + כריכי איכות מפנקים":
        {"culinary": 5},
    "אתגר בישול פויקה מסורתי (צוותים מתחרים) + כריכי איכות מפנקים":
        {"culinary": 5, "teambuilding": 4, "sports": 2},
    "פינת בריבקיו בנה-אכול שלך ליד המים + כריכי איכות מפנקים":
        {"culinary": 4, "nature": 3},
    "מזנון צהריים קיבוצי – תוצרת מקומית עונתית בניר דוד + כריכי איכות מפנקים":
        {"culinary": 5, "history": 2},
    "אתגר קינוחים צוותי עם תמרים, דבש ויוגורט מקומיים + כריכי איכות מפנקים":
        {"culinary": 4, "teambuilding": 3, "creative": 3},
    "מפגש טעימת בירה מקומית + כריכי איכות מפנקים":
        {"culinary": 5},
    "ביקור בחוות תמרים – 'מהדקל לצלחת' - במושבה כנרת + כריכי איכות מפנקים":
        {"culinary": 4, "nature": 3, "history": 2},
    "ביקור בחוות גבינות עיזים – טעימה והדגמת חליבה + כריכי איכות מפנקים":
        {"culinary": 5, "nature": 2},
    "ארוחת פיקניק בדשאי מעיין חרוד + כריכי איכות מפנקים":
        {"culinary": 4, "nature": 3, "wellness": 2},
    "תחרות יצירת בר מיצים + כריכי איכות מפנקים":
        {"creative": 4, "culinary": 3, "teambuilding": 3},
    "תחרות צילום לאורך היום + כריכי איכות מפנקים":
        {"creative": 5},
    "'יין וחוכמה' – דיון קבוצתי לא פורמלי על יין מקומי + כריכי איכות מפנקים":
        {"culinary": 4, "teambuilding": 3},
    "סדנת אפיית פיתה בתנורי טאבון + כריכי איכות מפנקים":
        {"culinary": 5, "creative": 2},
    "שיעור הכנת חומוס אותנטי – אתגר קבוצתי + כריכי איכות מפנקים":
        {"culinary": 5, "teambuilding": 3},
    "בישול עם עשבי תיבול מגינות מקומיות + כריכי איכות מפנקים":
        {"culinary": 5, "nature": 2},
    "'סיומים מתוקים' – שוקולד, חלווה או פירות מפסגת הגלבוע - תצפית נופית + כריכי איכות מפנקים":
        {"culinary": 4, "nature": 3},
    "טקס טוסט צוותי – 'לחיים לשיתוף פעולה!' - בעין מגדל + כריכי איכות מפנקים":
        {"teambuilding": 4, "culinary": 3},
}


def _normalize(text):
    return re.sub(r"\s+", " ", text or "").strip().lower()


_NORMALIZED_DNA_MAP = {_normalize(text): dna for text, dna in ACTIVITY_DNA_MAP.items()}


def get_activity_dna(activity_text):
    """Category weights for an activity text; unknown activities get an empty dict."""
    dna = ACTIVITY_DNA_MAP.get(activity_text)
    if dna is None:
        dna = _NORMALIZED_DNA_MAP.get(_normalize(activity_text), {})
    return dict(dna)
