# services/quiz_scoring_service.py
import math
import logging
from copy import deepcopy
from models.category import DNACategory, CATEGORY_ORDER, get_category_metadata, to_category
from models.quiz_result import QuizResults
from questions.quiz_questions import QUIZ_QUESTIONS

logger = logging.getLogger(__name__)


class QuizValidationError(ValueError):
    """Raised when submitted answers do not fit the question list."""


CATEGORY_RECOMMENDATIONS = {
    DNACategory.ADVENTURE: [
        "התמקדו בפעילויות שמערבות אתגר פיזי ואדרנלין - הצוות שלכם אוהב להרגיש את הדופק עולה",
        "שלבו פעילויות מים עם אתגרים - זה יספק גם התרגשות וגם התקררות",
        "הוסיפו אלמנט תחרותי למשחקים - זה יעורר את רוח ההרפתקאות"
    ],
    DNACategory.NATURE: [
        "הקדישו זמן איכות לטבע - הצוות שלכם זקוק לחיבור עם הסביבה הטבעית",
        "בחרו במסלולים פנורמיים ונקודות תצפית - הנוף חשוב לכם",
        "שלבו הפסקות רגיעה בטבע בין הפעילויות האנרגטיות"
    ],
    DNACategory.HISTORY: [
        "הוסיפו הקשר היסטורי לפעילויות - הצוות שלכם מתחבר לסיפורים ולשורשים",
        "בקרו באתרים ארכיאולוגיים עם הדרכה מעמיקה",
        "שלבו משחקי תפקידים המבוססים על אירועים היסטוריים"
    ],
    DNACategory.CULINARY: [
        "תנו לחוויה הקולינרית מקום מרכזי - אוכל טוב חשוב לצוות שלכם",
        "בחרו בסדנאות בישול או טעימות מיוחדות",
        "הקפידו על מנות איכותיות וחוויות גסטרונומיות ייחודיות"
    ],
    DNACategory.SPORTS: [
        "שלבו תחרויות ומשחקי קבוצה - הצוות שלכם אוהב אתגרים ספורטיביים",
        "הוסיפו פעילויות שדורשות עבודת צוות וקואורדינציה",
        "בחרו באתגרים פיזיים מגוונים לאורך היום"
    ],
    DNACategory.CREATIVE: [
        "תנו מקום לביטוי יצירתי ואומנות - הצוות שלכם צריך ערוצי הבעה",
        "שלבו סדנאות יצירה או פעילויות אמנות",
        "עודדו חשיבה out-of-the-box במשימות הצוותיות"
    ],
    DNACategory.WELLNESS: [
        "דאגו לאיזון בין פעילויות לרגיעה - הצוות שלכם מעריך רווחה",
        "הוסיפו אלמנטים של מיינדפולנס ורוגע",
        "בחרו בפעילויות שמשלבות טיפוח גוף ונפש"
    ],
    DNACategory.TEAMBUILDING: [
        "בנו את היום סביב משימות משותפות - הצוות שלכם מחפש חיבור אמיתי",
        "שלבו סדנת ODT עם תחקיר מסכם בסוף היום",
        "תנו לכל משתתף תפקיד מוגדר במשימות הקבוצתיות"
    ]
}

GENERAL_RECOMMENDATIONS = [
    "שלבו זמנים לשיחות ושיתוף בין הפעילויות - זה מחזק את החיבור הצוותי",
    "התאימו את קצב היום לאנרגיה של הצוות - אל תדחסו יותר מדי"
]

MAX_RECOMMENDATIONS = 5


def round_half_up(value):
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


class QuizScoringService:
    """
    Service encapsulating Team DNA quiz scoring and the results insights.
    """

    def __init__(self, questions=None, top_count=3):
        # Load static question set once
        self.questions = deepcopy(questions if questions is not None else QUIZ_QUESTIONS)
        self.top_count = top_count

    # -------------------------
    # Public helpers for routes
    # -------------------------
    def get_questions(self):
        """Return questions including scores (server side only)."""
        return deepcopy(self.questions)

    def prepare_question_for_client(self, question, index):
        """
        Remove scoring weights before sending a question to the client.
        index is the 0-based position of the question in the quiz.
        """
        return {
            'id': question.get('id'),
            'number': index + 1,
            'question': question.get('question'),
            'answers': [
                {'index': i, 'text': answer.get('text'), 'icon': answer.get('icon')}
                for i, answer in enumerate(question.get('answers', []))
            ]
        }

    def get_client_questions(self):
        return [self.prepare_question_for_client(q, i) for i, q in enumerate(self.questions)]

    # -------------------------
    # Scoring
    # -------------------------
    def validate_answers(self, answers):
        """
        answers: one list (or set) of selected answer indices per question, by position.
        Fewer lists than questions is allowed (unanswered questions).
        """
        if not isinstance(answers, (list, tuple)):
            raise QuizValidationError("answers must be a list of per-question selections")
        if len(answers) > len(self.questions):
            raise QuizValidationError(
                f"Got selections for {len(answers)} questions but the quiz has {len(self.questions)}"
            )

        for q_index, selection in enumerate(answers):
            if not isinstance(selection, (list, tuple, set, frozenset)):
                raise QuizValidationError(
                    f"Selection for question {q_index + 1} must be a list or set of answer indices"
                )
            answer_count = len(self.questions[q_index].get('answers', []))
            for answer_index in selection:
                # bool is an int subclass; True must not silently mean answer 1
                if isinstance(answer_index, bool) or not isinstance(answer_index, int):
                    raise QuizValidationError(
                        f"Answer index {answer_index!r} for question {q_index + 1} is not an integer"
                    )
                if answer_index < 0 or answer_index >= answer_count:
                    raise QuizValidationError(
                        f"Answer index {answer_index} is out of range for question {q_index + 1} "
                        f"({answer_count} answers)"
                    )

    def calculate_scores(self, answers):
        """Raw per-category totals for validated answers."""
        scores = {category: 0 for category in DNACategory}

        for q_index, selection in enumerate(answers):
            question_answers = self.questions[q_index]['answers']
            # A selection is a set of indices
            for answer_index in sorted(set(selection)):
                for category, weight in question_answers[answer_index].get('scores', {}).items():
                    scores[to_category(category)] += weight

        return scores

    def calculate_percentages(self, scores):
        total = sum(scores.values())
        if total == 0:
            return {category: 0 for category in DNACategory}
        return {
            category: round_half_up(score * 100 / total)
            for category, score in scores.items()
        }

    def rank_categories(self, scores, percentages):
        """Percentage desc, then raw score desc, then enumeration order."""
        return sorted(
            DNACategory,
            key=lambda c: (-percentages.get(c, 0), -scores.get(c, 0), CATEGORY_ORDER[c])
        )

    def calculate_results(self, answers):
        """
        Calculate a QuizResults from per-question answer selections.
        Raises QuizValidationError for malformed input.
        """
        self.validate_answers(answers)

        scores = self.calculate_scores(answers)
        percentages = self.calculate_percentages(scores)
        top_categories = self.rank_categories(scores, percentages)[:self.top_count]

        logger.debug(f"Quiz scored: scores={scores}, top={top_categories}")
        return QuizResults(scores, percentages, top_categories)

    # -------------------------
    # Insights for the results page
    # -------------------------
    def get_category_breakdown(self, results):
        """All categories, ranked, each with display metadata and its percentage."""
        breakdown = []
        for category in self.rank_categories(results.scores, results.percentages):
            item = get_category_metadata(category)
            item['percentage'] = results.percentages.get(category, 0)
            item['score'] = results.scores.get(category, 0)
            breakdown.append(item)
        return breakdown

    def get_recommendations(self, top_categories):
        recommendations = []
        for category in top_categories:
            recommendations.extend(CATEGORY_RECOMMENDATIONS.get(to_category(category), [])[:2])
        recommendations.extend(GENERAL_RECOMMENDATIONS)
        return recommendations[:MAX_RECOMMENDATIONS]

    def get_balance_level(self, results):
        percentages = [results.percentages.get(c, 0) for c in DNACategory]
        spread = max(percentages) - min(percentages)

        if spread < 20:
            return "מצוין"
        if spread < 35:
            return "טוב"
        return "ממוקד"

    def get_main_recommendation(self, results):
        if not results.top_categories:
            return ""
        top_percentage = results.percentages.get(results.top_categories[0], 0)

        if top_percentage > 40:
            return "הצוות שלכם מאוד ממוקד בתחום אחד - שמרו על זה אבל שלבו גם מעט גיוון"
        if top_percentage < 25:
            return "הצוות שלכם מגוון מאוד - תוכלו ליהנות ממגוון רחב של פעילויות"
        return "יש לכם איזון טוב בין העדפות - זה יאפשר יום מגוון ומהנה לכולם"

    def build_insights(self, results):
        return {
            'breakdown': self.get_category_breakdown(results),
            'recommendations': self.get_recommendations(results.top_categories),
            'balance_level': self.get_balance_level(results),
            'main_recommendation': self.get_main_recommendation(results)
        }
