# services/activity_filtering.py
import logging
from typing import Dict, List, Optional
import numpy as np
from models.category import to_category
from models.quiz_result import QuizResults
from questions.activity_dna import get_activity_dna

logger = logging.getLogger(__name__)

MULTI_MATCH_BONUS = 2
DEFAULT_MATCH_THRESHOLD = 3


def _priority_weights(count: int) -> np.ndarray:
    # First top category weighs 3, then 2, then 1
    return np.arange(3, 3 - count, -1, dtype=float)


def score_activity(activity_text: str, quiz_results: QuizResults) -> Dict:
    """Relevance of a single activity to the quiz's top categories."""
    top_categories = quiz_results.top_categories[:3]
    dna = {to_category(k): v for k, v in get_activity_dna(activity_text).items()}

    dna_vector = np.array([dna.get(c, 0) for c in top_categories], dtype=float)
    matched = [c for c, weight in zip(top_categories, dna_vector) if weight > 0]

    relevance = float(np.dot(dna_vector, _priority_weights(len(top_categories))))
    if len(matched) > 1:
        relevance += len(matched) * MULTI_MATCH_BONUS

    return {
        'relevance_score': int(relevance),
        'matched_categories': [c.value for c in matched]
    }


def filter_activities_by_dna(activities: List[str], quiz_results: QuizResults,
                             max_activities: int = 10) -> List[Dict]:
    """
    Rank activities by relevance to the top categories.
    Activities with no overlap are dropped; ties keep the input order.
    """
    scored = []
    for index, activity in enumerate(activities):
        result = score_activity(activity, quiz_results)
        if result['relevance_score'] > 0:
            scored.append({
                'text': activity,
                'index': index,
                'relevance_score': result['relevance_score'],
                'matched_categories': result['matched_categories']
            })

    scored.sort(key=lambda item: -item['relevance_score'])
    logger.info(f"Filtered {len(activities)} activities down to {min(len(scored), max_activities)}")
    return scored[:max_activities]


def should_show_activity(activity_text: str, quiz_results: Optional[QuizResults],
                         threshold: int = DEFAULT_MATCH_THRESHOLD) -> bool:
    """Without quiz results everything is shown."""
    if quiz_results is None:
        return True

    dna = {to_category(k): v for k, v in get_activity_dna(activity_text).items()}
    return any(dna.get(category, 0) >= threshold for category in quiz_results.top_categories)
