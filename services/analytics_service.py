# services/analytics_service.py
import logging
from models.quiz_result import QuizResultRecord

logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Best-effort recording of completed quizzes. Failures are logged and
    never reach the caller; nothing is retried.
    """

    def __init__(self, mongo_db=None, enabled=True):
        self.mongo_db = mongo_db
        self.enabled = enabled

    def record_quiz_result(self, results, session_id, user_id=None):
        """Returns the stored record, or None when it could not be written."""
        if not self.enabled:
            return None
        if self.mongo_db is None:
            logger.debug("No database configured, skipping quiz analytics")
            return None

        try:
            record = QuizResultRecord.from_results(results, session_id=session_id, user_id=user_id)
            record.create(self.mongo_db.get_quiz_results_collection())
            logger.info(f"Recorded quiz result {record.id} for session {session_id}")
            return record
        except Exception as e:
            # Analytics must not block the user flow
            logger.warning(f"Failed to record quiz analytics for session {session_id}: {e}")
            return None
