# services/client_session.py
import json
import time
import uuid
import logging
from models.quiz_result import QuizResults

logger = logging.getLogger(__name__)

CLIENT_SESSION_KEY = 'client_session_id'
QUIZ_RESULTS_KEY = 'team_dna_results'
QUIZ_RESULTS_SUMMARY_KEY = 'quiz_results'
CHAT_HISTORY_KEY = 'chat_history'

_BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


def _now_ms():
    return int(time.time() * 1000)


def _base36(number):
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return ''.join(reversed(digits)) or '0'


def generate_session_id():
    """<unix ms>-<13 random base36 chars>"""
    random_part = _base36(uuid.uuid4().int).rjust(13, '0')[:13]
    return f"{_now_ms()}-{random_part}"


class ClientSession:
    """
    Per-client state kept in a mutable mapping (the Flask session in the web layer).
    Create one per request around the store; nothing is kept at module level.
    """

    def __init__(self, store):
        self.store = store

    @property
    def session_id(self):
        return self.store.get(CLIENT_SESSION_KEY)

    def _clear_client_data(self):
        for key in (QUIZ_RESULTS_KEY, QUIZ_RESULTS_SUMMARY_KEY, CHAT_HISTORY_KEY):
            self.store.pop(key, None)

    def _start_new_session(self):
        new_id = generate_session_id()
        self.store[CLIENT_SESSION_KEY] = new_id
        return new_id

    def check_and_reset_for_new_client(self):
        """Returns True when a new client was detected and its data reset."""
        existing = self.session_id
        if existing:
            logger.debug(f"[ClientSession] Existing session found: {existing}")
            return False

        logger.info("[ClientSession] New client detected, resetting quiz and chat data")
        self._clear_client_data()
        new_id = self._start_new_session()
        logger.info(f"[ClientSession] New session created: {new_id}")
        return True

    def force_reset(self):
        self._clear_client_data()
        self.store.pop(CLIENT_SESSION_KEY, None)
        new_id = self._start_new_session()
        logger.info(f"[ClientSession] Forced reset, new session: {new_id}")
        return new_id

    # -------------------------
    # Stored quiz results
    # -------------------------
    def save_quiz_results(self, results):
        """A new quiz run overwrites the previous result."""
        self.store[QUIZ_RESULTS_KEY] = results.to_json()
        self.store[QUIZ_RESULTS_SUMMARY_KEY] = json.dumps({
            'id': f"quiz-{_now_ms()}",
            'top_categories': [c.value for c in results.top_categories],
            'percentages': results.to_dict()['percentages']
        }, ensure_ascii=False)

    def load_quiz_results(self):
        stored = self.store.get(QUIZ_RESULTS_KEY)
        if not stored:
            return None
        try:
            return QuizResults.from_json(stored)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"[ClientSession] Ignoring unreadable stored quiz results: {e}")
            return None
