# models/quiz_result.py
import json
import uuid
from datetime import datetime, timezone
from pymongo import DESCENDING
from models.category import DNACategory, to_category


class QuizResults:
    """Per-category raw scores, rounded percentages and the top-ranked categories."""

    def __init__(self, scores, percentages, top_categories):
        # Every category is always present; missing ones count as 0
        self.scores = {c: 0 for c in DNACategory}
        self.scores.update({to_category(k): int(v) for k, v in scores.items()})
        self.percentages = {c: 0 for c in DNACategory}
        self.percentages.update({to_category(k): int(v) for k, v in percentages.items()})
        self.top_categories = [to_category(c) for c in top_categories]

    def __eq__(self, other):
        if not isinstance(other, QuizResults):
            return NotImplemented
        return (self.scores == other.scores
                and self.percentages == other.percentages
                and self.top_categories == other.top_categories)

    def __repr__(self):
        top = [c.value for c in self.top_categories]
        return f"QuizResults(top_categories={top})"

    def to_dict(self):
        return {
            'scores': {c.value: self.scores[c] for c in DNACategory},
            'percentages': {c.value: self.percentages[c] for c in DNACategory},
            'top_categories': [c.value for c in self.top_categories]
        }

    @classmethod
    def from_dict(cls, data):
        # Older client payloads used camelCase for the ranking
        top = data.get('top_categories')
        if top is None:
            top = data.get('topCategories', [])
        return cls(
            scores=data.get('scores', {}),
            percentages=data.get('percentages', {}),
            top_categories=top
        )

    def to_json(self):
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text):
        return cls.from_dict(json.loads(text))


class QuizResultRecord:
    """Analytics row for a completed quiz, stored in the quiz_results collection."""

    def __init__(self, record_data):
        self.id = record_data.get('id') or str(uuid.uuid4())
        self.session_id = record_data.get('session_id')
        self.user_id = record_data.get('user_id')
        self.scores = record_data.get('scores', {})
        self.percentages = record_data.get('percentages', {})
        self.top_categories = record_data.get('top_categories', [])
        self.created_at = record_data.get('created_at', datetime.now(timezone.utc))

    @classmethod
    def from_results(cls, results, session_id=None, user_id=None):
        data = results.to_dict()
        data['session_id'] = session_id
        data['user_id'] = user_id
        return cls(data)

    def to_dict(self):
        return {
            'id': self.id,
            'session_id': self.session_id,
            'user_id': self.user_id,
            'scores': self.scores,
            'percentages': self.percentages,
            'top_categories': self.top_categories,
            'created_at': self.created_at
        }

    def to_results(self):
        return QuizResults(self.scores, self.percentages, self.top_categories)

    def create(self, collection):
        """Insert this record into the given collection"""
        collection.insert_one(self.to_dict())
        return self

    @classmethod
    def get_latest_for_session(cls, collection, session_id):
        """Most recent record written for a client session"""
        record_data = collection.find_one(
            {"session_id": session_id},
            sort=[("created_at", DESCENDING)]
        )
        if record_data:
            return cls(record_data)
        return None
