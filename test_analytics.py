from datetime import datetime, timedelta, timezone
from models.quiz_result import QuizResultRecord
from services.analytics_service import AnalyticsService
from services.quiz_scoring_service import QuizScoringService


def completed_quiz():
    return QuizScoringService().calculate_results([[0]] * 8)


def test_record_quiz_result_inserts_a_row(fake_mongo):
    service = AnalyticsService(fake_mongo)

    record = service.record_quiz_result(completed_quiz(), session_id="123-abc", user_id="u1")

    assert record is not None
    documents = fake_mongo.collection.documents
    assert len(documents) == 1
    assert documents[0]["id"] == record.id
    assert documents[0]["session_id"] == "123-abc"
    assert documents[0]["user_id"] == "u1"
    assert documents[0]["top_categories"] == ["sports", "adventure", "history"]
    assert documents[0]["percentages"]["sports"] == 37
    assert documents[0]["scores"]["teambuilding"] == 5
    assert isinstance(documents[0]["created_at"], datetime)


def test_database_failure_is_swallowed(failing_mongo):
    service = AnalyticsService(failing_mongo)

    assert service.record_quiz_result(completed_quiz(), session_id="123-abc") is None


def test_no_database_skips_recording():
    assert AnalyticsService(None).record_quiz_result(completed_quiz(), session_id="x") is None


def test_disabled_analytics_writes_nothing(fake_mongo):
    service = AnalyticsService(fake_mongo, enabled=False)

    assert service.record_quiz_result(completed_quiz(), session_id="x") is None
    assert fake_mongo.collection.documents == []


def test_get_latest_for_session(fake_mongo):
    collection = fake_mongo.collection
    now = datetime.now(timezone.utc)
    QuizResultRecord({"session_id": "s1", "top_categories": ["nature"],
                      "created_at": now - timedelta(minutes=5)}).create(collection)
    QuizResultRecord({"session_id": "s1", "top_categories": ["culinary"],
                      "created_at": now}).create(collection)
    QuizResultRecord({"session_id": "s2", "top_categories": ["sports"],
                      "created_at": now}).create(collection)

    latest = QuizResultRecord.get_latest_for_session(collection, "s1")

    assert latest.top_categories == ["culinary"]
    assert QuizResultRecord.get_latest_for_session(collection, "missing") is None


def test_record_round_trips_to_results():
    results = completed_quiz()
    record = QuizResultRecord.from_results(results, session_id="s1")

    assert record.to_results() == results
