import json
import re
from models.quiz_result import QuizResults
from services.client_session import (
    CHAT_HISTORY_KEY,
    CLIENT_SESSION_KEY,
    QUIZ_RESULTS_KEY,
    QUIZ_RESULTS_SUMMARY_KEY,
    ClientSession,
    generate_session_id,
)

SESSION_ID_PATTERN = re.compile(r"^\d{13,}-[0-9a-z]{13}$")


def sample_results():
    return QuizResults(
        scores={"sports": 26, "adventure": 22, "history": 10},
        percentages={"sports": 45, "adventure": 38, "history": 17},
        top_categories=["sports", "adventure", "history"]
    )


def test_generate_session_id_format():
    first, second = generate_session_id(), generate_session_id()

    assert SESSION_ID_PATTERN.match(first)
    assert first != second


def test_new_client_is_reset():
    store = {QUIZ_RESULTS_KEY: "{}", CHAT_HISTORY_KEY: ["hi"], "unrelated": 1}
    client = ClientSession(store)

    assert client.check_and_reset_for_new_client() is True
    assert QUIZ_RESULTS_KEY not in store
    assert CHAT_HISTORY_KEY not in store
    assert store["unrelated"] == 1
    assert SESSION_ID_PATTERN.match(store[CLIENT_SESSION_KEY])


def test_returning_client_keeps_data():
    store = {}
    client = ClientSession(store)
    client.check_and_reset_for_new_client()
    client.save_quiz_results(sample_results())
    session_id = client.session_id

    assert ClientSession(store).check_and_reset_for_new_client() is False
    assert store[CLIENT_SESSION_KEY] == session_id
    assert ClientSession(store).load_quiz_results() == sample_results()


def test_saved_results_are_json_text():
    store = {}
    ClientSession(store).save_quiz_results(sample_results())

    stored = json.loads(store[QUIZ_RESULTS_KEY])
    assert stored["top_categories"] == ["sports", "adventure", "history"]
    assert stored["percentages"]["wellness"] == 0

    summary = json.loads(store[QUIZ_RESULTS_SUMMARY_KEY])
    assert summary["id"].startswith("quiz-")
    assert summary["top_categories"] == ["sports", "adventure", "history"]


def test_load_accepts_camel_case_payload():
    store = {QUIZ_RESULTS_KEY: json.dumps({
        "scores": {"nature": 3},
        "percentages": {"nature": 100},
        "topCategories": ["nature", "adventure", "history"]
    })}

    results = ClientSession(store).load_quiz_results()

    assert [c.value for c in results.top_categories] == ["nature", "adventure", "history"]


def test_load_without_results_returns_none():
    assert ClientSession({}).load_quiz_results() is None


def test_load_ignores_corrupt_results():
    for corrupt in ["not json", "[1, 2]", json.dumps({"top_categories": ["bowling"]})]:
        assert ClientSession({QUIZ_RESULTS_KEY: corrupt}).load_quiz_results() is None


def test_force_reset_clears_results_and_rotates_id():
    store = {}
    client = ClientSession(store)
    client.check_and_reset_for_new_client()
    old_id = client.session_id
    client.save_quiz_results(sample_results())

    new_id = client.force_reset()

    assert new_id != old_id
    assert client.session_id == new_id
    assert client.load_quiz_results() is None
    assert QUIZ_RESULTS_SUMMARY_KEY not in store
