"""Tests for steadyday/personality/results.py

One stored quiz result per user; retaking replaces it.
"""

from datetime import datetime, timezone

from steadyday.personality.classifier import QUESTION_BANK
from steadyday.personality.results import get_result, list_questions, save_result, take_quiz


NOW = datetime(2025, 3, 14, 9, 0, tzinfo=timezone.utc)


class TestSaveResult:
    """Tests for storing a known type."""

    def test_snapshots_profile(self, steadyday_db, mock_user_id):
        result = save_result(mock_user_id, 7, wing=8, now=NOW)

        assert result["success"] is True
        stored = result["data"]["result"]
        assert stored["type"] == 7
        assert stored["wing"] == 8
        assert stored["name"] == "The Enthusiast"
        assert len(stored["growth_tips"]) == 5

    def test_second_save_replaces(self, steadyday_db, mock_user_id):
        first = save_result(mock_user_id, 2, now=NOW)
        second = save_result(mock_user_id, 9, now=NOW)

        assert second["data"]["created"] is False
        assert second["data"]["result_id"] == first["data"]["result_id"]
        assert get_result(mock_user_id)["type"] == 9

    def test_rejects_invalid_type(self, steadyday_db, mock_user_id):
        assert save_result(mock_user_id, 10)["success"] is False
        assert save_result(mock_user_id, 3, wing=0)["success"] is False

    def test_no_result_before_quiz(self, steadyday_db, mock_user_id):
        assert get_result(mock_user_id) is None


class TestTakeQuiz:
    """Tests for classify-and-store."""

    def test_stores_dominant_type_and_scores(self, steadyday_db, mock_user_id):
        answers = [5 if q.category == 5 else 2 for q in QUESTION_BANK]

        result = take_quiz(mock_user_id, answers, now=NOW)

        assert result["success"] is True
        assert result["data"]["result"]["type"] == 5
        assert result["data"]["result"]["answers"] == answers
        assert result["data"]["scores"][5] == 10

    def test_empty_answers_is_an_error(self, steadyday_db, mock_user_id):
        result = take_quiz(mock_user_id, [])

        assert result["success"] is False
        assert get_result(mock_user_id) is None

    def test_invalid_answers_store_nothing(self, steadyday_db, mock_user_id):
        result = take_quiz(mock_user_id, [3, 9, 3])

        assert result["success"] is False
        assert get_result(mock_user_id) is None


def test_list_questions_in_order():
    questions = list_questions()

    assert [q["id"] for q in questions] == list(range(1, 19))
    assert questions[0]["type"] == 1
