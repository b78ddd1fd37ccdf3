# routes/quiz.py
import logging
from flask import Blueprint, request, jsonify, session, current_app
from models.category import list_categories, get_category_metadata
from services.client_session import ClientSession
from services.quiz_scoring_service import QuizValidationError

logger = logging.getLogger(__name__)

quiz_bp = Blueprint('quiz', __name__)


def _scoring_service():
    return current_app.extensions['quiz_scoring_service']


def _client_session():
    client = ClientSession(session)
    client.check_and_reset_for_new_client()
    return client


@quiz_bp.route('/questions', methods=['GET'])
def get_questions():
    try:
        _client_session()
        return jsonify({"success": True, "questions": _scoring_service().get_client_questions()})
    except Exception as e:
        logger.exception("Failed to load quiz questions")
        return jsonify({"error": str(e)}), 500


@quiz_bp.route('/categories', methods=['GET'])
def get_categories():
    return jsonify({"success": True, "categories": list_categories()})


@quiz_bp.route('/submit', methods=['POST'])
def submit_quiz():
    """
    Expected payload:
    {
      answers: [[0], [2], [1], ...],   one list of answer indices per question
      user_id: optional
    }
    """
    try:
        client = _client_session()
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object expected"}), 400

        if 'answers' not in data:
            return jsonify({"error": "Missing answers"}), 400

        results = _scoring_service().calculate_results(data['answers'])

        # Stored locally first; analytics is best-effort and never fails the request
        client.save_quiz_results(results)
        record = current_app.extensions['analytics_service'].record_quiz_result(
            results,
            session_id=client.session_id,
            user_id=data.get('user_id')
        )

        top_details = []
        for category in results.top_categories:
            item = get_category_metadata(category)
            item['percentage'] = results.percentages.get(category, 0)
            top_details.append(item)

        return jsonify({
            "success": True,
            "results": results.to_dict(),
            "top_categories_detail": top_details,
            "quiz_result_id": record.id if record else None,
            "session_id": client.session_id,
            "message": "Team DNA quiz completed successfully"
        })
    except QuizValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Failed to score quiz")
        return jsonify({"error": str(e)}), 500


@quiz_bp.route('/results', methods=['GET'])
def get_results():
    try:
        results = _client_session().load_quiz_results()
        if results is None:
            return jsonify({"error": "No quiz results found"}), 404

        return jsonify({
            "success": True,
            "results": results.to_dict(),
            "insights": _scoring_service().build_insights(results)
        })
    except Exception as e:
        logger.exception("Failed to load quiz results")
        return jsonify({"error": str(e)}), 500


@quiz_bp.route('/reset', methods=['POST'])
def reset_client():
    new_id = ClientSession(session).force_reset()
    return jsonify({"success": True, "session_id": new_id})
