# routes/activities.py
import logging
from flask import Blueprint, request, jsonify, session, current_app
from services.activity_filtering import filter_activities_by_dna, should_show_activity
from services.category_detector import detect_categories_in_message, sort_categories
from services.client_session import ClientSession

logger = logging.getLogger(__name__)

activities_bp = Blueprint('activities', __name__)


@activities_bp.route('/filter', methods=['POST'])
def filter_activities():
    """
    Expected payload:
    {
      activities: ["activity text", ...],
      max_activities: optional int
    }
    Without stored quiz results every activity is returned, unranked.
    """
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object expected"}), 400
        activities = data.get('activities')
        if not isinstance(activities, list) or not all(isinstance(a, str) for a in activities):
            return jsonify({"error": "activities must be a list of strings"}), 400

        max_activities = data.get('max_activities', current_app.config['MAX_FILTERED_ACTIVITIES'])
        if isinstance(max_activities, bool) or not isinstance(max_activities, int) or max_activities < 1:
            return jsonify({"error": "max_activities must be a positive integer"}), 400

        results = ClientSession(session).load_quiz_results()
        if results is None:
            return jsonify({
                "success": True,
                "personalized": False,
                "activities": [
                    {"text": text, "index": i, "relevance_score": 0, "matched_categories": []}
                    for i, text in enumerate(activities)
                ]
            })

        threshold = current_app.config['ACTIVITY_MATCH_THRESHOLD']
        ranked = filter_activities_by_dna(activities, results, max_activities)
        for item in ranked:
            item['recommended'] = should_show_activity(item['text'], results, threshold)

        return jsonify({
            "success": True,
            "personalized": True,
            "top_categories": [c.value for c in results.top_categories],
            "activities": ranked
        })
    except Exception as e:
        logger.exception("Failed to filter activities")
        return jsonify({"error": str(e)}), 500


@activities_bp.route('/detect-categories', methods=['POST'])
def detect_categories():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object expected"}), 400
    message = data.get('message', '')
    if message is not None and not isinstance(message, str):
        return jsonify({"error": "message must be a string"}), 400

    categories = sort_categories(detect_categories_in_message(message))
    return jsonify({
        "success": True,
        "categories": [c.value for c in categories]
    })
