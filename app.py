import os
import logging
from flask import Flask, jsonify
from config import get_config
from database.mongodb import MongoDB
from routes.quiz import quiz_bp
from routes.activities import activities_bp
from services.analytics_service import AnalyticsService
from services.quiz_scoring_service import QuizScoringService

logger = logging.getLogger(__name__)


def create_app(config_class=None):
    config_class = config_class or get_config()

    logging.basicConfig(
        level=logging.DEBUG if config_class.DEBUG else logging.INFO,
        format='%(asctime)s %(levelname)s - %(name)s - %(message)s'
    )

    app = Flask(__name__)
    app.config.from_object(config_class)

    # App-owned collaborators, created here instead of at import time
    mongo_db = MongoDB.from_config(app.config)
    app.extensions['mongo_db'] = mongo_db
    app.extensions['quiz_scoring_service'] = QuizScoringService(
        top_count=app.config['TOP_CATEGORY_COUNT']
    )
    app.extensions['analytics_service'] = AnalyticsService(
        mongo_db, enabled=app.config['ANALYTICS_ENABLED']
    )

    # Register blueprints
    app.register_blueprint(quiz_bp, url_prefix='/api/quiz')
    app.register_blueprint(activities_bp, url_prefix='/api/activities')

    @app.route('/health')
    def health():
        return jsonify({
            "status": "ok",
            "analytics": mongo_db is not None and app.config['ANALYTICS_ENABLED']
        })

    return app


if __name__ == '__main__':
    app = create_app()
    mongo_db = app.extensions['mongo_db']

    # Initialize database
    if mongo_db is not None:
        try:
            mongo_db.init_database()
            print("✅ Database initialized successfully")
        except Exception as e:
            print(f"❌ Database initialization failed: {e}")

    port = int(os.environ.get('PORT', 5000))
    try:
        app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'])
    finally:
        if mongo_db is not None:
            mongo_db.close()
