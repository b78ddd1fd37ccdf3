import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

QUIZ_RESULTS_COLLECTION = 'quiz_results'


def _env_bool(name, default):
    return os.environ.get(name, default).lower() == 'true'


class Config:
    """Base configuration"""
    # Security - MUST be set in environment
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Debug mode - default to False for safety
    DEBUG = _env_bool('DEBUG', 'False')
    TESTING = False

    # MongoDB Configuration - required in production, optional elsewhere
    MONGO_URI = os.environ.get('MONGO_URI')
    MONGO_DB_NAME = os.environ.get('MONGO_DB_NAME', 'team_dna')
    MONGO_TIMEOUT_MS = int(os.environ.get('MONGO_TIMEOUT_MS', '3000'))

    # Analytics rows are written best-effort; disable to skip them entirely
    ANALYTICS_ENABLED = _env_bool('ANALYTICS_ENABLED', 'True')

    # Session configuration
    SESSION_PERMANENT = False

    # Quiz scoring / activity matching
    TOP_CATEGORY_COUNT = int(os.environ.get('TOP_CATEGORY_COUNT', '3'))
    ACTIVITY_MATCH_THRESHOLD = int(os.environ.get('ACTIVITY_MATCH_THRESHOLD', '3'))
    MAX_FILTERED_ACTIVITIES = int(os.environ.get('MAX_FILTERED_ACTIVITIES', '10'))

    REQUIRE_MONGO = False

    # Configuration validation
    @classmethod
    def validate(cls):
        """Validate that all required environment variables are set"""
        errors = []

        if not cls.SECRET_KEY:
            errors.append("SECRET_KEY is not set in environment variables")
        if cls.REQUIRE_MONGO and not cls.MONGO_URI:
            errors.append("MONGO_URI is not set in environment variables")

        if cls.DEBUG:
            logger.warning("⚠️ Debug mode is enabled. Disable in production!")
        if not cls.MONGO_URI:
            logger.warning("MONGO_URI not set - quiz analytics will not be recorded")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    REQUIRE_MONGO = True
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 1800


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class TestingConfig(Config):
    """Configuration used by the test suite"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    MONGO_URI = None
    ANALYTICS_ENABLED = True


CONFIG_MAP = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


# Determine which configuration to use based on environment
def get_config(env=None):
    """Get the appropriate configuration class based on environment"""
    env = env or os.environ.get('FLASK_ENV', 'development')
    config_class = CONFIG_MAP.get(env, CONFIG_MAP['default'])

    try:
        config_class.validate()
    except ValueError as e:
        logger.error(f"❌ Configuration Error: {e}")
        logger.error("💡 Make sure you have a .env file with all required variables")
        raise

    return config_class
