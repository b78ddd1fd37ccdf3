# database/mongodb.py
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.server_api import ServerApi
from config import QUIZ_RESULTS_COLLECTION
import logging

logger = logging.getLogger(__name__)


class MongoDB:
    """
    Connection owned by the Flask app (app.extensions['mongo_db']).
    The client connects lazily, so constructing it does no network I/O.
    """

    def __init__(self, uri, db_name, timeout_ms=3000):
        # For MongoDB Atlas with SRV connection string
        self.client = MongoClient(
            uri,
            server_api=ServerApi('1'),
            retryWrites=True,
            w='majority',
            connect=False,
            serverSelectionTimeoutMS=timeout_ms
        )
        self.db = self.client[db_name]

    @classmethod
    def from_config(cls, config):
        if not config.get('MONGO_URI'):
            return None
        return cls(config['MONGO_URI'], config['MONGO_DB_NAME'], config.get('MONGO_TIMEOUT_MS', 3000))

    def ping(self):
        """Raises if the server is unreachable"""
        self.client.admin.command('ping')
        logger.info("✅ Successfully connected to MongoDB")

    def get_quiz_results_collection(self):
        return self.db[QUIZ_RESULTS_COLLECTION]

    def init_database(self):
        """Create indexes for the quiz_results collection"""
        try:
            collection = self.get_quiz_results_collection()
            collection.create_index("id", unique=True)
            collection.create_index("session_id")
            collection.create_index([("created_at", DESCENDING)])
            collection.create_index([("top_categories", ASCENDING)])

            logger.info("✅ Database initialized with quiz_results indexes")

        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            raise

    def close(self):
        self.client.close()
