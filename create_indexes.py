# create_indexes.py
import os
import sys
from dotenv import load_dotenv
from pymongo.errors import PyMongoError

load_dotenv()

from database.mongodb import MongoDB
from config import QUIZ_RESULTS_COLLECTION


def create_indexes():
    """
    Create the quiz_results indexes used by the analytics queries
    """
    MONGO_URI = os.getenv('MONGO_URI')
    db_name = os.getenv('MONGO_DB_NAME', 'team_dna')

    if not MONGO_URI:
        print("❌ MONGO_URI not found in environment variables")
        print("Please create a .env file with MONGO_URI=your_connection_string")
        sys.exit(1)

    mongo_db = MongoDB(MONGO_URI, db_name)
    try:
        print("🔗 Connecting to MongoDB...")
        mongo_db.ping()

        collection = mongo_db.get_quiz_results_collection()
        count = collection.count_documents({})
        print(f"📊 Total documents in '{QUIZ_RESULTS_COLLECTION}' collection: {count}")

        mongo_db.init_database()

        print("📋 Current indexes:")
        for name, info in collection.index_information().items():
            print(f"   - {name}: {info.get('key')}")
    except PyMongoError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    finally:
        mongo_db.close()


if __name__ == "__main__":
    create_indexes()
