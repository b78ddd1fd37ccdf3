import pytest
from pymongo.errors import ServerSelectionTimeoutError
from app import create_app
from config import TestingConfig


class FakeCollection:
    """In-memory stand-in for a pymongo collection"""

    def __init__(self):
        self.documents = []

    def insert_one(self, document):
        self.documents.append(dict(document))

    def find_one(self, query, sort=None):
        matches = [d for d in self.documents
                   if all(d.get(k) == v for k, v in query.items())]
        if sort:
            field, direction = sort[0]
            matches.sort(key=lambda d: d[field], reverse=direction < 0)
        return matches[0] if matches else None


class FailingCollection(FakeCollection):

    def insert_one(self, document):
        raise ServerSelectionTimeoutError("No servers found yet")


class FakeMongoDB:

    def __init__(self, collection=None):
        self.collection = collection if collection is not None else FakeCollection()

    def get_quiz_results_collection(self):
        return self.collection


@pytest.fixture
def fake_mongo():
    return FakeMongoDB()


@pytest.fixture
def failing_mongo():
    return FakeMongoDB(FailingCollection())


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
