import mongomock
import pytest
from fastapi.testclient import TestClient

from main import create_app
from seed import populate_todos, populate_users


@pytest.fixture
def db():
    database = mongomock.MongoClient()["TodoAppTest"]
    populate_users(database)
    populate_todos(database)
    return database


@pytest.fixture
def client(db):
    with TestClient(create_app(database=db)) as c:
        yield c
