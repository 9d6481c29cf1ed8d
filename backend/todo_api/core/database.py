import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from .config import settings
from todo_api.models import user

logger = logging.getLogger(__name__)


def connect(url: str = settings.mongodb_url, name: str = settings.database_name) -> Database:
    client = MongoClient(url)
    logger.info("Connected to MongoDB database %r", name)
    return client[name]


def init_db(db: Database) -> None:
    user.ensure_indexes(db)
    logger.info("Ensured indexes on %r", db.name)


def get_db(request: Request) -> Database:
    return request.app.state.db
