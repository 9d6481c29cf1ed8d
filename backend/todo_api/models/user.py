import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from jose import JWTError
from pydantic import BaseModel, EmailStr, Field
from pymongo import ASCENDING
from pymongo.database import Database

from todo_api.core.security import (
    create_auth_token,
    decode_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

COLLECTION = "users"
AUTH_ACCESS = "auth"


class AuthToken(BaseModel):
    access: str
    token: str


class User(BaseModel):
    email: EmailStr
    password: str = Field(description="Argon2 hash, never the plain password")
    tokens: list[AuthToken] = Field(default_factory=list)


def ensure_indexes(db: Database) -> None:
    db[COLLECTION].create_index([("email", ASCENDING)], unique=True)


def to_public(user: dict) -> dict:
    return {"_id": str(user["_id"]), "email": user["email"]}


def create_user(db: Database, email: str, password: str) -> dict:
    # Raises DuplicateKeyError if the email is taken
    doc = User(email=email, password=hash_password(password)).model_dump()
    result = db[COLLECTION].insert_one(doc)
    doc["_id"] = result.inserted_id
    logger.info("Created user %s", doc["_id"])
    return doc


def find_by_credentials(db: Database, email: str, password: str) -> Optional[dict]:
    user = db[COLLECTION].find_one({"email": email})
    if not user or not verify_password(password, user["password"]):
        return None
    return user


def generate_auth_token(db: Database, user: dict) -> str:
    token = create_auth_token(str(user["_id"]), AUTH_ACCESS)
    entry = AuthToken(access=AUTH_ACCESS, token=token).model_dump()
    db[COLLECTION].update_one({"_id": user["_id"]}, {"$push": {"tokens": entry}})
    user.setdefault("tokens", []).append(entry)
    return token


def find_by_token(db: Database, token: str) -> Optional[dict]:
    try:
        payload = decode_token(token)
        user_id = ObjectId(payload["_id"])
    except (JWTError, KeyError, InvalidId, TypeError):
        return None

    return db[COLLECTION].find_one({
        "_id": user_id,
        "tokens": {"$elemMatch": {"token": token, "access": AUTH_ACCESS}},
    })
