from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pymongo import ReturnDocument
from pymongo.database import Database

COLLECTION = "todos"


class Todo(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1)
    completed: bool = False
    completedAt: Optional[int] = None


def _now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def apply_completion(changes: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(changes)
    if out.get("completed") is True:
        out["completedAt"] = _now_ms()
    else:
        out["completed"] = False
        out["completedAt"] = None
    return out


def create_todo(db: Database, text: str) -> dict:
    doc = Todo(text=text).model_dump()
    result = db[COLLECTION].insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def list_todos(db: Database) -> List[dict]:
    return list(db[COLLECTION].find())


def get_todo(db: Database, todo_id: str) -> Optional[dict]:
    return db[COLLECTION].find_one({"_id": ObjectId(todo_id)})


def delete_todo(db: Database, todo_id: str) -> Optional[dict]:
    return db[COLLECTION].find_one_and_delete({"_id": ObjectId(todo_id)})


def update_todo(db: Database, todo_id: str, changes: Dict[str, Any]) -> Optional[dict]:
    return db[COLLECTION].find_one_and_update(
        {"_id": ObjectId(todo_id)},
        {"$set": apply_completion(changes)},
        return_document=ReturnDocument.AFTER,
    )
