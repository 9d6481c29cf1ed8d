from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from todo_api.core.database import get_db
from todo_api.models import todo as todos
from todo_api.schemas.todo import TodoCreate, TodoUpdate

router = APIRouter(prefix="/todos", tags=["todos"])


def serialize_todo(doc: dict) -> dict:
    return {**doc, "_id": str(doc["_id"])}


def valid_todo_id(todo_id: str) -> str:
    # Malformed ids are reported the same way as missing ones
    if not ObjectId.is_valid(todo_id):
        raise HTTPException(status_code=404)
    return todo_id


def found(doc):
    if not doc:
        raise HTTPException(status_code=404)
    return {"todo": serialize_todo(doc)}

@router.post("")
def create_todo(data: TodoCreate, db: Database = Depends(get_db)):
    return serialize_todo(todos.create_todo(db, data.text))

@router.get("")
def list_todos(db: Database = Depends(get_db)):
    return {"todos": [serialize_todo(t) for t in todos.list_todos(db)]}

@router.get("/{todo_id}")
def get_todo(todo_id: str = Depends(valid_todo_id), db: Database = Depends(get_db)):
    return found(todos.get_todo(db, todo_id))

@router.delete("/{todo_id}")
def delete_todo(todo_id: str = Depends(valid_todo_id), db: Database = Depends(get_db)):
    return found(todos.delete_todo(db, todo_id))

@router.patch("/{todo_id}")
def update_todo(data: TodoUpdate = TodoUpdate(), todo_id: str = Depends(valid_todo_id), db: Database = Depends(get_db)):
    changes = data.model_dump(exclude_none=True)
    return found(todos.update_todo(db, todo_id, changes))
