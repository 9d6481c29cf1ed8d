from fastapi import APIRouter
from todo_api.api.routes import todos_router, users_router

api_router = APIRouter()
api_router.include_router(todos_router)
api_router.include_router(users_router)
