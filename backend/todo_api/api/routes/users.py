import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pymongo.database import Database

from todo_api.api.deps import AUTH_HEADER, get_current_user
from todo_api.core.database import get_db
from todo_api.models import user as users
from todo_api.schemas.auth import SignupIn, LoginIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
def signup(payload: SignupIn, response: Response, db: Database = Depends(get_db)):
    # Duplicate emails surface as DuplicateKeyError, handled as a 400 in main
    user = users.create_user(db, payload.email, payload.password)
    token = users.generate_auth_token(db, user)

    response.headers[AUTH_HEADER] = token
    return users.to_public(user)


@router.post("/login")
def login(payload: LoginIn, response: Response, db: Database = Depends(get_db)):
    user = users.find_by_credentials(db, payload.email, payload.password)

    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)

    token = users.generate_auth_token(db, user)
    logger.info("User %s logged in", user["_id"])

    response.headers[AUTH_HEADER] = token
    return users.to_public(user)


@router.get("/me")
def me(user: dict = Depends(get_current_user)):
    return users.to_public(user)
