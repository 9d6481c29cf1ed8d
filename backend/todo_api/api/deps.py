import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from pymongo.database import Database

from todo_api.core.database import get_db
from todo_api.models import user as users

logger = logging.getLogger(__name__)

AUTH_HEADER = "x-auth"


def get_current_user(
    token: Optional[str] = Header(default=None, alias=AUTH_HEADER),
    db: Database = Depends(get_db),
) -> dict:
    user = users.find_by_token(db, token) if token else None
    if not user:
        logger.debug("Rejected request with missing or unknown token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user
