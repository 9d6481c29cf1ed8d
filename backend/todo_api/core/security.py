from datetime import datetime, timezone
import uuid

from jose import jwt
from passlib.context import CryptContext

from .config import settings

# Argon2 instead of bcrypt (more reliable on recent Pythons)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def create_auth_token(user_id: str, access: str) -> str:
    payload = {
        "_id": user_id,
        "access": access,
        "iat": datetime.now(timezone.utc),
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
