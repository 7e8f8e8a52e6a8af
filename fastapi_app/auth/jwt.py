from datetime import timedelta
import jwt

from domain.core.settings import settings
from utils.enums import UserRole
from utils.helpers import utcnow

ALGORITHM = "HS256"


def create_access_token(subject: str, role: UserRole) -> str:
    now = utcnow()
    payload = {
        "sub": subject,
        "role": role.value,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRES_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[ALGORITHM])
