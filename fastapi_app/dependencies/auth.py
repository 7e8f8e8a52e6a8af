import logging
import jwt
from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from domain import schemas, services
from domain.core.errors import NotFoundError
from domain.core.settings import settings
from fastapi_app.auth.jwt import decode_access_token
from fastapi_app.dependencies.db import get_db
from utils.enums import UserRole

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_admin(
        credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
        db: Session = Depends(get_db),
) -> schemas.CurrentAdminSchema:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access Denied. No Token Provided.",
        )

    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        logger.warning("JWT_verification_failed", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token.",
        )

    if payload.get("role") != UserRole.admin.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )

    try:
        return services.get_admin(db, int(payload["sub"]))
    except (KeyError, ValueError, NotFoundError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token.",
        )


def require_api_key(x_api_key: str | None = Header(None)) -> None:
    expected = settings.ADMIN_SERVER_API_KEY
    if expected and x_api_key != expected:
        logger.warning("Unauthorized_api_access_attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid API Key",
        )
