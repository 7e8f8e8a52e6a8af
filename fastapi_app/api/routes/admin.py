import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from domain import schemas, services
from domain.core.errors import ConflictError, NotFoundError
from fastapi_app.auth.jwt import create_access_token
from fastapi_app.core.limiter import limiter
from fastapi_app.dependencies.auth import get_current_admin
from fastapi_app.dependencies.db import get_db
from utils.enums import UserRole

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/me", response_model=schemas.CurrentAdminSchema)
def get_me(current_admin: schemas.CurrentAdminSchema = Depends(get_current_admin)):
    return current_admin


@router.post(
    "/auth/login",
    response_model=schemas.TokenResponseSchema,
    responses={status.HTTP_429_TOO_MANY_REQUESTS: {"model": schemas.RateLimitErrorSchema}},
)
@limiter.limit("10/minute")
def login_endpoint(
        request: Request,
        auth_data: schemas.LoginRequestSchema,
        db: Session = Depends(get_db),
):
    admin = services.authenticate_admin(db, auth_data)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Credentials",
        )

    token = create_access_token(subject=str(admin.id), role=UserRole.admin)
    logger.info(f"Admin_logged_in id={admin.id}")
    return {"token": token}


@router.put("/credentials", response_model=schemas.CurrentAdminSchema)
def update_credentials_endpoint(
        data: schemas.CredentialsUpdateSchema,
        current_admin: schemas.CurrentAdminSchema = Depends(get_current_admin),
        db: Session = Depends(get_db),
):
    try:
        admin = services.update_admin_credentials(db, current_admin.id, data)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConflictError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except Exception:
        db.rollback()
        logger.exception("Unexpected_error")
        raise

    return admin
