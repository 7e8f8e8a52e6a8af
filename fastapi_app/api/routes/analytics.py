import logging
from anyio import from_thread
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi_cache import FastAPICache
from fastapi_cache.decorator import cache
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain import schemas, services
from domain.core.constants import CacheNamespace, CacheKey
from domain.core.errors import NotFoundError
from domain.core.settings import settings
from fastapi_app.dependencies.db import get_db
from utils.helpers import static_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])

UPDATE_FAILED = "Global dashboard analytics update process failed during calculation or saving."


@router.post("/update", response_model=schemas.MessageResponseSchema)
def update_analytics_endpoint(db: Session = Depends(get_db)):
    snapshot = services.update_dashboard_analytics(db)
    if snapshot is None:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UPDATE_FAILED,
        )

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed_to_commit_analytics")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UPDATE_FAILED,
        )

    from_thread.run(FastAPICache.clear, CacheNamespace.DASHBOARD)

    return {"message": "Global dashboard analytics update process finished successfully."}


@router.get("/dashboard", response_model=schemas.DashboardAnalyticsSchema)
@cache(
    expire=settings.CACHE_DEFAULT_TIMEOUT,
    namespace=CacheNamespace.DASHBOARD,
    key_builder=static_key(CacheKey.DETAIL),
)
def get_dashboard_endpoint(db: Session = Depends(get_db)):
    try:
        return services.get_dashboard_analytics(db)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
