import logging
from anyio import from_thread
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi_cache import FastAPICache
from fastapi_cache.decorator import cache
from sqlalchemy.orm import Session

from domain import schemas, services
from domain.core.constants import CacheNamespace, CacheKey
from domain.core.errors import MalformedIdentifierError, NotFoundError
from domain.core.settings import settings
from fastapi_app.dependencies.auth import get_current_admin
from fastapi_app.dependencies.db import get_db
from utils.helpers import static_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/food", tags=["menu"])


@router.get("", response_model=schemas.MenuResponseSchema)
def get_menu_endpoint(
        _: schemas.CurrentAdminSchema = Depends(get_current_admin),
        db: Session = Depends(get_db),
):
    return services.build_menu(db)


@router.get("/public", response_model=schemas.MenuResponseSchema)
@cache(
    expire=settings.CACHE_DEFAULT_TIMEOUT,
    namespace=CacheNamespace.MENU,
    key_builder=static_key(CacheKey.LIST),
)
def get_public_menu_endpoint(db: Session = Depends(get_db)):
    return services.build_public_menu(db)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.FoodItemSchema)
def create_food_item_endpoint(
        data: schemas.FoodItemCreateSchema,
        _: schemas.CurrentAdminSchema = Depends(get_current_admin),
        db: Session = Depends(get_db),
):
    try:
        item = services.create_food_item(db, data)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed_to_add_food_item")
        raise

    from_thread.run(FastAPICache.clear, CacheNamespace.MENU)

    return item


@router.put("/{food_id}", response_model=schemas.FoodItemSchema)
def update_food_item_endpoint(
        food_id: str,
        data: schemas.FoodItemUpdateSchema,
        _: schemas.CurrentAdminSchema = Depends(get_current_admin),
        db: Session = Depends(get_db),
):
    try:
        item = services.update_food_item(db, food_id, data)
        db.commit()
    except MalformedIdentifierError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception:
        db.rollback()
        logger.exception("Unexpected_error")
        raise

    from_thread.run(FastAPICache.clear, CacheNamespace.MENU)

    return item
