import logging
from sqlalchemy import select
from sqlalchemy.orm import Session

from domain import schemas
from domain.core.errors import NotFoundError, MalformedIdentifierError
from infrastructure.db.models import FoodItem
from utils.helpers import is_valid_id, normalize_id

logger = logging.getLogger(__name__)


def _get_food_item(db: Session, food_id: str) -> FoodItem:
    if not is_valid_id(food_id):
        raise MalformedIdentifierError(f"Invalid food ID format: {food_id}")

    item = db.get(FoodItem, normalize_id(food_id))
    if not item:
        raise NotFoundError(f"Food item {food_id} not found")
    return item


def build_menu(db: Session) -> schemas.MenuResponseSchema:
    items = db.scalars(select(FoodItem).order_by(FoodItem.category, FoodItem.name)).all()
    categories = sorted({item.category for item in items})
    return schemas.MenuResponseSchema(
        items=[schemas.FoodItemSchema.model_validate(i) for i in items],
        categories=categories,
    )


def build_public_menu(db: Session) -> schemas.MenuResponseSchema:
    items = db.scalars(
        select(FoodItem)
        .where(FoodItem.is_available.is_(True))
        .order_by(FoodItem.category, FoodItem.name)
    ).all()
    return schemas.MenuResponseSchema(
        items=[schemas.FoodItemSchema.model_validate(i) for i in items],
        categories=sorted({item.category for item in items}),
    )


def create_food_item(db: Session, data: schemas.FoodItemCreateSchema) -> schemas.FoodItemSchema:
    item = FoodItem(**data.model_dump())
    db.add(item)
    db.flush()

    logger.info(f"Food_item_added id={item.id} name={item.name}")
    return schemas.FoodItemSchema.model_validate(item)


def update_food_item(db: Session, food_id: str, data: schemas.FoodItemUpdateSchema) -> schemas.FoodItemSchema:
    item = _get_food_item(db, food_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field not in ("sizes", "toppings"):
            continue
        setattr(item, field, value if value is not None else [])
    db.flush()

    logger.info(f"Food_item_updated id={item.id}")
    return schemas.FoodItemSchema.model_validate(item)
