import logging
import math
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from domain import schemas
from domain.core.constants import REQUIRED_ORDER_FIELDS, ORDER_LIST_DEFAULT_LIMIT, ORDER_LIST_MAX_LIMIT
from domain.core.errors import DomainValidationError, NotFoundError, MalformedIdentifierError
from infrastructure.db.models import Order
from utils.enums import OrderStatus
from utils.helpers import is_valid_id, normalize_id, utcnow

logger = logging.getLogger(__name__)


def format_validation_errors(exc: ValidationError) -> list[str]:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        errors.append(f"{location}: {error['msg']}" if location else error["msg"])
    return errors


def validate_order_payload(payload) -> schemas.OrderCreateSchema:
    if not isinstance(payload, dict):
        raise DomainValidationError("Invalid JSON", errors=["body: expected a JSON object"])

    missing = [field for field in REQUIRED_ORDER_FIELDS if field not in payload]
    if missing:
        raise DomainValidationError(
            f"Missing required order fields: {', '.join(missing)}",
            errors=[f"{field}: Field required" for field in missing],
        )

    products = payload["products"]
    if not isinstance(products, list) or not products:
        raise DomainValidationError(
            "Order must contain at least one product.",
            errors=["products: at least one product is required"],
        )

    try:
        return schemas.OrderCreateSchema.model_validate(payload)
    except ValidationError as e:
        raise DomainValidationError("Validation Error", errors=format_validation_errors(e)) from e


def parse_status(value) -> OrderStatus:
    if value is None or value == "":
        raise DomainValidationError(
            "Missing status field in request body.",
            errors=["status: Field required"],
        )
    try:
        return OrderStatus(value)
    except (ValueError, TypeError):
        raise DomainValidationError(
            f"Invalid status value: {value}",
            errors=[f"status: must be one of {', '.join(s.value for s in OrderStatus)}"],
        )


def parse_rating(value) -> float:
    if value is None:
        raise DomainValidationError(
            "Missing rating field in request body.",
            errors=["rating: Field required"],
        )

    invalid = DomainValidationError(
        "Invalid rating value. Must be a number between 1 and 5.",
        errors=["rating: must be a number between 1 and 5"],
    )
    if isinstance(value, bool):
        raise invalid
    try:
        rating = float(value)
    except (TypeError, ValueError):
        raise invalid
    if math.isnan(rating) or not 1 <= rating <= 5:
        raise invalid
    return rating


def _get_order(db: Session, order_id: str) -> Order:
    if not is_valid_id(order_id):
        raise MalformedIdentifierError(f"Invalid Order ID format: {order_id}")

    order = db.get(Order, normalize_id(order_id))
    if not order:
        raise NotFoundError(f"Order with ID {order_id} not found.")
    return order


def create_order(db: Session, payload) -> schemas.OrderSchema:
    data = validate_order_payload(payload)

    order = Order(
        user_id=data.user_id,
        customer_name=data.customer_name,
        delivery_type=data.delivery_type.value,
        location_name=data.location_name,
        products=[p.model_dump() for p in data.products],
        total_price=data.total_price,
        delivery_distance=data.delivery_distance,
        order_status=OrderStatus.pending.value,
        rating=0,
    )
    db.add(order)
    db.flush()

    logger.info(f"Order_created order_id={order.id} user_id={order.user_id} total={order.total_price}")
    return schemas.OrderSchema.model_validate(order)


def get_order(db: Session, order_id: str) -> schemas.OrderSchema:
    return schemas.OrderSchema.model_validate(_get_order(db, order_id))


def get_orders(db: Session, status=None, limit: int = ORDER_LIST_DEFAULT_LIMIT) -> list[schemas.OrderSchema]:
    stmt = select(Order).order_by(Order.created_at.desc())
    if status:
        stmt = stmt.where(Order.order_status == parse_status(status).value)

    limit = max(1, min(limit, ORDER_LIST_MAX_LIMIT))
    orders = db.scalars(stmt.limit(limit)).all()
    return [schemas.OrderSchema.model_validate(o) for o in orders]


def set_order_status(db: Session, order_id: str, status) -> schemas.OrderSchema:
    new_status = parse_status(status)
    order = _get_order(db, order_id)

    order.order_status = new_status.value
    order.updated_at = utcnow()
    db.flush()

    logger.info(f"Order_status_updated order_id={order.id} status={new_status.value}")
    return schemas.OrderSchema.model_validate(order)


def set_order_rating(db: Session, order_id: str, rating) -> schemas.OrderSchema:
    value = parse_rating(rating)
    order = _get_order(db, order_id)

    order.rating = value
    order.updated_at = utcnow()
    db.flush()

    logger.info(f"Order_rating_updated order_id={order.id} rating={value}")
    return schemas.OrderSchema.model_validate(order)
