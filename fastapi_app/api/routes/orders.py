import logging
from typing import Any
from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.orm import Session

from domain import schemas, services
from domain.core.constants import ORDER_LIST_DEFAULT_LIMIT, ORDER_LIST_MAX_LIMIT
from domain.core.errors import DomainValidationError, MalformedIdentifierError, NotFoundError
from fastapi_app.core.responses import error_response
from fastapi_app.dependencies.auth import require_api_key
from fastapi_app.dependencies.body import json_body
from fastapi_app.dependencies.bot import get_bot_client
from fastapi_app.dependencies.db import get_db
from infrastructure.bot_client import BotClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"], dependencies=[Depends(require_api_key)])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponseSchema},
    status.HTTP_404_NOT_FOUND: {"model": schemas.ErrorResponseSchema},
}


def _field(payload: Any, name: str):
    return payload.get(name) if isinstance(payload, dict) else None


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.OrderOperationResultSchema,
    responses={status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponseSchema}},
)
def create_order_endpoint(
        payload: Any = Depends(json_body),
        db: Session = Depends(get_db),
):
    try:
        order = services.create_order(db, payload)
        db.commit()
    except DomainValidationError as e:
        db.rollback()
        logger.warning(f"Order_rejected reason={e} errors={e.errors}")
        return error_response(status.HTTP_400_BAD_REQUEST, e)
    except Exception:
        db.rollback()
        logger.exception("Failed_to_create_order")
        raise

    return {"success": True, "message": "Order created successfully.", "order": order}


@router.get("", response_model=schemas.OrderListResponseSchema, responses=ERROR_RESPONSES)
def get_orders_endpoint(
        order_status: str | None = Query(None, alias="status"),
        limit: int = Query(ORDER_LIST_DEFAULT_LIMIT, ge=1, le=ORDER_LIST_MAX_LIMIT),
        db: Session = Depends(get_db),
):
    try:
        orders = services.get_orders(db, order_status, limit)
    except DomainValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e)

    return {"orders": orders, "orders_count": len(orders)}


@router.get("/{order_id}", response_model=schemas.OrderSchema, responses=ERROR_RESPONSES)
def get_order_endpoint(order_id: str, db: Session = Depends(get_db)):
    try:
        return services.get_order(db, order_id)
    except MalformedIdentifierError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e)
    except NotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, e)


@router.put("/{order_id}/status", response_model=schemas.OrderOperationResultSchema, responses=ERROR_RESPONSES)
def update_order_status_endpoint(
        order_id: str,
        background_tasks: BackgroundTasks,
        payload: Any = Depends(json_body),
        db: Session = Depends(get_db),
        bot_client: BotClient = Depends(get_bot_client),
):
    try:
        order = services.set_order_status(db, order_id, _field(payload, "status"))
        db.commit()
    except (DomainValidationError, MalformedIdentifierError) as e:
        db.rollback()
        return error_response(status.HTTP_400_BAD_REQUEST, e)
    except NotFoundError as e:
        db.rollback()
        logger.warning(f"Order_not_found order_id={order_id}")
        return error_response(status.HTTP_404_NOT_FOUND, e)
    except Exception:
        db.rollback()
        logger.exception("Unexpected_error")
        raise

    background_tasks.add_task(services.notify_status_change, bot_client, order)

    return {
        "success": True,
        "message": f"Order status updated to {order.order_status.value}",
        "order": order,
    }


@router.put("/{order_id}/review", response_model=schemas.OrderOperationResultSchema, responses=ERROR_RESPONSES)
def update_order_rating_endpoint(
        order_id: str,
        payload: Any = Depends(json_body),
        db: Session = Depends(get_db),
):
    try:
        order = services.set_order_rating(db, order_id, _field(payload, "rating"))
        db.commit()
    except (DomainValidationError, MalformedIdentifierError) as e:
        db.rollback()
        return error_response(status.HTTP_400_BAD_REQUEST, e)
    except NotFoundError as e:
        db.rollback()
        logger.warning(f"Order_not_found order_id={order_id}")
        return error_response(status.HTTP_404_NOT_FOUND, e)
    except Exception:
        db.rollback()
        logger.exception("Unexpected_error")
        raise

    return {
        "success": True,
        "message": f"Order rating updated to {order.rating:g}",
        "order": order,
    }
