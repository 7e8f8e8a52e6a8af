from flask import Blueprint, request, jsonify, g, current_app
import logging

from flask_app.security import api_key_required
from domain.core.constants import ORDER_LIST_DEFAULT_LIMIT
from domain.core.errors import DomainValidationError, MalformedIdentifierError, NotFoundError
from domain import services

logger = logging.getLogger(__name__)

orders_bp = Blueprint('orders', __name__, url_prefix='/api/orders')


def _error(e, status_code: int):
    body = {"detail": str(e)}
    if isinstance(e, DomainValidationError):
        body["errors"] = e.errors
    return jsonify(body), status_code


def _order_result(message: str, order):
    return jsonify(success=True, message=message, order=order.model_dump(mode="json"))


def _field(name: str):
    data = request.get_json(silent=True)
    return data.get(name) if isinstance(data, dict) else None


@orders_bp.route('', methods=['POST'])
@api_key_required
def create_order_endpoint():
    data = request.get_json(silent=True)

    try:
        order = services.create_order(g.db, data)
        g.db.commit()
    except DomainValidationError as e:
        g.db.rollback_needed = True
        logger.warning(f"Order_rejected reason={e} errors={e.errors}")
        return _error(e, 400)

    return _order_result("Order created successfully.", order), 201


@orders_bp.route('', methods=['GET'])
@api_key_required
def get_orders_endpoint():
    status = request.args.get('status')
    limit = request.args.get('limit', default=ORDER_LIST_DEFAULT_LIMIT, type=int)

    try:
        orders = services.get_orders(g.db, status, limit)
    except DomainValidationError as e:
        return _error(e, 400)

    return jsonify(orders=[o.model_dump(mode="json") for o in orders], orders_count=len(orders)), 200


@orders_bp.route('/<order_id>', methods=['GET'])
@api_key_required
def get_order_endpoint(order_id: str):
    try:
        order = services.get_order(g.db, order_id)
    except MalformedIdentifierError as e:
        return _error(e, 400)
    except NotFoundError as e:
        return _error(e, 404)

    return jsonify(order.model_dump(mode="json")), 200


@orders_bp.route('/<order_id>/status', methods=['PUT'])
@api_key_required
def update_order_status_endpoint(order_id: str):
    try:
        order = services.set_order_status(g.db, order_id, _field("status"))
        g.db.commit()
    except (DomainValidationError, MalformedIdentifierError) as e:
        g.db.rollback_needed = True
        return _error(e, 400)
    except NotFoundError as e:
        g.db.rollback_needed = True
        logger.warning(f"Order_not_found order_id={order_id}")
        return _error(e, 404)

    services.notify_status_change(current_app.extensions["bot_client"], order)

    return _order_result(f"Order status updated to {order.order_status.value}", order), 200


@orders_bp.route('/<order_id>/review', methods=['PUT'])
@api_key_required
def update_order_rating_endpoint(order_id: str):
    try:
        order = services.set_order_rating(g.db, order_id, _field("rating"))
        g.db.commit()
    except (DomainValidationError, MalformedIdentifierError) as e:
        g.db.rollback_needed = True
        return _error(e, 400)
    except NotFoundError as e:
        g.db.rollback_needed = True
        logger.warning(f"Order_not_found order_id={order_id}")
        return _error(e, 404)

    return _order_result(f"Order rating updated to {order.rating:g}", order), 200
