from flask import Blueprint, request, jsonify, g
from pydantic import ValidationError
import logging

from flask_app.extensions import cache
from flask_app.security import role_required
from domain.core.constants import RedisPrefix, CacheNamespace, CacheKey
from domain.core.errors import MalformedIdentifierError, NotFoundError
from domain import schemas
from domain import services

logger = logging.getLogger(__name__)

menu_bp = Blueprint('menu', __name__, url_prefix='/api/food')

MENU_CACHE_KEY = f"{RedisPrefix.CACHE}:{CacheNamespace.MENU}:{CacheKey.LIST}"


@menu_bp.route('', methods=['GET'])
@role_required()
def get_menu_endpoint():
    menu = services.build_menu(g.db)
    return jsonify(menu.model_dump(mode="json", by_alias=True)), 200


@menu_bp.route('/public', methods=['GET'])
@cache.cached(key_prefix=MENU_CACHE_KEY)
def get_public_menu_endpoint():
    menu = services.build_public_menu(g.db)
    return jsonify(menu.model_dump(mode="json", by_alias=True)), 200


@menu_bp.route('', methods=['POST'])
@role_required()
def create_food_item_endpoint():
    data = request.get_json(silent=True)
    if not data:
        return jsonify(detail="Invalid JSON"), 400

    try:
        item_data = schemas.FoodItemCreateSchema.model_validate(data)
    except ValidationError as e:
        return jsonify(detail=str(e)), 422

    item = services.create_food_item(g.db, item_data)

    cache.delete(MENU_CACHE_KEY)
    return jsonify(item.model_dump(mode="json", by_alias=True)), 201


@menu_bp.route('/<food_id>', methods=['PUT'])
@role_required()
def update_food_item_endpoint(food_id: str):
    data = request.get_json(silent=True)
    if data is None:
        return jsonify(detail="Invalid JSON"), 400

    try:
        item_data = schemas.FoodItemUpdateSchema.model_validate(data)
        item = services.update_food_item(g.db, food_id, item_data)
    except ValidationError as e:
        return jsonify(detail=str(e)), 422
    except MalformedIdentifierError as e:
        return jsonify(detail=str(e)), 400
    except NotFoundError as e:
        return jsonify(detail=str(e)), 404

    cache.delete(MENU_CACHE_KEY)
    return jsonify(item.model_dump(mode="json", by_alias=True)), 200
