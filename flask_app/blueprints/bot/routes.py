from flask import Blueprint, request, jsonify, g, current_app
from pydantic import ValidationError
import logging

from flask_app.security import role_required
from domain.core.errors import DomainError, NotFoundError, UpstreamNotificationError
from domain import services
from domain import schemas

logger = logging.getLogger(__name__)

bot_bp = Blueprint('bot', __name__, url_prefix='/api/bot')


@bot_bp.route('/schedule', methods=['GET'])
def get_schedule_endpoint():
    try:
        schedule = services.get_bot_schedule(g.db)
    except NotFoundError as e:
        return jsonify(detail=str(e)), 404

    return jsonify(schedule.model_dump(mode="json", by_alias=True)), 200


@bot_bp.route('/schedule', methods=['PUT'])
@role_required()
def update_schedule_endpoint():
    data = request.get_json(silent=True)
    if not data:
        return jsonify(detail="Invalid JSON"), 400

    try:
        schedule_data = schemas.BotScheduleUpdateSchema.model_validate(data)
    except ValidationError as e:
        return jsonify(detail=str(e)), 422

    schedule = services.update_bot_schedule(g.db, schedule_data)
    return jsonify(schedule.model_dump(mode="json", by_alias=True)), 200


@bot_bp.route('/broadcast', methods=['POST'])
@role_required()
def broadcast_endpoint():
    data = request.get_json(silent=True)
    if not data:
        return jsonify(detail="Invalid JSON"), 400

    try:
        broadcast = schemas.BroadcastRequestSchema.model_validate(data)
        services.send_broadcast(current_app.extensions["bot_client"], broadcast)
    except ValidationError as e:
        return jsonify(detail=str(e)), 422
    except UpstreamNotificationError as e:
        logger.warning("Broadcast_failed", exc_info=True)
        return jsonify(detail=f"Failed to send broadcast: {e}"), 502
    except DomainError as e:
        return jsonify(detail=str(e)), 500

    return jsonify(message="Broadcast message sent successfully!"), 200
