from flask import Blueprint, request, jsonify, g
from flask_jwt_extended import create_access_token
from pydantic import ValidationError
import logging

from flask_app.extensions import limiter
from flask_app.security import role_required
from domain.core.errors import ConflictError, NotFoundError
from domain import services
from domain import schemas
from utils.enums import UserRole

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@admin_bp.route('/me', methods=['GET'])
@role_required()
def get_me(current_admin: schemas.CurrentAdminSchema):
    return jsonify(current_admin.model_dump(mode="json")), 200


@admin_bp.route('/auth/login', methods=['POST'])
@limiter.limit("10 per minute")
def login_endpoint():
    data = request.get_json(silent=True)
    if not data:
        return jsonify(detail="Invalid JSON"), 400

    try:
        auth_data = schemas.LoginRequestSchema.model_validate(data)
    except ValidationError as e:
        return jsonify(detail=str(e)), 422

    admin = services.authenticate_admin(g.db, auth_data)
    if not admin:
        return jsonify(detail="Invalid Credentials"), 401

    token = create_access_token(
        identity=str(admin.id),
        additional_claims={"role": UserRole.admin.value}
    )
    logger.info(f"Admin_logged_in id={admin.id}")
    return jsonify(token=token), 200


@admin_bp.route('/credentials', methods=['PUT'])
@role_required()
def update_credentials_endpoint(current_admin: schemas.CurrentAdminSchema):
    data = request.get_json(silent=True)
    if not data:
        return jsonify(detail="Invalid JSON"), 400

    try:
        credentials = schemas.CredentialsUpdateSchema.model_validate(data)
        admin = services.update_admin_credentials(g.db, current_admin.id, credentials)
    except ValidationError as e:
        return jsonify(detail=str(e)), 422
    except NotFoundError as e:
        g.db.rollback_needed = True
        return jsonify(detail=str(e)), 404
    except ConflictError as e:
        g.db.rollback_needed = True
        return jsonify(detail=str(e)), 409

    return jsonify(admin.model_dump(mode="json")), 200
