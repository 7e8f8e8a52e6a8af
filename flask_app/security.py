import inspect
import logging
from functools import wraps
from flask import g, jsonify, request
from flask_jwt_extended import verify_jwt_in_request, get_jwt, get_jwt_identity

from domain import services
from domain.core.errors import NotFoundError
from domain.core.settings import settings
from utils.enums import UserRole

logger = logging.getLogger(__name__)


def role_required(role: UserRole = UserRole.admin):
    """Require a valid bearer token carrying ``role``.

    Views that declare a ``current_admin`` parameter receive the admin.
    """
    def wrapper(fn):
        wants_admin = "current_admin" in inspect.signature(fn).parameters

        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            if get_jwt().get("role") != role.value:
                return jsonify(detail="Admin role required"), 403

            try:
                admin = services.get_admin(g.db, int(get_jwt_identity()))
            except (TypeError, ValueError, NotFoundError):
                return jsonify(detail="Invalid or expired token."), 401

            if wants_admin:
                kwargs["current_admin"] = admin
            return fn(*args, **kwargs)

        return decorator

    return wrapper


def api_key_required(fn):
    @wraps(fn)
    def decorator(*args, **kwargs):
        expected = settings.ADMIN_SERVER_API_KEY
        if expected and request.headers.get("X-API-Key") != expected:
            logger.warning("Unauthorized_api_access_attempt")
            return jsonify(detail="Unauthorized: Invalid API Key"), 401
        return fn(*args, **kwargs)

    return decorator
