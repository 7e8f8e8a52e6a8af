import logging
from flask import jsonify
from flask_caching import Cache
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_jwt_extended import JWTManager

from domain.core.constants import RedisPrefix
from infrastructure.redis import rate_limit_storage_uri

logger = logging.getLogger(__name__)

cache = Cache()
jwt = JWTManager()
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=rate_limit_storage_uri(),
    key_prefix=RedisPrefix.RATELIMIT,
)


@jwt.unauthorized_loader
def missing_token_callback(reason: str):
    return jsonify(detail="Access Denied. No Token Provided."), 401


@jwt.invalid_token_loader
def invalid_token_callback(reason: str):
    logger.warning(f"JWT_verification_failed reason={reason}")
    return jsonify(detail="Invalid or expired token."), 401


@jwt.expired_token_loader
def expired_token_callback(jwt_header, jwt_payload):
    return jsonify(detail="Invalid or expired token."), 401
