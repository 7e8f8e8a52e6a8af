from flask import Blueprint, jsonify, g
import logging

from flask_app.extensions import cache
from domain.core.constants import RedisPrefix, CacheNamespace, CacheKey
from domain.core.errors import NotFoundError
from domain import services

logger = logging.getLogger(__name__)

analytics_bp = Blueprint('analytics', __name__, url_prefix='/api/analytics')

DASHBOARD_CACHE_KEY = f"{RedisPrefix.CACHE}:{CacheNamespace.DASHBOARD}:{CacheKey.DETAIL}"


def _is_success(rv) -> bool:
    return not isinstance(rv, tuple) or rv[-1] == 200


@analytics_bp.route('/update', methods=['POST'])
def update_analytics_endpoint():
    snapshot = services.update_dashboard_analytics(g.db)
    if snapshot is None:
        g.db.rollback_needed = True
        return jsonify(
            detail="Global dashboard analytics update process failed during calculation or saving."
        ), 500

    g.db.commit()
    cache.delete(DASHBOARD_CACHE_KEY)
    return jsonify(message="Global dashboard analytics update process finished successfully."), 200


@analytics_bp.route('/dashboard', methods=['GET'])
@cache.cached(key_prefix=DASHBOARD_CACHE_KEY, response_filter=_is_success)
def get_dashboard_endpoint():
    try:
        snapshot = services.get_dashboard_analytics(g.db)
    except NotFoundError as e:
        return jsonify(detail=str(e)), 404

    return jsonify(snapshot.model_dump(mode="json", by_alias=True)), 200
