from infrastructure.logging_config import configure_logging

configure_logging()

import logging
from flask import Flask, g
from flask_app.blueprints import register_blueprints
from flask_app.blueprints.analytics.routes import DASHBOARD_CACHE_KEY
from flask_app.cli import init_db_command, create_admin_command, update_analytics_command
from flask_app.extensions import cache, limiter, jwt
from domain.core.settings import settings
from infrastructure.bot_client import BotClient
from infrastructure.db.engine import SessionLocal
from infrastructure.scheduler import AnalyticsJob, DailyJobThread

logger = logging.getLogger(__name__)


def _start_scheduler(app: Flask) -> DailyJobThread:
    def clear_dashboard_cache():
        with app.app_context():
            cache.delete(DASHBOARD_CACHE_KEY)

    scheduler = DailyJobThread(AnalyticsJob(), on_success=clear_dashboard_cache)
    scheduler.start()
    logger.info("Analytics_scheduler_started")
    return scheduler


def create_app(base_config=settings, auth_config='flask_app.config.Config'):
    app = Flask(__name__)
    app.config.from_object(base_config)
    app.config.from_object(auth_config)
    cache.init_app(app)
    limiter.init_app(app)
    jwt.init_app(app)
    register_blueprints(app)

    app.extensions["bot_client"] = BotClient.from_settings(settings)

    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
    app.cli.add_command(update_analytics_command)

    if app.config.get("ANALYTICS_SCHEDULER_ENABLED"):
        app.extensions["analytics_scheduler"] = _start_scheduler(app)

    @app.before_request
    def create_session():
        g.db = SessionLocal()
        g.db.rollback_needed = False

    @app.teardown_request
    def remove_session(exc=None):
        db = getattr(g, "db", None)
        if db is None:
            return

        try:
            if exc is not None or getattr(db, "rollback_needed", False):
                db.rollback()
            else:
                db.commit()
        except Exception:
            db.rollback()
            logger.exception("Session_cleanup_failed")
        finally:
            db.close()

    return app
