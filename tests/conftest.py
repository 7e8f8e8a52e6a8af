import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

# Settings are read at import time, so the environment must be in place first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = "redis://127.0.0.1:1/0"
os.environ["REDIS_CONNECT_TIMEOUT"] = "0.1"
os.environ["LOG_FILE_PATH"] = str(Path(tempfile.gettempdir()) / "restaurant-backoffice-tests" / "app.log")
os.environ["CACHE_ENABLED"] = "false"
os.environ["RATELIMIT_ENABLED"] = "false"
os.environ["ANALYTICS_SCHEDULER_ENABLED"] = "false"
os.environ["BOT_SERVER_URL"] = "http://bot.test"
os.environ["BROADCAST_URL"] = "http://bot.test/api/broadcast"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ.pop("ADMIN_SERVER_API_KEY", None)

# Wednesday, 17:00 in Tashkent
NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)


def pytest_collection_modifyitems(config, items):
    for item in items:
        test_path = Path(item.fspath)
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        else:
            item.add_marker(pytest.mark.api)


@pytest.fixture(autouse=True)
def setup_db():
    from infrastructure.db import models  # noqa: F401
    from infrastructure.db.base import Base
    from infrastructure.db.engine import engine

    Base.metadata.create_all(bind=engine)

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(setup_db):
    from infrastructure.db.engine import SessionLocal

    session = SessionLocal()

    yield session

    session.rollback()
    session.close()


@pytest.fixture
def make_order(db):
    from infrastructure.db.models import Order

    def _make(**overrides):
        values = {
            "user_id": "1001",
            "customer_name": "Aziz",
            "delivery_type": "takeout",
            "products": [{"name": "Lavash", "quantity": 1, "price": 10.0}],
            "total_price": 10.0,
            "delivery_distance": 0,
            "order_status": "pending",
            "rating": 0,
            "created_at": NOW,
        }
        values.update(overrides)
        order = Order(**values)
        db.add(order)
        db.commit()
        return order

    return _make


@pytest.fixture
def order_payload():
    return {
        "user_id": 555000111,
        "customer_name": "Dilnoza",
        "delivery_type": "delivery",
        "location_name": "Chilonzor 9",
        "products": [
            {"name": "Plov", "quantity": 2, "price": 35000},
            {"name": "Choy", "quantity": 1, "price": 5000},
        ],
        "total_price": 75000,
        "delivery_distance": 4.2,
    }


@pytest.fixture
def bot_client():
    from infrastructure.bot_client import BotClient

    client = Mock(spec=BotClient)
    client.broadcast_url = "http://bot.test/api/broadcast"
    client.notify.return_value = True
    client.broadcast.return_value = {"ok": True}
    return client


@pytest.fixture
def admin(db):
    from domain import services

    admin_id = services.create_admin(db, "admin", "s3cret-pass")
    db.commit()
    return {"id": admin_id, "username": "admin", "password": "s3cret-pass"}
