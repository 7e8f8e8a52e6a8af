"""Admin accounts, menu and bot schedule services."""
import uuid

import pytest

from domain import schemas, services
from domain.core.errors import ConflictError, DomainError, MalformedIdentifierError, NotFoundError

WEEK = {
    day: {"startHour": 9, "endHour": 22}
    for day in ("Dushanba", "Seshanba", "Chorshanba", "Payshanba", "Juma", "Shanba", "Yakshanba")
}


class TestAdmins:

    def test_login_with_valid_credentials(self, db, admin):
        found = services.authenticate_admin(
            db, schemas.LoginRequestSchema(username="admin", password=admin["password"])
        )

        assert found.id == admin["id"]
        assert found.password_hash != admin["password"]

    def test_login_with_wrong_password(self, db, admin):
        login = schemas.LoginRequestSchema(username="admin", password="nope")

        assert services.authenticate_admin(db, login) is None

    def test_duplicate_username(self, db, admin):
        with pytest.raises(ConflictError):
            services.create_admin(db, "admin", "another")

    def test_password_is_write_only(self, db, admin):
        from infrastructure.db.models import Admin

        with pytest.raises(AttributeError):
            db.get(Admin, admin["id"]).password

    def test_update_credentials(self, db, admin):
        updated = services.update_admin_credentials(
            db, admin["id"], schemas.CredentialsUpdateSchema(username="boss", password="new-password")
        )

        assert updated.username == "boss"
        login = schemas.LoginRequestSchema(username="boss", password="new-password")
        assert services.authenticate_admin(db, login) is not None

    def test_update_to_taken_username(self, db, admin):
        services.create_admin(db, "second", "password")

        with pytest.raises(ConflictError):
            services.update_admin_credentials(db, admin["id"], schemas.CredentialsUpdateSchema(username="second"))

    def test_credentials_update_needs_a_field(self):
        with pytest.raises(ValueError):
            schemas.CredentialsUpdateSchema()

    def test_unknown_admin(self, db):
        with pytest.raises(NotFoundError):
            services.get_admin(db, 999)


class TestMenu:

    @pytest.fixture
    def plov(self, db):
        item = services.create_food_item(db, schemas.FoodItemCreateSchema(
            name="Plov", price=35000, category="Milliy", image="plov.jpg", isAvailable=True,
        ))
        db.commit()
        return item

    def test_public_menu_hides_unavailable(self, db, plov):
        services.create_food_item(db, schemas.FoodItemCreateSchema(
            name="Somsa", price=8000, category="Pishiriq", image="somsa.jpg",
        ))

        assert [i.name for i in services.build_menu(db).items] == ["Plov", "Somsa"]
        public = services.build_public_menu(db)
        assert [i.name for i in public.items] == ["Plov"]
        assert public.categories == ["Milliy"]

    def test_partial_update(self, db, plov):
        updated = services.update_food_item(db, plov.id, schemas.FoodItemUpdateSchema(price=40000))

        assert updated.price == 40000
        assert updated.name == "Plov"

    def test_update_malformed_id(self, db):
        with pytest.raises(MalformedIdentifierError):
            services.update_food_item(db, "42", schemas.FoodItemUpdateSchema(price=1))

    def test_update_unknown_item(self, db):
        with pytest.raises(NotFoundError):
            services.update_food_item(db, uuid.uuid4().hex, schemas.FoodItemUpdateSchema(price=1))


class TestBotSchedule:

    def test_schedule_missing(self, db):
        with pytest.raises(NotFoundError, match="Schedule not found"):
            services.get_bot_schedule(db)

    def test_upsert_keeps_single_row(self, db):
        update = schemas.BotScheduleUpdateSchema.model_validate({"schedule": WEEK, "isEmergencyOff": True})

        services.update_bot_schedule(db, update)
        services.update_bot_schedule(db, update.model_copy(update={"is_emergency_off": False}))
        db.commit()

        schedule = services.get_bot_schedule(db)
        assert schedule.is_emergency_off is False
        assert schedule.schedule.Juma.end_hour == 22

    def test_broadcast_requires_configured_url(self, bot_client):
        bot_client.broadcast_url = None
        request = schemas.BroadcastRequestSchema(title="Aksiya", message="Chegirma")

        with pytest.raises(DomainError, match="not configured"):
            services.send_broadcast(bot_client, request)

    def test_broadcast_strips_blank_fields(self, bot_client):
        request = schemas.BroadcastRequestSchema.model_validate({"title": "  Aksiya ", "message": "Chegirma"})

        services.send_broadcast(bot_client, request)

        bot_client.broadcast.assert_called_once_with("Aksiya", "Chegirma", None)
