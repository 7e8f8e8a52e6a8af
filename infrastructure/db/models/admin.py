from datetime import datetime
from sqlalchemy import DateTime, String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from domain.core.constants import DASHBOARD_IDENTIFIER
from infrastructure.db.base import Base
from utils.helpers import utcnow


class Admin(Base):
    __tablename__ = 'admins'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(200))

    @property
    def password(self):
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, password_hash: str):
        self.password_hash = password_hash

    def __repr__(self):
        return f"<Admin {self.id}>"


class BotSchedule(Base):
    __tablename__ = 'bot_schedule'

    id: Mapped[int] = mapped_column(primary_key=True)
    schedule: Mapped[dict] = mapped_column(JSON, default=dict)
    is_emergency_off: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<BotSchedule emergency_off={self.is_emergency_off}>"


class DashboardAnalytics(Base):
    __tablename__ = 'dashboard_analytics'

    identifier: Mapped[str] = mapped_column(String(50), primary_key=True, default=DASHBOARD_IDENTIFIER)
    today: Mapped[dict] = mapped_column(JSON)
    week: Mapped[dict] = mapped_column(JSON)
    month: Mapped[dict] = mapped_column(JSON)
    year: Mapped[dict] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    def __repr__(self):
        return f"<DashboardAnalytics {self.identifier} updated_at={self.updated_at}>"
