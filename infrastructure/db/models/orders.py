from datetime import datetime
from sqlalchemy import DateTime, String, JSON, Float
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.db.base import Base
from utils.enums import OrderStatus
from utils.helpers import new_id, utcnow


class Order(Base):
    __tablename__ = 'orders'

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    customer_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    delivery_type: Mapped[str] = mapped_column(String(20), index=True)
    location_name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    products: Mapped[list] = mapped_column(JSON, default=list)
    total_price: Mapped[float] = mapped_column(Float)
    delivery_distance: Mapped[float] = mapped_column(Float, default=0)
    order_status: Mapped[str] = mapped_column(String(20), default=OrderStatus.pending.value, index=True)
    rating: Mapped[float] = mapped_column(Float, default=0, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Order {self.id} status={self.order_status}>"
