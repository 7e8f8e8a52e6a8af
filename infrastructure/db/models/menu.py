from sqlalchemy import String, JSON, Float
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.db.base import Base
from utils.helpers import new_id


class FoodItem(Base):
    __tablename__ = 'food_items'

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100))
    price: Mapped[float] = mapped_column(Float)
    category: Mapped[str] = mapped_column(String(50), index=True)
    image: Mapped[str] = mapped_column(String(500))
    is_available: Mapped[bool] = mapped_column(default=True, index=True)
    sizes: Mapped[list] = mapped_column(JSON, default=list)
    toppings: Mapped[list] = mapped_column(JSON, default=list)

    def __repr__(self) -> str:
        return f"<FoodItem {self.id} name={self.name!r}>"
