from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator

from utils.enums import DeliveryType, OrderStatus


class ProductLineSchema(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)


class OrderCreateSchema(BaseModel):
    user_id: str = Field(..., min_length=1)
    customer_name: str | None = None
    delivery_type: DeliveryType
    location_name: str | None = None
    products: list[ProductLineSchema] = Field(..., min_length=1)
    total_price: float = Field(..., ge=0)
    delivery_distance: float = Field(0, ge=0)

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_chat_id(cls, value):
        # chat ids arrive as integers from the bot
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("delivery_distance", mode="before")
    @classmethod
    def default_distance(cls, value):
        return 0 if value is None else value


class OrderSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    customer_name: str | None = None
    delivery_type: DeliveryType
    location_name: str | None = None
    products: list[ProductLineSchema]
    total_price: float
    delivery_distance: float
    order_status: OrderStatus
    rating: float
    created_at: datetime
    updated_at: datetime


class OrderOperationResultSchema(BaseModel):
    success: bool = True
    message: str
    order: OrderSchema


class OrderListResponseSchema(BaseModel):
    orders: list[OrderSchema]
    orders_count: int
