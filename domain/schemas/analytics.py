from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class ChartPointSchema(BaseModel):
    date: str
    total: float = Field(0, ge=0)


class PeriodStatsSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    orders: int = 0
    price: float = 0
    delivery_orders: int = Field(0, alias="deliveryOrders")
    delivery_price: float = Field(0, alias="deliveryPrice")
    delivery_distance: float = Field(0, alias="deliveryDistance")
    users: int = 0
    chart: list[ChartPointSchema] = []


class AnalyticsDataSchema(BaseModel):
    today: PeriodStatsSchema = PeriodStatsSchema()
    week: PeriodStatsSchema = PeriodStatsSchema()
    month: PeriodStatsSchema = PeriodStatsSchema()
    year: PeriodStatsSchema = PeriodStatsSchema()


class DashboardAnalyticsSchema(AnalyticsDataSchema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    identifier: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
