from domain.schemas.common import MessageResponseSchema, ErrorResponseSchema, RateLimitErrorSchema
from domain.schemas.orders import (
    ProductLineSchema,
    OrderCreateSchema,
    OrderSchema,
    OrderOperationResultSchema,
    OrderListResponseSchema,
)
from domain.schemas.analytics import (
    ChartPointSchema,
    PeriodStatsSchema,
    AnalyticsDataSchema,
    DashboardAnalyticsSchema,
)
from domain.schemas.menu import (
    MenuOptionSchema,
    FoodItemCreateSchema,
    FoodItemUpdateSchema,
    FoodItemSchema,
    MenuResponseSchema,
)
from domain.schemas.admin import (
    LoginRequestSchema,
    TokenResponseSchema,
    CredentialsUpdateSchema,
    CurrentAdminSchema,
)
from domain.schemas.bot import (
    DayHoursSchema,
    WeekScheduleSchema,
    BotScheduleUpdateSchema,
    BotScheduleSchema,
    BroadcastRequestSchema,
)
