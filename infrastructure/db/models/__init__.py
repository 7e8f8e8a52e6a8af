from infrastructure.db.models.orders import Order
from infrastructure.db.models.menu import FoodItem
from infrastructure.db.models.admin import Admin, BotSchedule, DashboardAnalytics

__all__ = ["Order", "FoodItem", "Admin", "BotSchedule", "DashboardAnalytics"]
