from enum import Enum


class UserRole(str, Enum):
    admin = "admin"


class DeliveryType(str, Enum):
    delivery = "delivery"
    takeout = "takeout"


class OrderStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    denied = "denied"
    ready = "ready"
    completed = "completed"
    delivered = "delivered"
    cancelled = "cancelled"


class Period(str, Enum):
    today = "today"
    week = "week"
    month = "month"
    year = "year"
