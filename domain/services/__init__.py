from domain.services.orders import (
    format_validation_errors,
    validate_order_payload,
    parse_status,
    parse_rating,
    create_order,
    get_order,
    get_orders,
    set_order_status,
    set_order_rating,
)
from domain.services.notifications import build_status_message, notify_status_change
from domain.services.analytics import (
    compute_dashboard_analytics,
    calculate_global_analytics,
    save_dashboard_analytics,
    update_dashboard_analytics,
    get_dashboard_analytics,
)
from domain.services.menu import build_menu, build_public_menu, create_food_item, update_food_item
from domain.services.admin import create_admin, authenticate_admin, get_admin, update_admin_credentials
from domain.services.bot import get_bot_schedule, update_bot_schedule, send_broadcast
