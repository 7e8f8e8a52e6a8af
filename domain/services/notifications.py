import logging

from domain import schemas
from domain.core.errors import UpstreamNotificationError
from utils.enums import OrderStatus
from utils.helpers import short_order_id

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    OrderStatus.accepted: "✅ Sizning {order} buyurtmangiz qabul qilindi! Tayyor bo'lganda xabar beramiz.",
    OrderStatus.denied: (
        "❌ Uzr, sizning {order} buyurtmangiz rad etildi. "
        "Sababini bilish uchun operator bilan bog'laning."
    ),
    OrderStatus.ready: (
        "✅ Sizning {order} buyurtmangiz tayyor! "
        "Yetkazib berish/olib ketish uchun tez orada siz bilan bog'lanamiz."
    ),
    OrderStatus.completed: "✅ Sizning {order} buyurtmangiz yakunlandi.",
}


def build_status_message(status: OrderStatus, order_id: str) -> str | None:
    template = STATUS_MESSAGES.get(OrderStatus(status))
    if template is None:
        return None
    return template.format(order=short_order_id(order_id))


def notify_status_change(bot_client, order: schemas.OrderSchema) -> bool:
    """Tell the customer about a status change. Never raises."""
    message = build_status_message(order.order_status, order.id)
    if message is None:
        return False

    try:
        return bot_client.notify(order.user_id, message)
    except UpstreamNotificationError:
        logger.warning(f"Notification_failed order_id={order.id} chat_id={order.user_id}", exc_info=True)
        return False
    except Exception:
        logger.exception(f"Unexpected_notification_error order_id={order.id}")
        return False
