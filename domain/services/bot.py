import logging
from sqlalchemy.orm import Session

from domain import schemas
from domain.core.constants import BOT_SCHEDULE_ID
from domain.core.errors import DomainError, NotFoundError
from infrastructure.db.models import BotSchedule

logger = logging.getLogger(__name__)


def get_bot_schedule(db: Session) -> schemas.BotScheduleSchema:
    schedule = db.get(BotSchedule, BOT_SCHEDULE_ID)
    if not schedule:
        raise NotFoundError("Schedule not found")
    return schemas.BotScheduleSchema.model_validate(schedule)


def update_bot_schedule(db: Session, data: schemas.BotScheduleUpdateSchema) -> schemas.BotScheduleSchema:
    schedule = db.get(BotSchedule, BOT_SCHEDULE_ID)
    if not schedule:
        schedule = BotSchedule(id=BOT_SCHEDULE_ID)
        db.add(schedule)

    schedule.schedule = data.schedule.model_dump(by_alias=True)
    schedule.is_emergency_off = data.is_emergency_off
    db.flush()

    logger.info(f"Bot_schedule_updated emergency_off={schedule.is_emergency_off}")
    return schemas.BotScheduleSchema.model_validate(schedule)


def send_broadcast(bot_client, data: schemas.BroadcastRequestSchema) -> dict:
    if not bot_client.broadcast_url:
        raise DomainError("Bot backend URL is not configured")

    result = bot_client.broadcast(data.title, data.message, data.image_url)
    logger.info(f"Broadcast_sent title={data.title!r}")
    return result
