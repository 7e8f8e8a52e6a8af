import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from domain import schemas, services
from domain.core.errors import DomainError, NotFoundError, UpstreamNotificationError
from fastapi_app.dependencies.auth import get_current_admin
from fastapi_app.dependencies.bot import get_bot_client
from fastapi_app.dependencies.db import get_db
from infrastructure.bot_client import BotClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bot", tags=["bot"])


@router.get("/schedule", response_model=schemas.BotScheduleSchema)
def get_schedule_endpoint(db: Session = Depends(get_db)):
    try:
        return services.get_bot_schedule(db)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/schedule", response_model=schemas.BotScheduleSchema)
def update_schedule_endpoint(
        data: schemas.BotScheduleUpdateSchema,
        _: schemas.CurrentAdminSchema = Depends(get_current_admin),
        db: Session = Depends(get_db),
):
    try:
        schedule = services.update_bot_schedule(db, data)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed_to_update_schedule")
        raise

    return schedule


@router.post("/broadcast", response_model=schemas.MessageResponseSchema)
def broadcast_endpoint(
        data: schemas.BroadcastRequestSchema,
        _: schemas.CurrentAdminSchema = Depends(get_current_admin),
        bot_client: BotClient = Depends(get_bot_client),
):
    try:
        services.send_broadcast(bot_client, data)
    except UpstreamNotificationError as e:
        logger.warning("Broadcast_failed", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to send broadcast: {e}",
        )
    except DomainError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    return {"message": "Broadcast message sent successfully!"}
