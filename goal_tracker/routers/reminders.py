import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
from goal_tracker.database import get_db
from goal_tracker.core.auth import require_auth, require_cron_secret
from goal_tracker.models.reminder import ReminderSettings
from goal_tracker.schemas.reminder import ReminderSettingsUpdate, ReminderSettingsResponse, MessageResponse
from goal_tracker.services import storage
from goal_tracker.services.notifier import ReminderNotifier, get_notifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reminders", tags=["reminders"], dependencies=[Depends(require_auth)])
cron_router = APIRouter(prefix="/api/cron", tags=["reminders"], dependencies=[Depends(require_cron_secret)])

@router.get("", response_model=ReminderSettingsResponse)
async def get_reminder_settings(db: AsyncSession = Depends(get_db)):
    settings_row = await storage.get_reminder_settings(db)
    if settings_row is None:
        settings_row = await storage.save_reminder_settings(db, {})
    return settings_row

@router.put("", response_model=ReminderSettingsResponse)
async def update_reminder_settings(
    settings_in: ReminderSettingsUpdate,
    db: AsyncSession = Depends(get_db),
):
    changes = {k: v for k, v in settings_in.model_dump(exclude_unset=True).items() if v is not None}
    return await storage.save_reminder_settings(db, changes)

async def dispatch_reminder(db: AsyncSession, notifier: ReminderNotifier) -> MessageResponse:
    settings_row: ReminderSettings = await storage.get_reminder_settings(db)
    if not settings_row or not settings_row.enabled or not settings_row.email:
        return MessageResponse(message="Reminders disabled or email not set")

    goals = await storage.list_goals(db)
    if not goals:
        return MessageResponse(message="No goals configured")

    # requests is blocking
    success = await run_in_threadpool(notifier.send_reminder, settings_row.email, goals)
    if not success:
        raise HTTPException(500, "Failed to send reminder")
    return MessageResponse(message="Reminder sent successfully")

@router.post("/send", response_model=MessageResponse)
async def send_reminder(
    db: AsyncSession = Depends(get_db),
    notifier: ReminderNotifier = Depends(get_notifier),
):
    return await dispatch_reminder(db, notifier)

@cron_router.post("", response_model=MessageResponse)
async def cron_send_reminder(
    db: AsyncSession = Depends(get_db),
    notifier: ReminderNotifier = Depends(get_notifier),
):
    logger.info("Cron reminder triggered")
    return await dispatch_reminder(db, notifier)
