import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from goal_tracker.database import get_db
from goal_tracker.core.auth import require_auth
from goal_tracker.core.dates import parse_date_string
from goal_tracker.schemas.log import ChecklistEntry, LogResponse, LogUpsert
from goal_tracker.services import storage
from goal_tracker.services.checklist import build_checklist, scheduled_goals

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/logs", tags=["logs"], dependencies=[Depends(require_auth)])

@router.get("", response_model=List[ChecklistEntry])
async def get_daily_checklist(
    date: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    if not date:
        raise HTTPException(400, "Date parameter required")
    try:
        parsed = parse_date_string(date)
    except ValueError:
        raise HTTPException(400, f"Invalid date: {date}")

    try:
        goals = scheduled_goals(await storage.list_goals(db), parsed)
        logs = await storage.list_logs(db, parsed.day, parsed.day, goal_ids=[g.id for g in goals])
    except SQLAlchemyError:
        logger.exception("Error fetching logs for %s", date)
        raise HTTPException(500, "Failed to fetch logs")

    return build_checklist(goals, logs)

@router.post("", response_model=LogResponse)
async def upsert_log(log_in: LogUpsert, db: AsyncSession = Depends(get_db)):
    try:
        parsed = parse_date_string(log_in.date)
    except ValueError:
        raise HTTPException(400, f"Invalid date: {log_in.date}")

    if not await storage.get_goal(db, log_in.goal_id):
        raise HTTPException(404, "Goal not found")

    try:
        log = await storage.upsert_log(db, parsed.day, log_in.goal_id, log_in.completed, log_in.notes or None)
    except SQLAlchemyError:
        logger.exception("Error updating log for %s on %s", log_in.goal_id, log_in.date)
        raise HTTPException(500, "Failed to update log")
    return log
