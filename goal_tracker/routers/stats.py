import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from goal_tracker.config import settings
from goal_tracker.database import get_db
from goal_tracker.core.auth import require_auth
from goal_tracker.core.dates import parse_date_string, utc_today
from goal_tracker.schemas.stats import StatsResponse
from goal_tracker.services import storage
from goal_tracker.services.stats import build_stats, window_bounds

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stats", tags=["stats"], dependencies=[Depends(require_auth)])

@router.get("", response_model=StatsResponse)
async def get_stats(
    days: Optional[int] = Query(None, ge=0, le=settings.MAX_STATS_DAYS),
    today: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    if days is None:
        days = settings.DEFAULT_STATS_DAYS

    # The client's local day wins; server time is only a fallback.
    if today:
        try:
            today_date = parse_date_string(today).day
        except ValueError:
            raise HTTPException(400, f"Invalid date: {today}")
    else:
        today_date = utc_today()

    try:
        start, end = window_bounds(today_date, days)
    except OverflowError:
        raise HTTPException(400, f"Window of {days} days before {today_date} is out of range")

    try:
        goals = await storage.list_goals(db)
        logs = await storage.list_logs(db, start, end)
    except SQLAlchemyError:
        logger.exception("Error fetching stats")
        raise HTTPException(500, "Failed to fetch stats")

    return build_stats(goals, logs, days, today_date)
