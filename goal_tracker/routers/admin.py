import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import exc as sa_exc
from goal_tracker.core.auth import require_cron_secret
from goal_tracker.database import engine, Base

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/init", tags=["admin"])

async def create_tables() -> None:
    # Register every table on Base.metadata before create_all
    from goal_tracker.models import goal, reminder  # noqa: F401

    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            # ignore duplicate-object errors from previous partial runs
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

@router.get("")
async def init_usage():
    return {"message": "Use POST with authorization to initialize database"}

@router.post("", dependencies=[Depends(require_cron_secret)])
async def init_database():
    try:
        await create_tables()
    except sa_exc.SQLAlchemyError as e:
        logger.exception("Init error")
        raise HTTPException(500, f"Failed to initialize database: {e}")
    return {"success": True, "message": "Database initialized"}
