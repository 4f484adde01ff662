from datetime import date
from typing import List, Optional, Sequence
from sqlalchemy import select, delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from goal_tracker.models.goal import Goal, GoalLog, new_id
from goal_tracker.models.reminder import ReminderSettings, SETTINGS_ID

async def list_goals(db: AsyncSession) -> List[Goal]:
    """Newest first"""
    result = await db.execute(select(Goal).order_by(Goal.created_at.desc(), Goal.id))
    return list(result.scalars().all())

async def get_goal(db: AsyncSession, goal_id: str) -> Optional[Goal]:
    result = await db.execute(select(Goal).where(Goal.id == goal_id))
    return result.scalar_one_or_none()

async def delete_goal(db: AsyncSession, goal: Goal) -> None:
    # Logs go with the goal even where the backend doesn't enforce ON DELETE CASCADE
    await db.execute(delete(GoalLog).where(GoalLog.goal_id == goal.id))
    await db.delete(goal)
    await db.commit()

async def list_logs(
    db: AsyncSession, start: date, end: date, goal_ids: Optional[Sequence[str]] = None
) -> List[GoalLog]:
    query = (
        select(GoalLog)
        .where(GoalLog.date >= start)
        .where(GoalLog.date <= end)
        .order_by(GoalLog.date, GoalLog.goal_id)
    )
    if goal_ids is not None:
        query = query.where(GoalLog.goal_id.in_(list(goal_ids)))
    result = await db.execute(query)
    return list(result.scalars().all())

def _insert_for(db: AsyncSession):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise NotImplementedError(f"Upsert not supported on {dialect}")

async def upsert_log(
    db: AsyncSession, day: date, goal_id: str, completed: bool, notes: Optional[str]
) -> GoalLog:
    """
    Create or overwrite the log for (day, goal_id) in one statement, so
    concurrent writers for the same key end with a single row.
    """
    insert = _insert_for(db)
    stmt = insert(GoalLog).values(
        id=new_id(), date=day, goal_id=goal_id, completed=completed, notes=notes
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[GoalLog.date, GoalLog.goal_id],
        set_={"completed": stmt.excluded.completed, "notes": stmt.excluded.notes},
    )
    await db.execute(stmt)
    await db.commit()

    result = await db.execute(
        select(GoalLog)
        .where(GoalLog.date == day, GoalLog.goal_id == goal_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()

async def get_reminder_settings(db: AsyncSession) -> Optional[ReminderSettings]:
    result = await db.execute(
        select(ReminderSettings)
        .where(ReminderSettings.id == SETTINGS_ID)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()

async def save_reminder_settings(db: AsyncSession, changes: dict) -> ReminderSettings:
    """
    The singleton row is keyed on a fixed id and created with
    ON CONFLICT DO NOTHING, so racing first writers share one row.
    """
    insert = _insert_for(db)
    await db.execute(
        insert(ReminderSettings)
        .values(id=SETTINGS_ID)
        .on_conflict_do_nothing(index_elements=[ReminderSettings.id])
    )
    settings_row = await get_reminder_settings(db)
    for field, value in changes.items():
        setattr(settings_row, field, value)
    await db.commit()
    await db.refresh(settings_row)
    return settings_row
