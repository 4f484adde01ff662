import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from goal_tracker.database import get_db
from goal_tracker.core.auth import require_auth
from goal_tracker.models.goal import Goal
from goal_tracker.schemas.goal import GoalCreate, GoalUpdate, GoalResponse
from goal_tracker.services import storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/goals", tags=["goals"], dependencies=[Depends(require_auth)])

async def get_goal_or_404(goal_id: str, db: AsyncSession = Depends(get_db)) -> Goal:
    goal = await storage.get_goal(db, goal_id)
    if not goal:
        raise HTTPException(404, "Goal not found")
    return goal

@router.get("", response_model=List[GoalResponse])
async def list_goals(db: AsyncSession = Depends(get_db)):
    try:
        return await storage.list_goals(db)
    except SQLAlchemyError:
        logger.exception("Error fetching goals")
        raise HTTPException(500, "Failed to fetch goals")

@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(goal_in: GoalCreate, db: AsyncSession = Depends(get_db)):
    goal = Goal(**goal_in.model_dump())
    db.add(goal)
    try:
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Error creating goal")
        raise HTTPException(500, "Failed to create goal")
    await db.refresh(goal)
    logger.info("Created goal %s (%sx per %s)", goal.id, goal.target_count, goal.target_period)
    return goal

@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_in: GoalUpdate,
    goal: Goal = Depends(get_goal_or_404),
    db: AsyncSession = Depends(get_db),
):
    for field, value in goal_in.model_dump(exclude_unset=True).items():
        # required columns can't be cleared
        if value is None and field in ("name", "category", "goal_type", "target_count", "target_period"):
            continue
        setattr(goal, field, value)
    try:
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Error updating goal %s", goal.id)
        raise HTTPException(500, "Failed to update goal")
    await db.refresh(goal)
    return goal

@router.delete("/{goal_id}")
async def delete_goal(goal: Goal = Depends(get_goal_or_404), db: AsyncSession = Depends(get_db)):
    goal_id = goal.id
    try:
        await storage.delete_goal(db, goal)
    except SQLAlchemyError:
        logger.exception("Error deleting goal %s", goal_id)
        raise HTTPException(500, "Failed to delete goal")
    return {"success": True}
