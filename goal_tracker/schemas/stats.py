from pydantic import BaseModel
from typing import List, Optional
from goal_tracker.schemas.goal import camel_config

class ChartPoint(BaseModel):
    date: str  # YYYY-MM-DD
    completion_rate: int
    completed: int
    total: int

    model_config = camel_config

class GoalStat(BaseModel):
    id: str
    name: str
    category: str
    icon: Optional[str] = None
    color: Optional[str] = None
    completed: int
    expected: int
    target: int
    target_period: str
    period_label: str
    rate: int

    model_config = camel_config

class StatsResponse(BaseModel):
    chart_data: List[ChartPoint]
    current_streak: int
    overall_rate: int
    total_completed: int
    total_expected: int
    goal_stats: List[GoalStat]

    model_config = camel_config
