"""
Decides whether a goal is due on a calendar date.

Shared by the daily checklist and the statistics aggregator; both must go
through ``is_goal_scheduled_for_date`` so their rounding never diverges.
"""
import math
from datetime import date
from typing import Union

from goal_tracker.core import dates
from goal_tracker.core.dates import ParsedDate

DAYS_PER_WEEK = 7
# Month goals are spread over a fixed 30-day cycle, not the real month length.
DAYS_PER_MONTH_CYCLE = 30

def _spread(target_count: int, cycle_length: int):
    interval = cycle_length / target_count
    for i in range(target_count):
        yield math.floor(i * interval) % cycle_length

def is_goal_scheduled_for_date(goal, day_of_week: int, day_of_month: int) -> bool:
    """
    `goal` only needs `target_count` and `target_period`.
    Unknown periods are always due (fail-open).
    """
    period = goal.target_period
    count = goal.target_count

    if period == "week":
        if count >= DAYS_PER_WEEK:
            return True
        return day_of_week in _spread(count, DAYS_PER_WEEK)

    if period == "month":
        if count >= DAYS_PER_MONTH_CYCLE:
            return True
        return any(slot + 1 == day_of_month for slot in _spread(count, DAYS_PER_MONTH_CYCLE))

    # day, year and anything unrecognised
    return True

def is_goal_due_on(goal, when: Union[date, ParsedDate]) -> bool:
    if isinstance(when, ParsedDate):
        return is_goal_scheduled_for_date(goal, when.day_of_week, when.day_of_month)
    return is_goal_scheduled_for_date(goal, dates.day_of_week(when), when.day)
