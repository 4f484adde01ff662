"""
Range statistics over goals and their completion logs.

Everything here is pure: callers fetch goals and logs for the window and pass
them in together with the client's "today".
"""
import math
from datetime import date, timedelta
from typing import Dict, Iterable, List, Sequence

from goal_tracker.core.dates import date_range, format_date_string
from goal_tracker.schemas.stats import ChartPoint, GoalStat, StatsResponse
from goal_tracker.services.scheduler import is_goal_due_on

def percent(part: int, whole: int) -> int:
    """Half-up rounded percentage, 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)

def window_bounds(today: date, days: int):
    return today - timedelta(days=days), today

def expected_count(goal, days: int) -> int:
    period = goal.target_period
    if period == "day":
        return days
    if period == "week":
        return math.ceil(days / 7 * goal.target_count)
    if period == "month":
        return math.ceil(days / 30 * goal.target_count)
    # year goals are not scaled by the window
    return goal.target_count

def period_label(goal) -> str:
    count = goal.target_count
    return {
        "day": f"{count}x daily",
        "week": f"{count}x per week",
        "month": f"{count}x per month",
        "year": f"{count} per year",
    }.get(goal.target_period, f"{count}x")

def compute_streak(chart_data: Sequence[ChartPoint], today_str: str) -> int:
    """
    Consecutive fully completed days ending at or before today.

    Days after today are skipped. Today not being complete yet doesn't break
    the streak; any earlier incomplete (or empty) day does.
    """
    streak = 0
    for point in reversed(chart_data):
        if point.date > today_str:
            continue
        if point.total > 0 and point.completed == point.total:
            streak += 1
        elif point.date < today_str:
            break
    return streak

def build_chart_data(goals: Sequence, logs: Iterable, start: date, end: date) -> List[ChartPoint]:
    daily: Dict[date, Dict[str, int]] = {}
    for day in date_range(start, end):
        expected = sum(1 for goal in goals if is_goal_due_on(goal, day))
        daily[day] = {"completed": 0, "total": expected}

    # Completed logs count for their day whether or not the goal was due.
    for log in logs:
        if log.completed and log.date in daily:
            daily[log.date]["completed"] += 1

    return [
        ChartPoint(
            date=format_date_string(day),
            completion_rate=percent(counts["completed"], counts["total"]),
            completed=counts["completed"],
            total=counts["total"],
        )
        for day, counts in daily.items()
    ]

def build_goal_stats(goals: Sequence, completed_logs: Sequence, days: int) -> List[GoalStat]:
    completed_by_goal: Dict[str, int] = {}
    for log in completed_logs:
        completed_by_goal[log.goal_id] = completed_by_goal.get(log.goal_id, 0) + 1

    stats = []
    for goal in goals:
        completed = completed_by_goal.get(goal.id, 0)
        expected = expected_count(goal, days)
        stats.append(GoalStat(
            id=goal.id,
            name=goal.name,
            category=goal.category,
            icon=goal.icon,
            color=goal.color,
            completed=completed,
            expected=expected,
            target=goal.target_count,
            target_period=goal.target_period,
            period_label=period_label(goal),
            rate=percent(completed, expected),
        ))
    return stats

def build_stats(goals: Sequence, logs: Iterable, days: int, today: date) -> StatsResponse:
    """
    `goals` need id, name, category, icon, color, target_count, target_period.
    `logs` need date (a `date`), goal_id and completed. Logs outside the
    window are ignored. No pro-rating for goals created mid-window.
    """
    start, end = window_bounds(today, days)
    in_window = [log for log in logs if start <= log.date <= end]
    completed_logs = [log for log in in_window if log.completed]

    chart_data = build_chart_data(goals, in_window, start, end)
    total_expected = sum(point.total for point in chart_data)

    return StatsResponse(
        chart_data=chart_data,
        current_streak=compute_streak(chart_data, format_date_string(today)),
        overall_rate=percent(len(completed_logs), total_expected),
        total_completed=len(completed_logs),
        total_expected=total_expected,
        goal_stats=build_goal_stats(goals, completed_logs, days),
    )
