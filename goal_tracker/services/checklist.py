from typing import Iterable, List, Sequence

from goal_tracker.core.dates import ParsedDate
from goal_tracker.schemas.log import ChecklistEntry
from goal_tracker.services.scheduler import is_goal_due_on

def scheduled_goals(goals: Sequence, when: ParsedDate) -> list:
    """Goals due on `when`, in their original order."""
    return [goal for goal in goals if is_goal_due_on(goal, when)]

def build_checklist(goals: Sequence, logs: Iterable) -> List[ChecklistEntry]:
    """Overlay one day's logs on already-scheduled goals."""
    log_by_goal = {log.goal_id: log for log in logs}

    entries = []
    for goal in goals:
        log = log_by_goal.get(goal.id)
        entries.append(ChecklistEntry(
            goal_id=goal.id,
            name=goal.name,
            category=goal.category,
            target_count=goal.target_count,
            target_period=goal.target_period,
            icon=goal.icon,
            color=goal.color,
            completed=bool(log and log.completed),
            notes=(log.notes if log else None) or "",
            log_id=log.id if log else None,
        ))
    return entries
