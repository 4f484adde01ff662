"""Range statistics: chart data, streaks, rates and per-goal progress."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from goal_tracker.schemas.stats import ChartPoint
from goal_tracker.services.stats import (
    build_stats,
    compute_streak,
    expected_count,
    percent,
    period_label,
)


def goal(goal_id: str, count: int, period: str, name: str = "Workout") -> SimpleNamespace:
    return SimpleNamespace(
        id=goal_id,
        name=name,
        category="workout",
        icon=None,
        color=None,
        target_count=count,
        target_period=period,
    )


def log(goal_id: str, day: date, completed: bool = True) -> SimpleNamespace:
    return SimpleNamespace(goal_id=goal_id, date=day, completed=completed)


def points(*rows: tuple[str, int, int]) -> list[ChartPoint]:
    return [
        ChartPoint(date=d, completion_rate=percent(c, t), completed=c, total=t)
        for d, c, t in rows
    ]


def test_percent_rounds_half_up() -> None:
    assert percent(1, 8) == 13
    assert percent(1, 6) == 17
    assert percent(2, 3) == 67
    assert percent(3, 3) == 100
    assert percent(5, 0) == 0


def test_streak_survives_incomplete_today() -> None:
    chart = points(
        ("2024-01-01", 1, 1),
        ("2024-01-02", 1, 1),
        ("2024-01-03", 1, 1),
        ("2024-01-04", 0, 1),
    )
    assert compute_streak(chart, "2024-01-04") == 3


def test_streak_breaks_on_incomplete_yesterday() -> None:
    chart = points(
        ("2024-01-01", 1, 1),
        ("2024-01-02", 1, 1),
        ("2024-01-03", 0, 1),
        ("2024-01-04", 1, 1),
    )
    assert compute_streak(chart, "2024-01-04") == 1

    chart[-1] = ChartPoint(date="2024-01-04", completion_rate=0, completed=0, total=1)
    assert compute_streak(chart, "2024-01-04") == 0


def test_streak_skips_days_after_today() -> None:
    chart = points(
        ("2024-01-01", 1, 1),
        ("2024-01-02", 1, 1),
        ("2024-01-03", 0, 2),
        ("2024-01-04", 0, 2),
    )
    assert compute_streak(chart, "2024-01-02") == 2


def test_empty_day_before_today_breaks_streak() -> None:
    chart = points(
        ("2024-01-01", 1, 1),
        ("2024-01-02", 0, 0),
        ("2024-01-03", 1, 1),
    )
    assert compute_streak(chart, "2024-01-03") == 1


def test_empty_today_neither_counts_nor_breaks() -> None:
    chart = points(
        ("2024-01-01", 2, 2),
        ("2024-01-02", 1, 1),
        ("2024-01-03", 0, 0),
    )
    assert compute_streak(chart, "2024-01-03") == 2


@pytest.mark.parametrize(
    "count, period, days, expected",
    [
        (1, "day", 30, 30),
        (3, "week", 7, 3),
        (3, "week", 30, 13),
        (2, "month", 45, 3),
        (1, "month", 7, 1),
        (4, "year", 365, 4),
        (4, "year", 7, 4),
        (5, "fortnight", 30, 5),
    ],
)
def test_expected_count_by_period(count: int, period: str, days: int, expected: int) -> None:
    assert expected_count(goal("g", count, period), days) == expected


@pytest.mark.parametrize(
    "count, period, label",
    [
        (1, "day", "1x daily"),
        (3, "week", "3x per week"),
        (2, "month", "2x per month"),
        (6, "year", "6 per year"),
        (2, "fortnight", "2x"),
    ],
)
def test_period_labels(count: int, period: str, label: str) -> None:
    assert period_label(goal("g", count, period)) == label


def test_weekly_goal_completed_on_every_due_day() -> None:
    # 2024-01-06 (Sat) .. 2024-01-13 (Sat); 3x/week is due Sun, Tue, Thu
    workout = goal("w", 3, "week")
    logs = [log("w", date(2024, 1, 7)), log("w", date(2024, 1, 9)), log("w", date(2024, 1, 11))]

    stats = build_stats([workout], logs, days=7, today=date(2024, 1, 13))

    assert len(stats.chart_data) == 8
    assert stats.chart_data[0].date == "2024-01-06"
    assert stats.chart_data[-1].date == "2024-01-13"
    assert [p.total for p in stats.chart_data] == [0, 1, 0, 1, 0, 1, 0, 0]
    assert stats.total_expected == 3
    assert stats.total_completed == 3
    assert stats.overall_rate == 100

    (goal_stat,) = stats.goal_stats
    assert goal_stat.completed == 3
    assert goal_stat.expected == 3
    assert goal_stat.rate == 100
    assert goal_stat.period_label == "3x per week"

    # Friday had nothing due, which ends the streak before it starts
    assert stats.current_streak == 0


def test_thirty_day_window_expects_thirteen_weekly_completions() -> None:
    stats = build_stats([goal("w", 3, "week")], [], days=30, today=date(2024, 1, 31))
    assert stats.goal_stats[0].expected == 13
    assert stats.goal_stats[0].rate == 0
    assert len(stats.chart_data) == 31


def test_zero_days_is_a_single_day_window() -> None:
    stats = build_stats([goal("d", 1, "day")], [log("d", date(2024, 5, 1))], days=0, today=date(2024, 5, 1))

    assert [p.date for p in stats.chart_data] == ["2024-05-01"]
    assert stats.chart_data[0].completion_rate == 100
    assert stats.current_streak == 1
    assert stats.goal_stats[0].expected == 0
    assert stats.goal_stats[0].rate == 0


def test_daily_streak_counts_back_from_today() -> None:
    reading = goal("r", 1, "day", name="Reading")
    logs = [log("r", date(2024, 2, d)) for d in (1, 3, 4, 5)]

    stats = build_stats([reading], logs, days=4, today=date(2024, 2, 5))

    assert stats.current_streak == 3
    assert stats.overall_rate == 80


def test_logs_count_even_when_goal_was_not_due() -> None:
    weekly = goal("w", 1, "week")  # Sundays only
    monday = date(2024, 1, 8)

    stats = build_stats([weekly], [log("w", monday)], days=1, today=monday)

    monday_point = stats.chart_data[-1]
    assert monday_point.completed == 1
    assert monday_point.total == 0
    assert monday_point.completion_rate == 0
    assert stats.total_completed == 1


def test_incomplete_and_out_of_window_logs_are_ignored() -> None:
    daily = goal("d", 1, "day")
    logs = [
        log("d", date(2024, 3, 10), completed=False),
        log("d", date(2024, 3, 1)),
        log("d", date(2024, 3, 20)),
        log("d", date(2024, 3, 11)),
    ]

    stats = build_stats([daily], logs, days=2, today=date(2024, 3, 12))

    assert stats.total_completed == 1
    assert [p.completed for p in stats.chart_data] == [0, 1, 0]


def test_goals_are_not_pro_rated_by_creation() -> None:
    goals = [goal("a", 1, "day"), goal("b", 1, "day", name="Meditate")]
    stats = build_stats(goals, [], days=2, today=date(2024, 3, 12))
    assert [p.total for p in stats.chart_data] == [2, 2, 2]
    assert stats.total_expected == 6


def test_same_inputs_give_identical_output() -> None:
    goals = [goal("w", 3, "week"), goal("m", 2, "month", name="Budget"), goal("y", 1, "year")]
    logs = [log("w", date(2024, 1, d)) for d in range(1, 20, 3)] + [log("m", date(2024, 1, 16))]

    first = build_stats(goals, logs, days=21, today=date(2024, 1, 21))
    second = build_stats(goals, logs, days=21, today=date(2024, 1, 21))

    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


def test_serialises_with_camel_case_keys() -> None:
    payload = build_stats([goal("w", 3, "week")], [], days=1, today=date(2024, 1, 7)).model_dump(by_alias=True)

    assert set(payload) == {
        "chartData", "currentStreak", "overallRate", "totalCompleted", "totalExpected", "goalStats",
    }
    assert set(payload["chartData"][0]) == {"date", "completionRate", "completed", "total"}
    assert "periodLabel" in payload["goalStats"][0]
    assert "targetPeriod" in payload["goalStats"][0]
