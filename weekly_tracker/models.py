"""
Data models for the Weekly Fitness Tracker.

This module defines the data structures used throughout the application:
- FitnessRecord: One user's validated week of steps and calories
- DayResult: Per-day goal achievement row
- WeeklySummary: Structured weekly statistics for rendering
"""

import statistics
from dataclasses import dataclass

from weekly_tracker.config import DAYS_IN_WEEK, ON_TRACK_MIN_DAYS


class InvalidInputError(ValueError):
    """Raised when a FitnessRecord is constructed from invalid data."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_daily_values(values, label: str) -> tuple:
    """
    Validate one week of daily values and return them as a tuple.
    """
    if values is None:
        raise InvalidInputError(f"{label} data cannot be None")

    try:
        values = tuple(values)
    except TypeError:
        raise InvalidInputError(f"{label} must be a sequence, got {type(values).__name__}")

    if len(values) != DAYS_IN_WEEK:
        raise InvalidInputError(
            f"Must provide exactly {DAYS_IN_WEEK} days of {label.lower()} data, got {len(values)}"
        )

    for day, value in enumerate(values, start=1):
        if not _is_int(value):
            raise InvalidInputError(f"{label} for day {day} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidInputError(f"{label} cannot be negative, got {value} on day {day}")

    return values


def validate_goal(goal, label: str) -> int:
    if not _is_int(goal):
        raise InvalidInputError(f"{label} must be an integer, got {goal!r}")
    if goal < 0:
        raise InvalidInputError(f"{label} cannot be negative, got {goal}")
    return goal


def achievement_ratio(value: int, goal: int) -> float:
    """
    Fraction of a goal reached on one day.

    A goal of zero is met by any non-negative value, so it counts as 1.0.
    """
    if goal == 0:
        return 1.0
    return value / goal


@dataclass(frozen=True)
class DayResult:
    """Goal achievement for a single tracked day."""
    day: int  # 1-based day number
    steps: int
    steps_met: bool
    calories: int
    calories_met: bool


@dataclass(frozen=True)
class WeeklySummary:
    """Weekly statistics derived from one FitnessRecord."""
    name: str
    step_goal: int
    calorie_goal: int
    days: tuple
    avg_steps: float
    avg_calories: float
    best_day: int
    successful_days: int
    on_track: bool


@dataclass(frozen=True)
class FitnessRecord:
    """
    One user's week of fitness data.

    daily_steps and daily_calories are normalized to tuples holding the
    input values in order, so the record stays immutable after construction.
    """
    name: str
    daily_steps: tuple
    daily_calories: tuple
    step_goal: int
    calorie_goal: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError(f"Name must be a non-empty string, got {self.name!r}")

        # Frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, 'daily_steps', validate_daily_values(self.daily_steps, 'Steps'))
        object.__setattr__(self, 'daily_calories', validate_daily_values(self.daily_calories, 'Calories'))
        validate_goal(self.step_goal, 'Step goal')
        validate_goal(self.calorie_goal, 'Calorie goal')

    def average(self) -> tuple[float, float]:
        """Return the 7-day mean of steps and calories."""
        return statistics.fmean(self.daily_steps), statistics.fmean(self.daily_calories)

    def day_score(self, day_index: int) -> float:
        return (
            achievement_ratio(self.daily_steps[day_index], self.step_goal)
            + achievement_ratio(self.daily_calories[day_index], self.calorie_goal)
        )

    def best_day(self) -> int:
        """
        Return the 1-based day with the highest combined goal achievement.

        Ties keep the earlier day.
        """
        best_index = 0
        best_score = 0.0

        for i in range(DAYS_IN_WEEK):
            score = self.day_score(i)
            if score > best_score:
                best_score = score
                best_index = i

        return best_index + 1

    def steps_met(self, day_index: int) -> bool:
        return self.daily_steps[day_index] >= self.step_goal

    def calories_met(self, day_index: int) -> bool:
        return self.daily_calories[day_index] >= self.calorie_goal

    def successful_days(self) -> int:
        """Count the days on which both goals were met."""
        return sum(
            1 for i in range(DAYS_IN_WEEK)
            if self.steps_met(i) and self.calories_met(i)
        )

    def on_track(self) -> bool:
        return self.successful_days() >= ON_TRACK_MIN_DAYS

    def summary(self) -> WeeklySummary:
        """Collect all weekly statistics into a WeeklySummary."""
        avg_steps, avg_calories = self.average()
        days = tuple(
            DayResult(
                day=i + 1,
                steps=self.daily_steps[i],
                steps_met=self.steps_met(i),
                calories=self.daily_calories[i],
                calories_met=self.calories_met(i)
            )
            for i in range(DAYS_IN_WEEK)
        )
        return WeeklySummary(
            name=self.name,
            step_goal=self.step_goal,
            calorie_goal=self.calorie_goal,
            days=days,
            avg_steps=avg_steps,
            avg_calories=avg_calories,
            best_day=self.best_day(),
            successful_days=self.successful_days(),
            on_track=self.on_track()
        )
