"""
Reporting and output functions module.

This module handles all display and output operations:
- Rendering a user's weekly fitness report as text
- Rendering the user-not-found notice
- Printing report blocks
- Generating JSON output
- Saving JSON to file
"""

import json
from datetime import datetime
from zoneinfo import ZoneInfo

from weekly_tracker.config import FAIL_MARK, ON_TRACK_MIN_DAYS, PASS_MARK
from weekly_tracker.models import FitnessRecord


def status_mark(met: bool) -> str:
    return PASS_MARK if met else FAIL_MARK


def render_report(record: FitnessRecord) -> str:
    """Render the weekly report for one user."""
    summary = record.summary()

    lines = [
        f"FITNESS REPORT FOR {summary.name.upper()}",
        f"Step Goal: {summary.step_goal} | Calorie Goal: {summary.calorie_goal}",
        "",
        "Daily Breakdown:",
    ]
    for day in summary.days:
        lines.append(
            f"Day {day.day}: Steps: {day.steps}{status_mark(day.steps_met)}"
            f" | Calories: {day.calories}{status_mark(day.calories_met)}"
        )

    lines.extend([
        "",
        f"7-Day Averages: Steps: {summary.avg_steps:.0f}, Calories: {summary.avg_calories:.0f}",
        f"Best Performance Day: Day {summary.best_day}",
        f"On Track (≥{ON_TRACK_MIN_DAYS} good days): {'YES' if summary.on_track else 'NO'}",
    ])
    return "\n".join(lines)


def render_not_found(name: str) -> str:
    return f"User '{name}' not found."


def print_report(text: str):
    """Print one report block."""
    print("\n" + text)


def generate_json_output(records: list[FitnessRecord]) -> dict:
    """
    Generate a JSON-serializable weekly summary for the given users.
    """
    users = []
    for record in records:
        summary = record.summary()
        users.append({
            "name": summary.name,
            "goals": {
                "steps": summary.step_goal,
                "calories": summary.calorie_goal
            },
            "daily_breakdown": [
                {
                    "day": day.day,
                    "steps": day.steps,
                    "steps_goal_met": day.steps_met,
                    "calories": day.calories,
                    "calories_goal_met": day.calories_met
                }
                for day in summary.days
            ],
            "averages": {
                "steps": round(summary.avg_steps, 2),
                "calories": round(summary.avg_calories, 2)
            },
            "best_day": summary.best_day,
            "successful_days": summary.successful_days,
            "on_track": summary.on_track
        })

    return {
        "metadata": {
            "generated_at": datetime.now(ZoneInfo('UTC')).isoformat(),
            "total_users": len(users)
        },
        "users": users
    }


def save_json_output(output: dict, filepath: str):
    """
    Save the weekly summary to a JSON file.
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)
    print(f"JSON output saved to: {filepath}")
