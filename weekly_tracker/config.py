"""
Configuration constants for the Weekly Fitness Tracker.
"""

DEFAULT_OUTPUT_PATH = "weekly_fitness_summary.json"

# Fixed tracking window
DAYS_IN_WEEK = 7

# Days meeting both goals required to count as on track
ON_TRACK_MIN_DAYS = 5

PASS_MARK = "[✓]"
FAIL_MARK = "[✗]"

# Users reported when no --user flag is given. Charlie is not registered.
DEFAULT_REPORT_NAMES = ("Alice", "Bob", "Charlie")

SAMPLE_USERS = [
    {
        "name": "Alice",
        "daily_steps": [8520, 10023, 7550, 12010, 9325, 11000, 6500],
        "daily_calories": [1850, 2100, 1750, 2250, 1950, 2050, 1600],
        "step_goal": 8000,
        "calorie_goal": 2000,
    },
    {
        "name": "Bob",
        "daily_steps": [5000, 6025, 7200, 6500, 7000, 5500, 8000],
        "daily_calories": [2200, 2400, 2100, 2300, 2150, 2250, 2350],
        "step_goal": 7500,
        "calorie_goal": 2500,
    },
]
