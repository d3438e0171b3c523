"""
Data loading module.

This module handles:
- Loading user fitness records from JSON
- Building the built-in sample records
- Comprehensive error handling for invalid data
"""

import json

from weekly_tracker.config import SAMPLE_USERS
from weekly_tracker.models import FitnessRecord, InvalidInputError


# Required fields for user records
USER_REQUIRED_FIELDS = {'name', 'daily_steps', 'daily_calories', 'step_goal', 'calorie_goal'}


def validate_user_entry(entry: dict, index: int) -> None:
    """
    Validate that a user entry has all required fields.
    """
    if not isinstance(entry, dict):
        raise TypeError(f"User record {index}: Expected an object, got {type(entry).__name__}")

    missing_fields = USER_REQUIRED_FIELDS - set(entry.keys())
    if missing_fields:
        raise ValueError(
            f"User record {index}: Missing required fields: {', '.join(sorted(missing_fields))}. "
            f"Required: {', '.join(sorted(USER_REQUIRED_FIELDS))}"
        )


def record_from_entry(entry: dict) -> FitnessRecord:
    return FitnessRecord(
        name=entry['name'],
        daily_steps=entry['daily_steps'],
        daily_calories=entry['daily_calories'],
        step_goal=entry['step_goal'],
        calorie_goal=entry['calorie_goal']
    )


def load_users(filepath: str) -> list[FitnessRecord]:
    """
    Load user records from JSON file with comprehensive error handling.
    Skips invalid records and prints warnings for each skipped entry.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"User data file not found: {filepath}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in user data file: {e}")

    if not isinstance(data, dict) or 'users' not in data:
        raise KeyError("User data JSON must contain 'users' key")

    if not isinstance(data['users'], list):
        raise TypeError(f"'users' must be a list, got {type(data['users']).__name__}")

    records = []
    skipped = []
    for idx, entry in enumerate(data['users']):
        try:
            validate_user_entry(entry, idx)
            records.append(record_from_entry(entry))
        except InvalidInputError as e:
            skipped.append((idx, f"Invalid values. {e}"))
        except (KeyError, ValueError, TypeError) as e:
            skipped.append((idx, str(e)))

    # Print warnings for skipped records
    if skipped:
        print(f"  Warning: Skipped {len(skipped)} invalid user record(s):")
        for idx, error in skipped:
            print(f"    - Record {idx}: {error}")

    return records


def build_sample_records() -> list[FitnessRecord]:
    """
    Build the built-in sample users. Construction errors propagate.
    """
    return [record_from_entry(entry) for entry in SAMPLE_USERS]
