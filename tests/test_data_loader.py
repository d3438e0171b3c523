import json

import pytest

from weekly_tracker.data_loader import build_sample_records, load_users


def write_users(tmp_path, payload):
    path = tmp_path / "users.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def valid_entry(name="Alice"):
    return {
        "name": name,
        "daily_steps": [8520, 10023, 7550, 12010, 9325, 11000, 6500],
        "daily_calories": [1850, 2100, 1750, 2250, 1950, 2050, 1600],
        "step_goal": 8000,
        "calorie_goal": 2000
    }


def test_load_users(tmp_path, capsys):
    path = write_users(tmp_path, {"users": [valid_entry("Alice"), valid_entry("Bob")]})
    records = load_users(path)

    assert [r.name for r in records] == ["Alice", "Bob"]
    assert records[0].best_day() == 4
    assert "Warning" not in capsys.readouterr().out


def test_load_users_skips_invalid_entries(tmp_path, capsys):
    short = valid_entry("Short")
    short["daily_steps"] = [1000] * 6
    negative = valid_entry("Negative")
    negative["calorie_goal"] = -1
    missing = valid_entry("Missing")
    del missing["step_goal"]

    path = write_users(tmp_path, {"users": [short, valid_entry("Bob"), negative, missing, "oops"]})
    records = load_users(path)

    assert [r.name for r in records] == ["Bob"]
    out = capsys.readouterr().out
    assert "Skipped 4 invalid user record(s)" in out
    assert "Record 0: Invalid values. Must provide exactly 7 days" in out
    assert "Record 2: Invalid values. Calorie goal cannot be negative" in out
    assert "Record 3: User record 3: Missing required fields: step_goal" in out
    assert "Record 4: User record 4: Expected an object, got str" in out


def test_load_users_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="User data file not found"):
        load_users(str(tmp_path / "nope.json"))


def test_load_users_invalid_json(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_users(str(path))


def test_load_users_requires_users_key(tmp_path):
    with pytest.raises(KeyError, match="users"):
        load_users(write_users(tmp_path, {"records": []}))


def test_load_users_requires_list(tmp_path):
    with pytest.raises(TypeError, match="must be a list"):
        load_users(write_users(tmp_path, {"users": {"name": "Alice"}}))


def test_build_sample_records():
    records = build_sample_records()
    assert [r.name for r in records] == ["Alice", "Bob"]
    assert records[0].step_goal == 8000
    assert records[1].calorie_goal == 2500
