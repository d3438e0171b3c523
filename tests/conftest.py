import pytest

from weekly_tracker.models import FitnessRecord
from sample_data import ALICE_CALORIES, ALICE_STEPS, BOB_CALORIES, BOB_STEPS


@pytest.fixture
def alice():
    return FitnessRecord("Alice", ALICE_STEPS, ALICE_CALORIES, 8000, 2000)


@pytest.fixture
def bob():
    return FitnessRecord("Bob", BOB_STEPS, BOB_CALORIES, 7500, 2500)
