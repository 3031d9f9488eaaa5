import pytest

from app_types import Court, Player
from tests.utils import generate_players


@pytest.fixture
def sample_players():
    """Returns an ordered roster of eight players."""
    return [
        Player(id="alice", first_name="Alice", last_name="Ng", skill_level="Advanced"),
        Player(id="bob", first_name="Bob", last_name="Ortiz", skill_level="Beginner"),
        Player(id="charlie", first_name="Charlie", last_name="Park", skill_level="Intermediate"),
        Player(id="dave", first_name="Dave", last_name="Quinn", skill_level="Advanced"),
        Player(id="eve", first_name="Eve", last_name="Reyes", skill_level="Intermediate"),
        Player(id="frank", first_name="Frank", last_name="Shah", skill_level="Beginner"),
        Player(id="grace", first_name="Grace", last_name="Tan", skill_level="Professional"),
        Player(id="heidi", first_name="Heidi", last_name="Ueda", skill_level="Intermediate"),
    ]


@pytest.fixture
def sample_courts():
    """Returns two courts."""
    return [
        Court(id="court-1", name="Court 1"),
        Court(id="court-2", name="Court 2"),
    ]


@pytest.fixture
def eighteen_players():
    return generate_players(18)
