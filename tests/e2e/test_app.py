from streamlit.testing.v1 import AppTest
import os
from session_logic import MatchGenerationSession


def test_setup_page_smoke():
    """Basic smoke test to ensure the setup page loads without crashing."""
    at = AppTest.from_file(os.path.abspath("1_Setup.py"))
    at.run(timeout=30)

    assert not at.exception
    # Check for the main title or some key text
    assert "Club Match Generator" in at.title[0].value


def test_matches_page_smoke(sample_players, sample_courts):
    """Basic smoke test for the Matches page."""
    at = AppTest.from_file(os.path.abspath("pages/2_Matches.py"))

    session = MatchGenerationSession(players=sample_players, courts=sample_courts)
    session.generate()
    at.session_state.session = session

    at.run(timeout=30)

    assert not at.exception
    assert "Matches" in at.title[0].value


def test_matches_page_title_describes_fallback_teams(sample_players, sample_courts):
    """With too few players for two full teams the title shows the teams formed."""
    at = AppTest.from_file(os.path.abspath("pages/2_Matches.py"))

    session = MatchGenerationSession(players=sample_players[:4], courts=sample_courts)
    session.generate()
    at.session_state.session = session

    at.run(timeout=30)

    assert not at.exception
    assert "2 teams of 2 players each" in at.title[0].value
    assert "Not enough players" not in at.title[0].value
