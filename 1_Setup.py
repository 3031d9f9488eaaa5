from datetime import date, time

import pandas as pd
import streamlit as st

from app_types import Court, GenerationFormat, Player, RotationMode, RotationOptions, SkillLevel
from constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_MATCH_DURATION_MINUTES,
    DEFAULT_NUM_COURTS,
    DEFAULT_TEAM_SIZE,
)
from database import CourtDB, PlayerDB
from exceptions import DatabaseError, ValidationError
from logger import setup_logging
from player_registry import create_roster_dataframe, dataframe_to_players
from session_logic import MatchGenerationSession
from team_builder import build_participants_for_match, describe_build
from team_sizing import calculate_optimal_team_sizes, get_all_team_configurations

setup_logging()

# Setup Constants
SKILL_LEVELS = SkillLevel.roster_levels()
DEFAULT_PLAYERS = [
    Player(id=f"P{i}", first_name="Player", last_name=str(i), skill_level=SKILL_LEVELS[i % 4])
    for i in range(1, 13)
]


def default_courts(count: int) -> list[Court]:
    return [Court(id=f"court-{i}", name=f"Court {i}") for i in range(1, count + 1)]


st.set_page_config(layout="wide", page_title="Club Match Generator")

st.title("🏓 Club Match Generator")

if "roster_df" not in st.session_state:
    st.session_state.roster_df = create_roster_dataframe(DEFAULT_PLAYERS)
if "courts" not in st.session_state:
    st.session_state.courts = default_courts(DEFAULT_NUM_COURTS)

# --- Roster ---
st.header("1. Players")
st.info("Tick the players who are here tonight. Add guests with the '+' row.")

if st.button("☁️ Load roster from cloud"):
    try:
        st.session_state.roster_df = create_roster_dataframe(PlayerDB.get_all_players())
        st.rerun()
    except DatabaseError as e:
        st.error(f"Could not load roster: {e}")

edited_df = st.data_editor(
    st.session_state.roster_df,
    num_rows="dynamic",
    hide_index=True,
    column_config={
        "#": st.column_config.NumberColumn(disabled=True),
        "Player ID": None,
        "Skill Level": st.column_config.SelectboxColumn(options=SKILL_LEVELS),
        "Available": st.column_config.CheckboxColumn(default=True),
    },
    key="roster_editor",
)

try:
    players = dataframe_to_players(pd.DataFrame(edited_df))
except ValidationError as e:
    st.error(str(e))
    players = []

st.caption(f"{len(players)} player(s) available")

# --- Courts ---
st.header("2. Courts")
col_count, col_load = st.columns([3, 1])
with col_count:
    num_courts = st.number_input(
        "Number of Courts", min_value=1, value=len(st.session_state.courts) or 1, step=1
    )
    if num_courts != len(st.session_state.courts):
        st.session_state.courts = default_courts(int(num_courts))
with col_load:
    if st.button("☁️ Load courts", use_container_width=True):
        try:
            st.session_state.courts = CourtDB.get_all_courts()
            st.rerun()
        except DatabaseError as e:
            st.error(f"Could not load courts: {e}")

st.caption(", ".join(c.name for c in st.session_state.courts) or "No courts")

# --- Settings ---
st.header("3. Format")
col1, col2, col3 = st.columns(3)
with col1:
    team_size = st.number_input("Players per Team", min_value=1, value=DEFAULT_TEAM_SIZE, step=1)
    fmt = st.radio(
        "Format",
        options=list(GenerationFormat),
        format_func=lambda f: "Round Robin" if f == GenerationFormat.ROUND_ROBIN else "Team vs Team",
    )
    balance_skills = st.checkbox("Sort players by skill before forming teams", value=False)
with col2:
    rotation = st.selectbox(
        "Player Rotation",
        options=list(RotationMode),
        format_func=lambda r: r.value.replace("-", " ").title(),
    )
    rounds = st.number_input("Matches per Pairing", min_value=1, value=1, step=1)
with col3:
    match_date = st.date_input("Date", value=date.today())
    start_time = st.time_input("Start", value=time(18, 0))
    end_time = st.time_input("End", value=time(21, 0))
    duration = st.number_input(
        "Match Duration (min)", min_value=5, value=DEFAULT_MATCH_DURATION_MINUTES, step=5
    )
    break_minutes = st.number_input(
        "Break Between Matches (min)", min_value=0, value=DEFAULT_BREAK_MINUTES, step=5
    )

plan = calculate_optimal_team_sizes(len(players), int(team_size))
if plan.is_valid:
    st.success(f"**Teams:** {plan.description}")
else:
    preview = build_participants_for_match(players, int(team_size))
    if preview.has_match:
        st.info(f"**Teams:** {describe_build(preview)} (fewer players than two full teams)")
    else:
        st.warning(plan.description)

suggestions = get_all_team_configurations(len(players))
if suggestions:
    with st.expander("Other ways to split the group"):
        for option in suggestions:
            st.markdown(f"- {option.description}{' ⭐' if option.is_optimal else ''}")

if st.button("🚀 Generate Matches", type="primary"):
    session = MatchGenerationSession(
        players=players,
        courts=st.session_state.courts,
        preferred_team_size=int(team_size),
        fmt=fmt,
        rotation_options=RotationOptions(player_rotation=rotation, number_of_rounds=int(rounds)),
        date=match_date.isoformat(),
        start_time=start_time.strftime("%H:%M"),
        end_time=end_time.strftime("%H:%M"),
        match_duration_minutes=int(duration),
        break_minutes=int(break_minutes),
        balance_skills=balance_skills,
    )
    try:
        result = session.generate()
    except ValidationError as e:
        st.error(str(e))
    else:
        if result.success:
            st.session_state.session = session
            st.switch_page("pages/2_Matches.py")
        else:
            st.warning("Need at least 4 players to generate matches.")
