import streamlit as st

from match_service import try_save_generated_matches
from match_utils import get_team_vs_display
from player_registry import matches_to_dataframe

st.set_page_config(initial_sidebar_state="collapsed", layout="wide")

# --- Page Entry Logic ---
if "session" not in st.session_state or st.session_state.session.last_result is None:
    st.error("No generated matches found. Please set up a generation first.")
    st.switch_page("1_Setup.py")

session = st.session_state.session
result = session.last_result
st.title(f"🏓 Matches ({session.describe_teams()})")

col1, col2 = st.columns([2, 1])

with col1:
    st.header(f"{len(result.matches)} Match(es)")
    for match in result.matches:
        with st.container(border=True):
            cols = st.columns([1, 3], vertical_alignment="center")
            with cols[0]:
                court_name = next(
                    (c.name for c in session.courts if c.id == match.court_id), "Unassigned"
                )
                st.markdown(f"#### {match.time or '--:--'}")
                st.caption(court_name)
            with cols[1]:
                st.markdown(f"**{match.title}** · {match.match_type.value} · {match.skill_level}")
                st.write(get_team_vs_display(match.participants, session.roster) or "")

with col2:
    st.header("Teams")
    for team_id, members in result.team_player_map.items():
        st.markdown(f"**Team {team_id}** ({len(members)})")
        st.caption(", ".join(p.display_name for p in members))

    with st.expander("Schedule table"):
        st.dataframe(
            matches_to_dataframe(result.matches, session.players, session.courts),
            use_container_width=True,
        )

with st.sidebar:
    st.header("Manage Matches")
    if st.button("🔄 Regenerate"):
        session.generate()
        st.rerun()

    if st.button("☁️ Save Matches"):
        success, message = try_save_generated_matches(result.matches)
        if success:
            st.success(message)
        else:
            st.error(message)

    if st.button("⬅️ Back to Setup"):
        del st.session_state["session"]
        st.switch_page("1_Setup.py")
