"""
app.py
======
Streamlit web UI for Detective Quest: The Mansion Case.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Keep one DetectiveQuestGame per browser session in st.session_state.
  - Render the exploration panel (current room, clue feed, navigation).
  - Render the trial panel (dossier, accusation form, verdict).

This file contains only UI logic. All game logic lives in game_engine.py,
all narrative data in case_data.py, and all wording in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before any game code runs so DETECTIVE_QUEST_LOG_LEVEL applies.
load_dotenv()

from config import configure_logging

configure_logging()
logger = logging.getLogger("detective_quest.app")

import mansion_map
from case_data import SUSPECT_ROSTER
from game_engine import DetectiveQuestGame
from models import Command, Direction, MoveOutcome, SessionPhase
from ui_helpers import (
    NO_ACCUSATION_MESSAGE,
    build_css,
    format_clue_report,
    format_corroboration,
    format_dossier,
    format_move_outcome,
    format_verdict,
)


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _start_session() -> None:
    """Build a fresh game and search the Hall straight away."""
    game = DetectiveQuestGame()
    st.session_state.game          = game
    st.session_state.events        = format_clue_report(game.visit_current_room())
    st.session_state.corroboration = []


def init_session_state() -> None:
    """Initialise the session on first run only."""
    if "game" not in st.session_state:
        _start_session()


def reset_game() -> None:
    """Release the current session's structures and start a new case."""
    st.session_state.game.close()
    _start_session()
    logger.info("New case started from the web UI.")


# ============================================================
# EXPLORATION
# ============================================================

def _move(command: Command) -> None:
    game    = st.session_state.game
    outcome = game.navigate(command)

    direction = {Command.GO_LEFT: Direction.LEFT, Command.GO_RIGHT: Direction.RIGHT}.get(command)
    notice    = format_move_outcome(outcome, direction)
    events    = [notice] if notice else []

    if outcome != MoveOutcome.STOPPED:
        events.extend(format_clue_report(game.visit_current_room()))
    st.session_state.events = events


def render_exploration() -> None:
    game = st.session_state.game
    room = game.current_room

    st.markdown(
        f"<div class='room-card'><h3>🚪 {room.name}</h3></div>",
        unsafe_allow_html=True,
    )
    for line in st.session_state.events:
        st.markdown(line)

    exits = mansion_map.exits(room)
    col1, col2, col3 = st.columns(3)
    with col1:
        label = f"⬅️ Left ({exits[Direction.LEFT]})" if Direction.LEFT in exits else "⬅️ Left"
        if st.button(label, key="go_left", use_container_width=True):
            _move(Command.GO_LEFT)
            st.rerun()
    with col2:
        label = f"➡️ Right ({exits[Direction.RIGHT]})" if Direction.RIGHT in exits else "➡️ Right"
        if st.button(label, key="go_right", use_container_width=True):
            _move(Command.GO_RIGHT)
            st.rerun()
    with col3:
        if st.button("⚖️ Stop and accuse", key="stop", type="primary", use_container_width=True):
            _move(Command.STOP)
            st.rerun()


# ============================================================
# TRIAL
# ============================================================

def render_trial() -> None:
    game = st.session_state.game

    st.markdown(
        "<div class='dossier'>" + "<br>".join(format_dossier(game.dossier())) + "</div>",
        unsafe_allow_html=True,
    )

    if not game.can_accuse():
        st.warning(NO_ACCUSATION_MESSAGE)
        return

    st.markdown("**Possible suspects:** " + ", ".join(SUSPECT_ROSTER))
    accused = st.text_input("Name of the accused", key="accused")
    if st.button("🔨 I ACCUSE…", key="accuse", type="primary"):
        lines: list = []
        game.accuse(accused, on_match=lambda clue: lines.append(format_corroboration(clue, accused)))
        st.session_state.corroboration = lines

    verdict = game.state.verdict
    if verdict is None:
        return

    for line in st.session_state.corroboration:
        st.markdown(line)
    text = "\n\n".join(line for line in format_verdict(verdict) if line)
    if verdict.success:
        st.success(text)
    else:
        st.error(text)


# ============================================================
# MAIN
# ============================================================

def render_sidebar() -> None:
    state = st.session_state.game.state
    st.sidebar.markdown("### 📊 INVESTIGATION")
    st.sidebar.markdown(f"**Rooms visited:** {state.rooms_visited}")
    st.sidebar.markdown(f"**Clues collected:** {state.clues_collected}")
    st.sidebar.markdown(f"**Dead ends:** {state.dead_ends}")
    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW CASE", key="new_case", use_container_width=True):
        reset_game()
        st.rerun()


def main() -> None:
    init_session_state()

    st.markdown("<h1 class='main-header'>🔍 DETECTIVE QUEST</h1>", unsafe_allow_html=True)
    render_sidebar()

    phase = st.session_state.game.phase
    if phase == SessionPhase.EXPLORING:
        render_exploration()
    elif phase == SessionPhase.JUDGING:
        render_trial()


if __name__ == "__main__":
    main()
