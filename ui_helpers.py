"""
ui_helpers.py
=============
Stateless presentation helpers shared by the CLI and the Streamlit app.

These functions turn the engine's results into text but carry no game state
of their own; they receive everything they need as arguments. Keeping them
separate from cli.py and app.py means the wording can be tested in
isolation.

Contains:
  - banner()                : framed title block
  - format_clue_report()    : lines announcing a collected clue
  - format_exits()          : navigation menu for the current room
  - format_move_outcome()   : dead-end / invalid-command notices
  - format_dossier()        : alphabetical list of collected clues
  - format_roster()         : suspects the player may accuse
  - format_corroboration()  : one line per clue pointing to the accused
  - format_verdict()        : final verdict block
  - build_css()             : dark-noir CSS for the Streamlit app
"""

from __future__ import annotations

from typing import Dict, List, Optional

from models import ClueReport, Direction, MoveOutcome, Verdict

RULE = "=" * 55
THIN_RULE = "-" * 55

KEY_FOR_DIRECTION: Dict[Direction, str] = {
    Direction.LEFT:  "e",
    Direction.RIGHT: "d",
}
"""Keys the player types to move in each direction."""

STOP_KEY = "s"


# ---------------------------------------------------------------------------
# Exploration
# ---------------------------------------------------------------------------

def banner(title: str) -> List[str]:
    return [RULE, title.center(len(RULE)).rstrip(), RULE]


def format_room_header(room_name: str) -> str:
    return f"YOU ARE IN: {room_name}"


def format_clue_report(report: Optional[ClueReport]) -> List[str]:
    """
    Describe the result of searching a room.

    Args:
        report: The engine's ClueReport, or None when nothing was found.

    Returns:
        Lines to print, in order.
    """
    if report is None:
        return ["No new clues here."]

    lines = ["CLUE FOUND! Collecting...", f'   > Content: "{report.clue}"']
    if report.suspect is None:
        lines.append("   > No suspect is linked to this clue.")
    else:
        lines.append(f"   > This clue points to: {report.suspect}.")
    return lines


def format_exits(exits: Dict[Direction, str]) -> List[str]:
    """Build the navigation menu; the stop option is always offered."""
    lines = ["Where do you want to go?"]
    for direction, room_name in exits.items():
        key = KEY_FOR_DIRECTION[direction]
        lines.append(f" [{key}] {direction.value.title()} (to {room_name})")
    lines.append(f" [{STOP_KEY}] Stop exploring and start the trial")
    return lines


def format_move_outcome(outcome: MoveOutcome, direction: Optional[Direction] = None) -> Optional[str]:
    """Return the notice for a move that went nowhere, or None."""
    if outcome is MoveOutcome.DEAD_END:
        side = direction.value if direction is not None else "that"
        return f"The {side} path is a dead end. You stay where you are."
    if outcome is MoveOutcome.INVALID:
        return "Invalid option. Try again."
    if outcome is MoveOutcome.STOPPED:
        return "Ending the exploration."
    return None


# ---------------------------------------------------------------------------
# Judging
# ---------------------------------------------------------------------------

def format_dossier(clues: List[str]) -> List[str]:
    """List collected clues, already in alphabetical order."""
    lines = ["DOSSIER: COLLECTED CLUES (alphabetical)"]
    if not clues:
        lines.append("    No clues were collected.")
    else:
        lines.extend(f'    -> "{clue}"' for clue in clues)
    return lines


def format_roster(roster: List[str]) -> List[str]:
    return ["Possible suspects (check your clues):"] + [f"   - {name}" for name in roster]


def format_corroboration(clue: str, accused: str) -> str:
    return f'      [+] Clue: "{clue}" points to {accused}.'


def format_verdict(verdict: Verdict) -> List[str]:
    """Describe the verdict: tally, threshold and outcome."""
    lines = [
        "TRIAL RESULT:",
        f"   Clues found against {verdict.accused}: {verdict.tally}",
        f"   Minimum required: {verdict.threshold} clues.",
        "",
    ]
    if verdict.success:
        lines.append("SUCCESS! ENOUGH EVIDENCE!")
        lines.append(f"   {verdict.accused} is the culprit. Your dossier is flawless.")
    else:
        lines.append("FAILURE! NOT ENOUGH EVIDENCE!")
        lines.append(
            f"   You need at least {verdict.threshold} clues to accuse "
            f"{verdict.accused}. Go back and search for more!"
        )
    return lines


NO_ACCUSATION_MESSAGE = "You cannot make an accusation without collecting any clue!"
READ_ERROR_MESSAGE    = "Read error: no suspect name was given."


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the dark-noir CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .room-card {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 20px; border-radius: 5px;
        border-left: 4px solid #8B0000;
        font-family: 'Courier Prime', monospace;
    }
    .dossier {
        background: linear-gradient(145deg, #2a2a1a, #1a1a0a);
        padding: 15px; border-radius: 5px; border: 1px solid #4a4a2a;
        font-family: 'Courier Prime', monospace;
    }
    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; }
"""
