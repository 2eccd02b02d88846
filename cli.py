"""
cli.py
======
Command-line interface for Detective Quest: The Mansion Case.

Provides the text-based game loop. All game logic is delegated to
DetectiveQuestGame; this module only handles I/O.

Usage:
    python cli.py            (or the installed `detective-quest` script)

Commands while exploring:
    e / E   — go to the room on the left
    d / D   — go to the room on the right
    s / S   — stop exploring and start the trial

End of input while exploring behaves like `s`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from dotenv import load_dotenv

import mansion_map
from case_data import SUSPECT_ROSTER
from config import configure_logging
from game_engine import DetectiveQuestGame
from models import Command, Direction, SessionPhase, Verdict
from ui_helpers import (
    NO_ACCUSATION_MESSAGE,
    READ_ERROR_MESSAGE,
    THIN_RULE,
    banner,
    format_clue_report,
    format_corroboration,
    format_dossier,
    format_exits,
    format_move_outcome,
    format_room_header,
    format_roster,
    format_verdict,
)

logger = logging.getLogger("detective_quest.cli")

InputFn  = Callable[[str], str]
OutputFn = Callable[[str], None]

_COMMANDS = {
    "e": Command.GO_LEFT,  "E": Command.GO_LEFT,
    "d": Command.GO_RIGHT, "D": Command.GO_RIGHT,
    "s": Command.STOP,     "S": Command.STOP,
}

_COMMAND_DIRECTIONS = {
    Command.GO_LEFT:  Direction.LEFT,
    Command.GO_RIGHT: Direction.RIGHT,
}


def parse_command(text: str) -> Command:
    """Map one line of player input to a navigation Command."""
    return _COMMANDS.get(text.rstrip("\r\n"), Command.INVALID)


def _explore(game: DetectiveQuestGame, input_fn: InputFn, output: OutputFn) -> None:
    output("")
    for line in banner("EXPLORING THE MANSION"):
        output(line)
    output("Instructions: 'e'=Left, 'd'=Right, 's'=Stop and accuse.")

    while game.phase is SessionPhase.EXPLORING:
        output(THIN_RULE)
        output(format_room_header(game.current_room.name))
        output("")
        for line in format_clue_report(game.visit_current_room()):
            output(line)

        output("")
        for line in format_exits(mansion_map.exits(game.current_room)):
            output(line)

        try:
            raw = input_fn("\nENTER YOUR CHOICE (e/d/s): ")
        except EOFError:
            logger.info("End of input while exploring; moving to the trial.")
            game.end_exploration()
            break

        command = parse_command(raw)
        outcome = game.navigate(command)
        notice  = format_move_outcome(outcome, _COMMAND_DIRECTIONS.get(command))
        if notice:
            output("")
            output(notice)


def _judge(game: DetectiveQuestGame, input_fn: InputFn, output: OutputFn) -> Optional[Verdict]:
    output("")
    for line in format_dossier(game.dossier()):
        output(line)
    output("")

    if not game.can_accuse():
        output(NO_ACCUSATION_MESSAGE)
        return None

    for line in banner("TRIAL: WHO IS THE CULPRIT?"):
        output(line)
    output("")
    for line in format_roster(SUSPECT_ROSTER):
        output(line)

    try:
        accused = input_fn("\nENTER THE NAME OF THE ACCUSED: ").rstrip("\r\n")
    except EOFError:
        logger.warning("End of input while reading the accused suspect.")
        output(READ_ERROR_MESSAGE)
        return None

    output("")
    output(f"--- CHECKING EVIDENCE AGAINST {accused} ---")
    verdict = game.accuse(
        accused, on_match=lambda clue: output(format_corroboration(clue, accused))
    )

    output(THIN_RULE)
    for line in format_verdict(verdict):
        output(line)
    return verdict


def run_cli(input_fn: InputFn = input, output: OutputFn = print) -> Optional[Verdict]:
    """
    Play one full session: explore, list the dossier, judge, tear down.

    Args:
        input_fn: Prompt-and-read function; must raise EOFError at end of input.
        output:   Line writer.

    Returns:
        The Verdict, or None when no accusation was made.
    """
    with DetectiveQuestGame() as game:
        for line in banner("WELCOME TO DETECTIVE QUEST"):
            output(line)
        _explore(game, input_fn, output)
        return _judge(game, input_fn, output)


def main() -> None:
    # Load .env so DETECTIVE_QUEST_LOG_LEVEL can be set per checkout, then
    # configure logging at the entry point only.
    load_dotenv()
    configure_logging()
    run_cli()


if __name__ == "__main__":
    main()
