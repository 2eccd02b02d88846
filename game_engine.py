"""
game_engine.py
==============
Session controller for Detective Quest: The Mansion Case.

Contains:
  DetectiveQuestGame — the single orchestrating class that owns the Mansion
                       Map, the Clue Ledger and the Suspect Index, and
                       exposes a clean API consumed by both the CLI runner
                       (cli.py) and the Streamlit UI (app.py).

Public API summary:
    game = DetectiveQuestGame()
    game.current_room                 → Room
    game.visit_current_room()         → ClueReport | None
    game.navigate(command)            → MoveOutcome
    game.end_exploration()            → None
    game.dossier()                    → list[str]
    game.can_accuse()                 → bool
    game.accuse(name, on_match=None)  → Verdict
    game.close()                      → None
    game.reset()                      → None

A session moves through BUILDING → EXPLORING → JUDGING → DONE. Every
structure built while BUILDING is released exactly once by close(), after
exploring and judging are over.

Logging
-------
Every significant event is emitted through the standard ``logging`` module
so that the host application can route, filter and aggregate log output
without changing this file. The logger name for this module is
``detective_quest.game_engine``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

import mansion_map
from clue_ledger import ClueLedger
from config import GAME_CONFIG, GameConfig
from models import (
    ClueReport,
    Command,
    Direction,
    GameState,
    MoveOutcome,
    Room,
    SessionPhase,
    SessionStateError,
    Verdict,
)
from scoring import build_verdict
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.game_engine")

_DIRECTIONS = {
    Command.GO_LEFT:  Direction.LEFT,
    Command.GO_RIGHT: Direction.RIGHT,
}


class DetectiveQuestGame:
    """
    Main game engine.

    Attributes:
        config:        GameConfig in effect for this session.
        state:         Per-session counters and the latest verdict.
        phase:         Current SessionPhase.
        suspect_index: The session's Suspect Index (clue -> suspect).
        ledger:        The session's Clue Ledger.
        mansion:       Root of the Mansion Map (None once closed).
        current_room:  The room the player stands in (None once closed).
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GAME_CONFIG
        self.state  = GameState()
        self._build()

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def _build(self) -> None:
        """Create map, index and ledger, then start exploring at the Hall."""
        self.phase = SessionPhase.BUILDING

        self.suspect_index = SuspectIndex(self.config.hash_buckets)
        self.mansion: Optional[Room] = mansion_map.build_mansion(self.suspect_index)
        self.ledger = ClueLedger()
        self.current_room: Optional[Room] = self.mansion

        self.phase = SessionPhase.EXPLORING
        logger.info(
            "DetectiveQuestGame initialised — %d clues registered across %d buckets, "
            "min_clues=%d",
            len(self.suspect_index),
            self.config.hash_buckets,
            self.config.min_clues,
        )

    def _require(self, phase: SessionPhase, action: str) -> None:
        if self.phase is not phase:
            raise SessionStateError(
                f"{action} requires phase {phase.value!r}, session is {self.phase.value!r}"
            )

    # ------------------------------------------------------------------
    # Exploring
    # ------------------------------------------------------------------

    def visit_current_room(self) -> Optional[ClueReport]:
        """
        Search the current room.

        A clue found here is added to the ledger and resolved through the
        Suspect Index for immediate feedback. Rooms already searched yield
        nothing.

        Returns:
            A ClueReport when a clue was collected, otherwise None.
        """
        self._require(SessionPhase.EXPLORING, "visit_current_room()")
        room = self.current_room
        self.state.rooms_visited += 1

        clue = mansion_map.visit(room)
        if not clue:
            logger.debug("No new clue in %s", room.name)
            return None

        self.ledger.insert(clue)
        self.state.clues_collected += 1

        suspect = self.suspect_index.lookup(clue)
        if suspect is None:
            logger.warning("Clue %r from %s has no suspect in the index", clue, room.name)
        else:
            logger.info("Clue collected in %s: %r -> %s", room.name, clue, suspect)
        return ClueReport(room=room.name, clue=clue, suspect=suspect)

    def navigate(self, command: Command) -> MoveOutcome:
        """
        Apply a navigation command.

        Args:
            command: GO_LEFT / GO_RIGHT move to the matching child; STOP ends
                     the exploration; INVALID is counted and ignored.

        Returns:
            MOVED, DEAD_END (the player stays where they are), STOPPED or
            INVALID.
        """
        self._require(SessionPhase.EXPLORING, "navigate()")

        if command is Command.STOP:
            self.end_exploration()
            return MoveOutcome.STOPPED

        direction = _DIRECTIONS.get(command)
        if direction is None:
            self.state.invalid_commands += 1
            logger.warning("Invalid navigation command ignored: %r", command)
            return MoveOutcome.INVALID

        target = mansion_map.next_room(self.current_room, direction)
        if target is None:
            self.state.dead_ends += 1
            logger.warning(
                "Dead end: nothing to the %s of %s", direction.value, self.current_room.name
            )
            return MoveOutcome.DEAD_END

        logger.debug("Moved %s: %s -> %s", direction.value, self.current_room.name, target.name)
        self.current_room = target
        return MoveOutcome.MOVED

    def end_exploration(self) -> None:
        """Stop exploring and move on to judging (explicit stop or end of input)."""
        self._require(SessionPhase.EXPLORING, "end_exploration()")
        self.phase = SessionPhase.JUDGING
        logger.info(
            "Exploration finished — rooms visited=%d, distinct clues=%d",
            self.state.rooms_visited,
            len(self.ledger),
        )

    # ------------------------------------------------------------------
    # Judging
    # ------------------------------------------------------------------

    def dossier(self) -> List[str]:
        """Return the collected clues in alphabetical order."""
        return list(self.ledger)

    def can_accuse(self) -> bool:
        """An accusation needs at least one collected clue."""
        return bool(self.ledger)

    def accuse(
        self,
        accused: str,
        on_match: Optional[Callable[[str], None]] = None,
    ) -> Verdict:
        """
        Weigh the evidence against `accused`.

        Walks the ledger in order, resolving each clue through the Suspect
        Index and counting exact matches on the suspect name. The verdict is
        a success when the count reaches config.min_clues.

        Args:
            accused:  Free-text suspect name, compared exactly.
            on_match: Optional callback receiving each corroborating clue as
                      the walk finds it (alphabetical order).

        Returns:
            The Verdict, also stored as state.verdict.

        Raises:
            SessionStateError: if not judging, or if no clue was collected.
        """
        self._require(SessionPhase.JUDGING, "accuse()")
        if not self.can_accuse():
            raise SessionStateError("accuse() requires at least one collected clue")

        corroborating: List[str] = []

        def _record(clue: str) -> None:
            corroborating.append(clue)
            if on_match is not None:
                on_match(clue)

        tally   = self.ledger.tally_for_suspect(accused, self.suspect_index, _record)
        verdict = build_verdict(accused, corroborating, self.config.min_clues)
        self.state.verdict = verdict

        logger.info(
            "Accusation against %r — tally=%d, threshold=%d, success=%s",
            accused,
            tally,
            verdict.threshold,
            verdict.success,
        )
        return verdict

    # ------------------------------------------------------------------
    # Done
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Tear down map, ledger and index. Calling it again does nothing."""
        if self.phase is SessionPhase.DONE:
            return
        mansion_map.teardown(self.mansion)
        self.ledger.teardown()
        self.suspect_index.teardown()
        self.mansion      = None
        self.current_room = None
        self.phase        = SessionPhase.DONE
        logger.debug("Session closed; all structures released.")

    def reset(self) -> None:
        """Close the current session and start a fresh one at the Hall."""
        logger.info("Game reset requested.")
        self.close()
        self.state.reset()
        self._build()

    def __enter__(self) -> "DetectiveQuestGame":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
