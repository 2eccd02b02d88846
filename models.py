"""
models.py
=========
Shared data models for Detective Quest: The Mansion Case.

Contains:
  - Room             : node of the Mansion Map (static binary tree).
  - ClueNode         : node of the Clue Ledger (binary search tree).
  - IndexEntry       : chain element of the Suspect Index (hash table).
  - SessionPhase, Direction, Command, MoveOutcome : enums shared by the
                       controller and the front-ends.
  - ClueReport, Verdict : Pydantic schemas for what the core reports back.
  - GameState        : mutable per-session counters.
  - SessionStateError: raised when the controller is driven out of order.

Keeping these in one module guarantees a single source of truth for data
shapes used across the engine, the CLI and the Streamlit UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Tree and chain nodes
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Room:
    """
    A room of the mansion.

    Each room exclusively owns its children; there are no back-pointers, so
    the map is a strict tree rooted at the Hall.

    Attributes:
        name:               Unique display name, never changed after creation.
        clue:               Clue text waiting to be found, or "" once collected.
        implicated_suspect: Suspect the clue points to ("" for rooms without a
                            clue). Only used to populate the Suspect Index.
        left, right:        Child rooms, or None.
    """

    name:               str
    clue:               str = ""
    implicated_suspect: str = ""
    left:               Optional["Room"] = None
    right:              Optional["Room"] = None


@dataclass(eq=False)
class ClueNode:
    """A collected clue, keyed and ordered by its text."""

    content: str
    left:    Optional["ClueNode"] = None
    right:   Optional["ClueNode"] = None


@dataclass(eq=False)
class IndexEntry:
    """One clue -> suspect association in a Suspect Index bucket chain."""

    clue_text:    str
    suspect_name: str
    next:         Optional["IndexEntry"] = None


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class SessionPhase(str, Enum):
    BUILDING  = "building"
    EXPLORING = "exploring"
    JUDGING   = "judging"
    DONE      = "done"


class Direction(str, Enum):
    LEFT  = "left"
    RIGHT = "right"


class Command(str, Enum):
    """Navigation commands accepted while exploring."""

    GO_LEFT  = "go-left"
    GO_RIGHT = "go-right"
    STOP     = "stop-and-accuse"
    INVALID  = "invalid"


class MoveOutcome(str, Enum):
    """What happened after a navigation command was applied."""

    MOVED    = "moved"
    DEAD_END = "dead-end"
    STOPPED  = "stopped"
    INVALID  = "invalid"


# ---------------------------------------------------------------------------
# Pydantic report schemas
# ---------------------------------------------------------------------------

class ClueReport(BaseModel):
    """
    Result of collecting a clue in a room.

    Fields:
        room:    Name of the room the clue was found in.
        clue:    The clue text, exactly as stored in the room.
        suspect: The suspect the Suspect Index associates with the clue, or
                 None when the clue is not registered (a lookup miss).
    """

    room:    str
    clue:    str
    suspect: Optional[str] = None


class Verdict(BaseModel):
    """
    Outcome of an accusation.

    Fields:
        accused:             The name the player typed, verbatim.
        tally:               Number of ledger clues resolving to `accused`.
        threshold:           Minimum tally required for success.
        corroborating_clues: The matching clues in alphabetical order.
        success:             True when tally >= threshold.
    """

    accused:             str
    tally:               int
    threshold:           int
    corroborating_clues: List[str] = []
    success:             bool


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable single-session counters, owned by DetectiveQuestGame.

    Front-ends read it (read-only) for status displays.

    Attributes:
        rooms_visited:    Room visits, re-visits included.
        clues_collected:  Clues picked up from rooms (each room yields at most one).
        dead_ends:        Moves attempted towards a missing child.
        invalid_commands: Unrecognised navigation inputs.
        verdict:          The most recent accusation outcome, if any.
    """

    rooms_visited:    int = 0
    clues_collected:  int = 0
    dead_ends:        int = 0
    invalid_commands: int = 0
    verdict:          Optional[Verdict] = None

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.rooms_visited    = 0
        self.clues_collected  = 0
        self.dead_ends        = 0
        self.invalid_commands = 0
        self.verdict          = None


class SessionStateError(RuntimeError):
    """Raised when a session operation is called in the wrong phase."""
