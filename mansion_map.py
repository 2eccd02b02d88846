"""
mansion_map.py
==============
The mansion's room layout: a fixed binary tree built once per session.

Building the map and populating the Suspect Index are a single step: every
room created with a clue registers its (clue, suspect) pair at the same
time, so no clue can exist in the map without an index entry.

Navigation state (which room the player is in) belongs to the session
controller; this module only answers "what is to the left/right of here".

The logger name for this module is ``detective_quest.mansion_map``.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional

from case_data import MANSION_LAYOUT
from models import Direction, Room
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.mansion_map")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def create_room(
    index: SuspectIndex,
    name: str,
    clue: str = "",
    suspect: str = "",
) -> Room:
    """
    Create a room and register its clue in `index`.

    Raises:
        ValueError: if a clue is given without the suspect it implicates.
    """
    if clue and not suspect:
        raise ValueError(f"Room {name!r} has a clue but no implicated suspect")

    room = Room(name=name, clue=clue, implicated_suspect=suspect)
    if clue:
        index.insert(clue, suspect)
    return room


def _build_subtree(index: SuspectIndex, layout: Mapping) -> Room:
    room = create_room(
        index,
        layout["name"],
        layout.get("clue", ""),
        layout.get("suspect", ""),
    )
    if "left" in layout:
        room.left = _build_subtree(index, layout["left"])
    if "right" in layout:
        room.right = _build_subtree(index, layout["right"])
    return room


def build_mansion(index: SuspectIndex) -> Room:
    """
    Build the fixed mansion map and register all of its clues in `index`.

    Returns:
        The root room (the Hall).
    """
    root = _build_subtree(index, MANSION_LAYOUT)
    logger.debug(
        "Mansion built: root=%s, index entries=%d", root.name, len(index)
    )
    return root


# ---------------------------------------------------------------------------
# Room operations
# ---------------------------------------------------------------------------

def visit(room: Room) -> str:
    """
    Collect the room's clue.

    Returns the clue text and clears it from the room, so each room yields
    its clue at most once. Returns "" when there is nothing (left) to find.
    """
    clue = room.clue
    if clue:
        room.clue = ""
        logger.debug("Clue collected in %s", room.name)
    return clue


def next_room(room: Room, direction: Direction) -> Optional[Room]:
    """Return the child of `room` in `direction`, or None at a dead end."""
    if direction is Direction.LEFT:
        return room.left
    return room.right


def exits(room: Room) -> Dict[Direction, str]:
    """Map each available direction to the name of the room it leads to."""
    available: Dict[Direction, str] = {}
    for direction in Direction:
        child = next_room(room, direction)
        if child is not None:
            available[direction] = child.name
    return available


def walk(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the subtree in pre-order."""
    if root is None:
        return
    yield root
    yield from walk(root.left)
    yield from walk(root.right)


def teardown(root: Optional[Room]) -> None:
    """Release the subtree post-order: both children before their parent."""
    if root is None:
        return
    teardown(root.left)
    teardown(root.right)
    root.left = None
    root.right = None
