"""
clue_ledger.py
==============
Binary search tree of the distinct clues the detective has collected.

The tree is keyed by clue text using Python's natural string ordering.
Inserting a clue that is already present leaves the tree untouched, so an
in-order walk yields every collected clue exactly once, alphabetically.

The functions in this module operate on an optional root node and follow
the classic recursive formulation; ClueLedger is a thin owner around a
root for callers that prefer an object.

The logger name for this module is ``detective_quest.clue_ledger``.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from models import ClueNode
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.clue_ledger")

MatchCallback = Callable[[str], None]


# ---------------------------------------------------------------------------
# Tree operations
# ---------------------------------------------------------------------------

def insert_clue(root: Optional[ClueNode], content: str) -> ClueNode:
    """
    Insert `content` into the subtree at `root` and return the subtree root.

    Duplicates are a silent no-op: the existing node is kept and no new node
    is created.
    """
    if root is None:
        return ClueNode(content)
    if content < root.content:
        root.left = insert_clue(root.left, content)
    elif content > root.content:
        root.right = insert_clue(root.right, content)
    return root


def in_order(root: Optional[ClueNode]) -> Iterator[str]:
    """Yield the clues of the subtree in ascending order."""
    if root is None:
        return
    yield from in_order(root.left)
    yield root.content
    yield from in_order(root.right)


def ledger_size(root: Optional[ClueNode]) -> int:
    if root is None:
        return 0
    return 1 + ledger_size(root.left) + ledger_size(root.right)


def tally_for_suspect(
    root: Optional[ClueNode],
    accused: str,
    index: SuspectIndex,
    on_match: Optional[MatchCallback] = None,
) -> int:
    """
    Count the clues in the subtree that the index attributes to `accused`.

    The walk is in-order so corroborating clues are reported alphabetically.
    Each match is logged and handed to `on_match` (if given) as it is found.
    Clues with no index entry count as no evidence.

    Args:
        root:     Root of the (sub)tree to examine.
        accused:  Suspect name; compared exactly against the index values.
        index:    The Suspect Index used to resolve each clue.
        on_match: Optional callback receiving each corroborating clue.

    Returns:
        Number of corroborating clues.
    """
    if root is None:
        return 0

    count = tally_for_suspect(root.left, accused, index, on_match)

    if index.lookup(root.content) == accused:
        count += 1
        logger.info("Clue %r points to %s", root.content, accused)
        if on_match is not None:
            on_match(root.content)

    count += tally_for_suspect(root.right, accused, index, on_match)
    return count


def teardown(root: Optional[ClueNode]) -> None:
    """Release the subtree post-order: both children before their parent."""
    if root is None:
        return
    teardown(root.left)
    teardown(root.right)
    root.left = None
    root.right = None


# ---------------------------------------------------------------------------
# Owner object
# ---------------------------------------------------------------------------

class ClueLedger:
    """
    Owns the root of a clue BST.

    Attributes:
        root: Root node, or None while no clue has been collected.
    """

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None

    def insert(self, content: str) -> bool:
        """Add `content`; return False if it was already in the ledger."""
        if content in self:
            logger.debug("Clue %r already in ledger; ignoring", content)
            return False
        self.root = insert_clue(self.root, content)
        logger.debug("Clue %r added to ledger", content)
        return True

    def tally_for_suspect(
        self,
        accused: str,
        index: SuspectIndex,
        on_match: Optional[MatchCallback] = None,
    ) -> int:
        return tally_for_suspect(self.root, accused, index, on_match)

    def teardown(self) -> None:
        teardown(self.root)
        self.root = None

    def __contains__(self, content: object) -> bool:
        if not isinstance(content, str):
            return False
        node = self.root
        while node is not None:
            if content == node.content:
                return True
            node = node.left if content < node.content else node.right
        return False

    def __iter__(self) -> Iterator[str]:
        return in_order(self.root)

    def __len__(self) -> int:
        return ledger_size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None
