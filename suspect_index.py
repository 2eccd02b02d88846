"""
suspect_index.py
================
Hash table mapping clue text to the suspect it implicates.

The table has a fixed number of buckets; collisions are resolved by
separate chaining. New entries are prepended to their bucket's chain and are
never updated or removed before teardown, so re-registering a clue shadows
the earlier association without deleting it.

The logger name for this module is ``detective_quest.suspect_index``.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from config import GAME_CONFIG
from models import IndexEntry

logger = logging.getLogger("detective_quest.suspect_index")


class SuspectIndex:
    """
    Fixed-size chained hash table: clue text -> suspect name.

    Attributes:
        bucket_count: Number of buckets (N). Fixed for the table's lifetime.
    """

    def __init__(self, bucket_count: int = GAME_CONFIG.hash_buckets) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self._buckets: List[Optional[IndexEntry]] = [None] * bucket_count

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def hash(self, text: str) -> int:
        """
        Sum the character codes of `text` and reduce modulo the bucket count.

        Defined for every string; the empty string lands in bucket 0.
        """
        return sum(ord(ch) for ch in text) % self.bucket_count

    def insert(self, clue_text: str, suspect_name: str) -> None:
        """
        Register `clue_text` as evidence against `suspect_name`.

        The new entry becomes the head of its bucket's chain. No uniqueness
        check is made: an existing entry for the same clue stays in the chain
        but is shadowed on lookup.
        """
        bucket = self.hash(clue_text)
        self._buckets[bucket] = IndexEntry(
            clue_text, suspect_name, next=self._buckets[bucket]
        )
        logger.debug(
            "Registered clue=%r -> suspect=%r in bucket %d", clue_text, suspect_name, bucket
        )

    def lookup(self, clue_text: str) -> Optional[str]:
        """
        Return the suspect registered for `clue_text`, or None if not found.

        The bucket chain is walked from its head and the first entry whose key
        equals `clue_text` exactly (case-sensitive) wins.
        """
        entry = self._buckets[self.hash(clue_text)]
        while entry is not None:
            if entry.clue_text == clue_text:
                return entry.suspect_name
            entry = entry.next
        return None

    def teardown(self) -> None:
        """Release every chain entry in every bucket."""
        released = 0
        for bucket in range(self.bucket_count):
            entry = self._buckets[bucket]
            while entry is not None:
                following  = entry.next
                entry.next = None
                entry      = following
                released  += 1
            self._buckets[bucket] = None
        logger.debug("Suspect index torn down: %d entries released", released)

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------

    def _entries(self) -> Iterator[IndexEntry]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    def chain(self, bucket: int) -> List[str]:
        """Return the clue keys stored in `bucket`, head of the chain first."""
        keys: List[str] = []
        entry = self._buckets[bucket]
        while entry is not None:
            keys.append(entry.clue_text)
            entry = entry.next
        return keys

    def suspects(self) -> List[str]:
        """Distinct suspect names, in bucket-then-chain order."""
        seen: List[str] = []
        for entry in self._entries():
            if entry.suspect_name not in seen:
                seen.append(entry.suspect_name)
        return seen

    def __len__(self) -> int:
        return sum(1 for _ in self._entries())

    def __contains__(self, clue_text: object) -> bool:
        return isinstance(clue_text, str) and self.lookup(clue_text) is not None
