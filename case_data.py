"""
case_data.py
============
All narrative content for the mansion case.

The room layout, the clue found in each room and the suspect each clue
implicates are compiled-in constants. mansion_map.build_mansion() turns
MANSION_LAYOUT into the room tree and registers every clue in the Suspect
Index as it goes.

The clue texts are part of the game's fixed dataset: they are compared
byte-for-byte by the Suspect Index and sorted for the dossier, so they must
not be edited casually.
"""

from __future__ import annotations

from typing import Dict, List


# ---------------------------------------------------------------------------
# Suspects
# ---------------------------------------------------------------------------

SUSPECT_ROSTER: List[str] = [
    "Senhora",
    "Empregado",
    "Chef",
    "Mordomo",
]
"""
Suspects listed to the player before the accusation.
Accusations are free text; this list is informational only.
"""


# ---------------------------------------------------------------------------
# Mansion layout
# ---------------------------------------------------------------------------

MANSION_LAYOUT: Dict = {
    "name":    "Hall",
    "clue":    "Encontrado um ticket de onibus na lareira.",
    "suspect": "Empregado",

    "left": {
        "name":    "Living Room",
        "clue":    "A maça mordida tinha batom vermelho.",
        "suspect": "Senhora",

        "left": {
            "name":    "Library",
            "clue":    "Uma pagina de diario com data rasgada.",
            "suspect": "Senhora",

            "left": {
                "name":    "Office",
                "clue":    "Uma luva de seda preta no chao.",
                "suspect": "Mordomo",
            },
        },
        # The garden holds no clue.
        "right": {
            "name": "Garden",
        },
    },

    "right": {
        "name":    "Kitchen",
        "clue":    "A faca sumiu, mas o chef nao se lembra.",
        "suspect": "Chef",

        "left": {
            "name":    "Pantry",
            "clue":    "O cofre estava aberto e vazio.",
            "suspect": "Empregado",
        },
        "right": {
            "name":    "Dining Room",
            "clue":    "Havia um forte cheiro de cigarro barato.",
            "suspect": "Mordomo",
        },
    },
}
"""
Nested description of the room tree, rooted at the Hall.

Each level has a "name", an optional "clue" with its "suspect", and optional
"left" / "right" children. Every clue MUST come with a suspect.
"""
