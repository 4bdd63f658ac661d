"""
Monster Maker Bestiary

An in-memory tracker for a collection game's bestiary. Each species is
either unknown to the player, seen, or owned, and the bestiary reveals more
of a species' data as its status advances.

Architecture: Bestiary owns the status map. Species data is read-only input.
"""

from .core import Id, Name
from .data_types import (
    Status, SeenEntry, OwnedEntry, Entry, BestiarySpeciesData, BestiarySpecies,
    Species, Color, Shape, Habitat,
)
from .loader import DataLoadError
from .registry import Bestiary

__version__ = "0.1.0"

__all__ = [
    "Bestiary",
    "BestiarySpecies",
    "BestiarySpeciesData",
    "Color",
    "DataLoadError",
    "Entry",
    "Habitat",
    "Id",
    "Name",
    "OwnedEntry",
    "SeenEntry",
    "Shape",
    "Species",
    "Status",
]
