"""
Data types for bestiary status, view projections and species data.

Species dataclasses are populated by loader.py from YAML catalogs. Entry
projections are built on demand by Bestiary.view_species() and never stored.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable
from enum import Enum

from .core import Id, Name


# ============================================================================
# Status
# ============================================================================

class Status(Enum):
    """Discovery state of a species"""
    NONE = "none"
    SEEN = "seen"
    OWNED = "owned"


# ============================================================================
# Species Capabilities
# ============================================================================

@runtime_checkable
class BestiarySpeciesData(Protocol):
    """Descriptive data a species reveals once it is owned"""

    def category(self) -> str:
        ...

    def description(self) -> str:
        ...

    def weight_in_hectograms(self) -> int:
        ...

    def height_in_decimeters(self) -> int:
        ...

    def color(self) -> Name:
        ...

    def shape(self) -> Name:
        ...

    def habitat(self) -> Name:
        ...


@runtime_checkable
class BestiarySpecies(BestiarySpeciesData, Id, Name, Protocol):
    """Anything the bestiary can track: identified, named, with species data"""


# ============================================================================
# Entry Projections
# ============================================================================

@dataclass(frozen=True)
class SeenEntry:
    """What the player knows about a seen species"""
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name}


@dataclass(frozen=True)
class OwnedEntry:
    """What the player knows about an owned species"""
    category: str
    description: str
    weight_in_hectograms: int
    height_in_decimeters: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'description': self.description,
            'weight_in_hectograms': self.weight_in_hectograms,
            'height_in_decimeters': self.height_in_decimeters,
        }


@dataclass(frozen=True)
class Entry:
    """
    Status-gated view of a species.

    Attributes:
        status: Current discovery status
        seen_entry: Present when status is SEEN or OWNED
        owned_entry: Present only when status is OWNED
    """
    status: Status
    seen_entry: Optional[SeenEntry] = None
    owned_entry: Optional[OwnedEntry] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to dict with only present projections.

        Returns:
            Dict with 'status' and, when present, 'seen' and 'owned'
        """
        result: Dict[str, Any] = {'status': self.status.value}

        if self.seen_entry is not None:
            result['seen'] = self.seen_entry.to_dict()

        if self.owned_entry is not None:
            result['owned'] = self.owned_entry.to_dict()

        return result


# ============================================================================
# Species Definition
# ============================================================================

@dataclass(frozen=True)
class Color:
    """Named color attribute"""
    color_id: int
    color_name: str

    def id(self) -> int:
        return self.color_id

    def name(self) -> str:
        return self.color_name


@dataclass(frozen=True)
class Shape:
    """Named body shape attribute"""
    shape_id: int
    shape_name: str

    def id(self) -> int:
        return self.shape_id

    def name(self) -> str:
        return self.shape_name


@dataclass(frozen=True)
class Habitat:
    """Named habitat attribute"""
    habitat_id: int
    habitat_name: str

    def id(self) -> int:
        return self.habitat_id

    def name(self) -> str:
        return self.habitat_name


@dataclass(frozen=True)
class Species:
    """
    Complete species definition.

    Fields are exposed through the capability methods (id(), name(),
    category(), ...) so a Species satisfies BestiarySpecies.
    """
    species_id: int
    species_name: str
    category_name: str
    description_text: str
    weight: int  # hectograms
    height: int  # decimeters
    color_ref: Color
    shape_ref: Shape
    habitat_ref: Habitat

    def id(self) -> int:
        return self.species_id

    def name(self) -> str:
        return self.species_name

    def category(self) -> str:
        return self.category_name

    def description(self) -> str:
        return self.description_text

    def weight_in_hectograms(self) -> int:
        return self.weight

    def height_in_decimeters(self) -> int:
        return self.height

    def color(self) -> Color:
        return self.color_ref

    def shape(self) -> Shape:
        return self.shape_ref

    def habitat(self) -> Habitat:
        return self.habitat_ref
