"""
Bestiary registry.

Tracks the discovery status of every species in a fixed species list and
renders status-appropriate views of species data.

Status per species only moves forward: NONE -> SEEN -> OWNED.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .data_types import BestiarySpecies, Entry, OwnedEntry, SeenEntry, Status

logger = logging.getLogger(__name__)


class Bestiary:
    """
    Registry mapping species id to discovery status.

    Both maps are built together at construction and share the same key set
    afterward. Species objects are referenced, never copied or mutated.
    Not thread-safe: callers sharing an instance must lock the whole thing.
    """

    def __init__(self, species_list: Iterable[BestiarySpecies]):
        """
        Build the registry with every species at Status.NONE.

        Args:
            species_list: Species to track. Later duplicates of an id
                replace earlier ones.
        """
        self.species: Dict[int, BestiarySpecies] = {}
        self.species_statuses: Dict[int, Status] = {}

        for species in species_list:
            species_id = species.id()
            if species_id in self.species:
                logger.debug("Duplicate species id %d, replacing %r with %r",
                             species_id, self.species[species_id].name(), species.name())
            self.species[species_id] = species
            self.species_statuses[species_id] = Status.NONE

        logger.debug("Bestiary initialized with %d species", len(self.species))

    @classmethod
    def from_catalog(cls, catalog_path: Path, schema_dir: Optional[Path] = None) -> 'Bestiary':
        """
        Build a bestiary from a YAML species catalog.

        Raises:
            DataLoadError: If the catalog cannot be loaded or validated
        """
        from .loader import load_species_catalog

        return cls(load_species_catalog(catalog_path, schema_dir))

    def view_species(self, species_id: int) -> Optional[Entry]:
        """
        Get what the player currently knows about a species.

        Args:
            species_id: Species id to look up

        Returns:
            Entry gated by status, or None if the species is unknown
        """
        species = self.species.get(species_id)
        if species is None:
            return None

        status = self.species_statuses.get(species_id, Status.NONE)

        if status is Status.NONE:
            return Entry(status=status)

        seen_entry = SeenEntry(name=species.name())

        if status is Status.SEEN:
            return Entry(status=status, seen_entry=seen_entry)

        owned_entry = OwnedEntry(
            category=species.category(),
            description=species.description(),
            weight_in_hectograms=species.weight_in_hectograms(),
            height_in_decimeters=species.height_in_decimeters(),
        )
        return Entry(status=status, seen_entry=seen_entry, owned_entry=owned_entry)

    def see(self, species: BestiarySpecies):
        """
        Record that the player has seen a species.

        Only advances NONE -> SEEN. Species not in the registry are ignored.
        """
        species_id = species.id()
        status = self.species_statuses.get(species_id)

        if status is None:
            logger.debug("Ignoring see() for unregistered species id %d", species_id)
            return

        if status is Status.NONE:
            self.species_statuses[species_id] = Status.SEEN
            logger.debug("Species %d: none -> seen", species_id)

    def own(self, species: BestiarySpecies):
        """
        Record that the player has captured a species.

        Advances NONE or SEEN to OWNED. Species not in the registry are ignored.
        """
        species_id = species.id()
        status = self.species_statuses.get(species_id)

        if status is None:
            logger.debug("Ignoring own() for unregistered species id %d", species_id)
            return

        if status is not Status.OWNED:
            self.species_statuses[species_id] = Status.OWNED
            logger.debug("Species %d: %s -> owned", species_id, status.value)

    def status_of(self, species_id: int) -> Optional[Status]:
        """Current status, or None if the species is unknown"""
        if species_id not in self.species:
            return None
        return self.species_statuses.get(species_id, Status.NONE)

    def ids(self) -> List[int]:
        """Registered species ids in ascending order"""
        return sorted(self.species)

    def get_stats(self) -> Dict[str, int]:
        """
        Count species per status.

        Returns:
            Dict with keys: total, none, seen, owned
        """
        stats = {status.value: 0 for status in Status}
        for species_id in self.species:
            stats[self.species_statuses.get(species_id, Status.NONE).value] += 1
        stats['total'] = len(self.species)
        return stats

    def __len__(self) -> int:
        return len(self.species)

    def __contains__(self, species_id: object) -> bool:
        return species_id in self.species

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (f"Bestiary(total={stats['total']}, seen={stats['seen']}, "
                f"owned={stats['owned']})")
