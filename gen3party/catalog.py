"""
Static Data Catalog - species, move, item and ability names

Built once from the bundled reference tables and shared read-only for the
rest of the process. The decoder receives the catalog as an argument; only
get_catalog() touches module state.
"""

import logging
import os
import threading

from .config import (
    ABILITIES_FILE,
    DATA_DIR,
    ITEMS_FILE,
    MOVES_FILE,
    SPECIES_FILE,
)
from .constants import (
    ABILITY_SLOT_HIDDEN,
    ABILITY_SLOT_SECONDARY,
    UNKNOWN_NAME,
)
from .errors import IoFailure

logger = logging.getLogger("gen3party.catalog")


def build_lookup(text):
    """
    Build a lookup list from a 1-indexed text file (one name per line).
    Prepends a dummy entry at index 0 so that names[id] works directly.
    """
    names = [""]
    names.extend(line.strip() for line in text.splitlines())
    return names


def build_ability_map(text):
    """
    Parse the species ability table.

    The first line is a header. Each row is ``species,primary,secondary,hidden``;
    rows with fewer than four columns are skipped.

    Returns:
        dict: {lowercase species name: (primary, secondary, hidden)}
    """
    abilities = {}
    for line_no, line in enumerate(text.splitlines()[1:], start=2):
        if not line.strip():
            continue
        cols = line.split(",")
        if len(cols) < 4:
            logger.debug(f"[Catalog] Skipping malformed ability row {line_no}: {line!r}")
            continue
        abilities[cols[0].strip().lower()] = (
            cols[1].strip(),
            cols[2].strip(),
            cols[3].strip(),
        )
    return abilities


class StaticDataCatalog:
    """Read-only ID -> name lookups."""

    def __init__(self, species, moves, items, abilities):
        self._species = tuple(species)
        self._moves = tuple(moves)
        self._items = tuple(items)
        self._abilities = dict(abilities)

    @classmethod
    def from_text(cls, species="", moves="", items="", abilities=""):
        """Build a catalog from the raw contents of the four reference files."""
        return cls(
            build_lookup(species),
            build_lookup(moves),
            build_lookup(items),
            build_ability_map(abilities),
        )

    @classmethod
    def load(cls, data_dir=None):
        """
        Build a catalog from the reference files in data_dir.

        Raises:
            IoFailure: if a reference file is missing or unreadable
        """
        data_dir = data_dir or DATA_DIR

        def read(name):
            path = os.path.join(data_dir, name)
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise IoFailure(f"Failed to read reference data: {e}") from e

        catalog = cls.from_text(
            species=read(SPECIES_FILE),
            moves=read(MOVES_FILE),
            items=read(ITEMS_FILE),
            abilities=read(ABILITIES_FILE),
        )
        logger.info(
            f"[Catalog] Loaded {catalog.species_count} species, "
            f"{catalog.move_count} moves, {catalog.item_count} items from {data_dir}"
        )
        return catalog

    @staticmethod
    def _lookup(names, id_):
        if 0 <= id_ < len(names):
            return names[id_]
        return UNKNOWN_NAME

    def species_name(self, species_id):
        return self._lookup(self._species, species_id)

    def move_name(self, move_id):
        return self._lookup(self._moves, move_id)

    def item_name(self, item_id):
        return self._lookup(self._items, item_id)

    def ability_name(self, species, slot):
        """
        Look up an ability by species name and ability slot.

        Args:
            species: Species name (case-insensitive)
            slot: 0 = primary, 1 = secondary, 2 = hidden

        Returns:
            str: Ability name, or "???" for an unknown species
        """
        entry = self._abilities.get(species.lower())
        if entry is None:
            return UNKNOWN_NAME
        primary, secondary, hidden = entry
        if slot == ABILITY_SLOT_HIDDEN:
            return hidden
        if slot == ABILITY_SLOT_SECONDARY:
            return secondary
        return primary

    @property
    def species_count(self):
        return len(self._species) - 1

    @property
    def move_count(self):
        return len(self._moves) - 1

    @property
    def item_count(self):
        return len(self._items) - 1


_catalog = None
_catalog_lock = threading.Lock()


def get_catalog():
    """Get the process-wide catalog, building it on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = StaticDataCatalog.load()
    return _catalog


def reset_catalog():
    """Drop the process-wide catalog so the next get_catalog() rebuilds it."""
    global _catalog
    with _catalog_lock:
        _catalog = None
