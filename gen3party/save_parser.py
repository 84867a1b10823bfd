"""
Gen 3 Save Party Parser - Main Module
Reads a save from disk and drives the structure, party and trainer decoders
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import get_catalog
from .charmap import decode_text as default_decode_text
from .constants import MIN_SAVE_SIZE, SECTION_TEAM_ITEMS, SECTION_TRAINER_INFO
from .errors import FormatTooSmall, IoFailure, SaveParseError, SectionNotFound
from .pokemon import PartyPokemon, parse_party
from .save_structure import Section, find_active_slot, find_section
from .trainer import TrainerInfo, parse_trainer_info

logger = logging.getLogger("gen3party.parser")


@dataclass
class SaveFile:
    path: str
    slot: str
    save_index: int
    sections: List[Section] = field(default_factory=list)
    trainer: Optional[TrainerInfo] = None
    party: List[PartyPokemon] = field(default_factory=list)

    def to_dict(self):
        return {
            "path": self.path,
            "slot": self.slot,
            "save_index": self.save_index,
            "trainer": self.trainer.to_dict() if self.trainer else None,
            "party": [p.to_dict() for p in self.party],
        }


def read_save_bytes(path):
    """
    Read a whole save file into memory.

    Raises:
        IoFailure: if the file cannot be read
        FormatTooSmall: if it is smaller than two save slots
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise IoFailure(f"Failed to read file: {e}") from e

    if len(data) < MIN_SAVE_SIZE:
        raise FormatTooSmall(len(data), MIN_SAVE_SIZE)
    return data


def load_save(path, catalog=None, decode_text=None):
    """
    Run the full pipeline on a save file.

    Args:
        path: Path to the .sav file
        catalog: StaticDataCatalog (defaults to the process-wide one)
        decode_text: Text decoder (defaults to the bundled charmap)

    Returns:
        SaveFile

    Raises:
        IoFailure, FormatTooSmall, SectionNotFound
    """
    catalog = catalog or get_catalog()
    decode_text = decode_text or default_decode_text

    data = read_save_bytes(path)
    logger.debug(f"[Parser] Loaded {path} ({len(data)} bytes)")

    slot, sections = find_active_slot(data)
    team_section = find_section(sections, SECTION_TEAM_ITEMS)
    party = parse_party(team_section.data, catalog, decode_text)

    trainer = None
    try:
        trainer_section = find_section(sections, SECTION_TRAINER_INFO)
    except SectionNotFound:
        logger.warning("[Parser] Trainer Info section not found, skipping trainer info")
    else:
        trainer = parse_trainer_info(trainer_section.data, decode_text)

    logger.info(f"[Parser] Save slot: {slot}, {len(party)} party Pokemon")
    return SaveFile(
        path=str(path),
        slot=slot,
        save_index=sections[0].save_index,
        sections=sections,
        trainer=trainer,
        party=party,
    )


def parse(path, catalog=None):
    """
    Parse the party out of a save file.

    Returns:
        list[PartyPokemon]: 0 to 6 records in party order
    """
    return load_save(path, catalog=catalog).party


class SaveParser:
    """
    Parser for CFRU-style Gen 3 save files.

    Usage:
        parser = SaveParser("path/to/save.sav")
        if parser.loaded:
            for mon in parser.party:
                print(mon.display_text)
        else:
            print(parser.error)
    """

    def __init__(self, save_path=None, catalog=None):
        self.save_path = save_path
        self.catalog = catalog
        self.save = None
        self.loaded = False
        self.error = None

        if save_path:
            self.load(save_path)

    def load(self, save_path=None):
        """
        Load and parse a save file.

        Args:
            save_path: Path to save file (uses self.save_path if None)

        Returns:
            bool: True if successful
        """
        if save_path:
            self.save_path = save_path

        if not self.save_path:
            self.error = "No save path specified"
            logger.error(f"[Parser] {self.error}")
            return False

        try:
            self.save = load_save(self.save_path, catalog=self.catalog)
        except SaveParseError as e:
            self.save = None
            self.loaded = False
            self.error = str(e)
            logger.error(f"[Parser] Failed to load {self.save_path}: {e}")
            return False

        self.loaded = True
        self.error = None
        return True

    @property
    def party(self):
        return self.save.party if self.loaded else []

    @property
    def trainer(self):
        return self.save.trainer if self.loaded else None

    @property
    def slot(self):
        return self.save.slot if self.loaded else None

    @property
    def sections(self):
        return self.save.sections if self.loaded else []
