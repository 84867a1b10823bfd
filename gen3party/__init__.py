"""
Gen 3 Save Party Parser Package

Reads the active party out of a CFRU-style (unencrypted party records)
Generation 3 Pokemon save file.

Usage:
    from gen3party import parse

    for mon in parse("path/to/save.sav"):
        print(mon.display_text)
"""

# Pipeline
from .save_parser import SaveFile, SaveParser, load_save, parse

# Errors
from .errors import (
    FormatTooSmall,
    IoFailure,
    OutOfBoundsError,
    SaveParseError,
    SectionNotFound,
)

# Reference data
from .catalog import StaticDataCatalog, get_catalog
from .charmap import CharMap, decode_text, get_charmap, load_charmap

# Decoders
from .pokemon import (
    PartyPokemon,
    format_display_text,
    get_ability_slot,
    get_nature_name,
    parse_party,
    parse_party_pokemon,
)
from .save_structure import (
    Section,
    build_section_table,
    find_active_slot,
    find_section,
    select_active_slot,
)
from .trainer import TrainerInfo, format_trainer_id, is_shiny, parse_trainer_info

# Constants (commonly used)
from .constants import NATURE_NAMES, UNKNOWN_NAME

__version__ = "1.0.0"

__all__ = [
    'parse',
    'load_save',
    'SaveParser',
    'SaveFile',
    'PartyPokemon',
    'TrainerInfo',
    'Section',
    'StaticDataCatalog',
    'get_catalog',
    'CharMap',
    'decode_text',
    'get_charmap',
    'load_charmap',
    'SaveParseError',
    'IoFailure',
    'FormatTooSmall',
    'SectionNotFound',
    'OutOfBoundsError',
    'build_section_table',
    'select_active_slot',
    'find_active_slot',
    'find_section',
    'parse_party',
    'parse_party_pokemon',
    'format_display_text',
    'get_ability_slot',
    'get_nature_name',
    'parse_trainer_info',
    'format_trainer_id',
    'is_shiny',
    'NATURE_NAMES',
    'UNKNOWN_NAME',
]
