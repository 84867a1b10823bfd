"""
Gen 3 Save Party Parser - Pokemon Module
Decodes party Pokemon from the Team/Items section

The supported variant stores each 100-byte party record unencrypted with
its four substructures in fixed order:
    Growth(32), Attacks(44), EVs(56), Misc(68) - 12 bytes each
so every field is read straight from POKEMON_OFFSETS.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from .binary import read_bytes, read_u8, read_u16, read_u32
from .constants import (
    ABILITY_SLOT_HIDDEN,
    ABILITY_SLOT_PRIMARY,
    ABILITY_SLOT_SECONDARY,
    HIDDEN_ABILITY_BIT,
    NATURE_NAMES,
    PARTY_COUNT_OFFSET,
    PARTY_DATA_OFFSET,
    PARTY_MAX,
    POKEMON_OFFSETS,
    POKEMON_SIZE,
    STAT_NAMES,
)
from .errors import OutOfBoundsError
from .trainer import is_shiny

logger = logging.getLogger("gen3party.pokemon")


@dataclass(frozen=True)
class PartyPokemon:
    nickname: str
    species: str
    level: int
    item: Optional[str]
    nature: str
    ability: str
    moves: List[str]
    display_text: str
    personality: int = 0
    ot_id: int = 0
    ot_name: str = ""
    species_id: int = 0
    item_id: int = 0
    move_ids: List[int] = field(default_factory=list)
    experience: int = 0
    ability_slot: int = ABILITY_SLOT_PRIMARY
    hp: int = 0
    max_hp: int = 0
    stats: Dict[str, int] = field(default_factory=dict)
    evs: Dict[str, int] = field(default_factory=dict)
    is_shiny: bool = False

    def to_dict(self):
        return asdict(self)


def get_nature_name(personality):
    """Nature is fixed by personality % 25."""
    return NATURE_NAMES[personality % 25]


def get_ability_slot(personality, misc_word):
    """
    Work out which of the species' three abilities a Pokemon has.

    Args:
        personality: Personality value (PID)
        misc_word: The IV/egg/ability word from the Misc substructure

    Returns:
        int: 2 (hidden) if bit 31 of misc_word is set, otherwise
             0 for an even personality and 1 for an odd one
    """
    if (misc_word >> HIDDEN_ABILITY_BIT) & 1:
        return ABILITY_SLOT_HIDDEN
    if personality % 2 == 0:
        return ABILITY_SLOT_PRIMARY
    return ABILITY_SLOT_SECONDARY


def format_display_text(nickname, species, level, item, nature, ability, moves):
    """
    Build the multi-line summary shown for a party member.

    Example:
        Kaeman (Arbok) @ Oran Berry
        Level: 28
        Jolly Nature
        Ability: Intimidate
        - Thunder Fang
    """
    if item:
        lines = [f"{nickname} ({species}) @ {item}"]
    else:
        lines = [f"{nickname} ({species})"]
    lines.append(f"Level: {level}")
    lines.append(f"{nature} Nature")
    lines.append(f"Ability: {ability}")
    for move in moves:
        lines.append(f"- {move}")
    return "\n".join(lines).rstrip()


def parse_party_pokemon(record, catalog, decode_text):
    """
    Decode a single 100-byte party record.

    Args:
        record: 100 bytes of party Pokemon data
        catalog: StaticDataCatalog used to resolve names
        decode_text: Text decoder, decode(bytes) -> str

    Returns:
        PartyPokemon, or None if the slot is empty (personality 0)
    """
    personality = read_u32(record, POKEMON_OFFSETS["personality"])
    if personality == 0:
        return None

    ot_id = read_u32(record, POKEMON_OFFSETS["ot_id"])
    nickname = decode_text(
        read_bytes(record, POKEMON_OFFSETS["nickname"], POKEMON_OFFSETS["nickname_length"])
    )
    ot_name = decode_text(
        read_bytes(record, POKEMON_OFFSETS["ot_name"], POKEMON_OFFSETS["ot_name_length"])
    )
    level = read_u8(record, POKEMON_OFFSETS["level"])
    nature = get_nature_name(personality)

    # Growth
    species_id = read_u16(record, POKEMON_OFFSETS["species"])
    item_id = read_u16(record, POKEMON_OFFSETS["item"])
    experience = read_u32(record, POKEMON_OFFSETS["experience"])

    # Attacks
    move_ids = [read_u16(record, off) for off in POKEMON_OFFSETS["moves"]]
    move_ids = [m for m in move_ids if m != 0]
    moves = [catalog.move_name(m) for m in move_ids]

    # EVs
    evs = {
        stat: read_u8(record, POKEMON_OFFSETS["evs"] + i)
        for i, stat in enumerate(STAT_NAMES)
    }

    # Misc
    misc_word = read_u32(record, POKEMON_OFFSETS["iv_egg_ability"])
    ability_slot = get_ability_slot(personality, misc_word)

    species = catalog.species_name(species_id)
    ability = catalog.ability_name(species, ability_slot)
    item = catalog.item_name(item_id) if item_id != 0 else None

    stats = {
        stat: read_u16(record, POKEMON_OFFSETS[stat])
        for stat in STAT_NAMES[1:]
    }

    return PartyPokemon(
        nickname=nickname,
        species=species,
        level=level,
        item=item,
        nature=nature,
        ability=ability,
        moves=moves,
        display_text=format_display_text(
            nickname, species, level, item, nature, ability, moves
        ),
        personality=personality,
        ot_id=ot_id,
        ot_name=ot_name,
        species_id=species_id,
        item_id=item_id,
        move_ids=move_ids,
        experience=experience,
        ability_slot=ability_slot,
        hp=read_u16(record, POKEMON_OFFSETS["hp"]),
        max_hp=read_u16(record, POKEMON_OFFSETS["max_hp"]),
        stats=stats,
        evs=evs,
        is_shiny=is_shiny(personality, ot_id),
    )


def parse_party(section_data, catalog, decode_text):
    """
    Decode every party member stored in the Team/Items section.

    The stored count is capped at 6. Decoding stops quietly at the first
    record that would run past the end of the section, and empty slots are
    skipped, so the result may be shorter than the count.

    Args:
        section_data: Raw bytes of the section with logical id 1
        catalog: StaticDataCatalog used to resolve names
        decode_text: Text decoder, decode(bytes) -> str

    Returns:
        list[PartyPokemon]: Party in slot order
    """
    try:
        stored_count = read_u32(section_data, PARTY_COUNT_OFFSET)
    except OutOfBoundsError as e:
        logger.warning(f"[Parser] No party count in section: {e}")
        return []

    party_count = min(stored_count, PARTY_MAX)
    if stored_count > PARTY_MAX:
        logger.warning(f"[Parser] Party count {stored_count} exceeds {PARTY_MAX}, capping")

    party = []
    for i in range(party_count):
        offset = PARTY_DATA_OFFSET + i * POKEMON_SIZE
        if offset + POKEMON_SIZE > len(section_data):
            logger.warning(f"[Parser] Party slot {i + 1} runs past the section, stopping")
            break
        record = section_data[offset:offset + POKEMON_SIZE]
        pokemon = parse_party_pokemon(record, catalog, decode_text)
        if pokemon is None:
            logger.debug(f"[Parser] Party slot {i + 1} is empty")
            continue
        logger.debug(
            f"[Parser]   {i + 1}. #{pokemon.species_id:03d} {pokemon.nickname} Lv.{pokemon.level}"
        )
        party.append(pokemon)

    logger.info(f"[Parser] Found {len(party)} party Pokemon")
    return party
