import struct

import pytest

from gen3party.catalog import StaticDataCatalog
from gen3party.constants import (
    PARTY_COUNT_OFFSET,
    PARTY_DATA_OFFSET,
    POKEMON_SIZE,
    SECTION_COUNT,
    SECTION_ID_OFFSET,
    SECTION_SAVE_INDEX_OFFSET,
    SECTION_SIGNATURE,
    SECTION_SIGNATURE_OFFSET,
    SECTION_SIZE,
    SLOT_SIZE,
)


def encode_text(text, size):
    """Encode A-Z, a-z, 0-9 and space the way the game does, padded with 0xFF."""
    out = bytearray()
    for ch in text[:size]:
        if "A" <= ch <= "Z":
            out.append(0xBB + ord(ch) - ord("A"))
        elif "a" <= ch <= "z":
            out.append(0xD5 + ord(ch) - ord("a"))
        elif "0" <= ch <= "9":
            out.append(0xA1 + ord(ch) - ord("0"))
        elif ch == " ":
            out.append(0x00)
        else:
            raise ValueError(f"cannot encode {ch!r}")
    out.extend(b"\xff" * (size - len(out)))
    return bytes(out)


def make_record(
    personality=0x20,
    ot_id=0,
    nickname="",
    ot_name="",
    species_id=0,
    item_id=0,
    experience=0,
    moves=(0, 0, 0, 0),
    evs=(0, 0, 0, 0, 0, 0),
    misc_word=0,
    level=0,
    hp=0,
    max_hp=0,
    stats=(0, 0, 0, 0, 0),
):
    """Build one unencrypted 100-byte party record."""
    rec = bytearray(POKEMON_SIZE)
    struct.pack_into("<II", rec, 0, personality, ot_id)
    rec[8:18] = encode_text(nickname, 10)
    rec[20:27] = encode_text(ot_name, 7)
    struct.pack_into("<HHI", rec, 32, species_id, item_id, experience)
    struct.pack_into("<4H", rec, 44, *moves)
    rec[56:62] = bytes(evs)
    struct.pack_into("<I", rec, 72, misc_word)
    rec[84] = level
    struct.pack_into("<7H", rec, 86, hp, max_hp, *stats)
    return bytes(rec)


def make_section(logical_id, save_index, payload=b"", signature=SECTION_SIGNATURE):
    sec = bytearray(SECTION_SIZE)
    sec[: len(payload)] = payload
    struct.pack_into("<H", sec, SECTION_ID_OFFSET, logical_id)
    struct.pack_into("<I", sec, SECTION_SIGNATURE_OFFSET, signature)
    struct.pack_into("<I", sec, SECTION_SAVE_INDEX_OFFSET, save_index)
    return sec


def make_team_payload(records, count=None):
    payload = bytearray(PARTY_DATA_OFFSET + len(records) * POKEMON_SIZE)
    struct.pack_into(
        "<I", payload, PARTY_COUNT_OFFSET, len(records) if count is None else count
    )
    for i, rec in enumerate(records):
        start = PARTY_DATA_OFFSET + i * POKEMON_SIZE
        payload[start:start + POKEMON_SIZE] = rec
    return bytes(payload)


def make_trainer_payload(name="", gender=0, trainer_id=0, secret_id=0):
    payload = bytearray(0x10)
    payload[0:7] = encode_text(name, 7)
    payload[8] = gender
    struct.pack_into("<HH", payload, 0x0A, trainer_id, secret_id)
    return bytes(payload)


def make_slot(save_index, records=(), count=None, trainer=None, rotate=0, skip_ids=()):
    """
    Build one 14-section slot.

    Logical ids are rotated by `rotate` positions, the way the game cycles
    sections between saves. Ids in skip_ids are replaced with 0xFFFF.
    """
    slot = bytearray()
    for i in range(SECTION_COUNT):
        logical_id = (i + rotate) % SECTION_COUNT
        payload = b""
        if logical_id == 1:
            payload = make_team_payload(list(records), count)
        elif logical_id == 0 and trainer is not None:
            payload = make_trainer_payload(**trainer)
        if logical_id in skip_ids:
            logical_id = 0xFFFF
        slot += make_section(logical_id, save_index, payload)
    assert len(slot) == SLOT_SIZE
    return slot


def make_save(slot_a, slot_b, trailer=b""):
    return bytes(slot_a) + bytes(slot_b) + trailer


@pytest.fixture
def mini_catalog():
    return StaticDataCatalog.from_text(
        species="Bulbasaur\nIvysaur\nTentacruel\n",
        moves="Pound\nWater Pulse\nSupersonic\nAcid\n",
        items="Master Ball\nOran Berry\n",
        abilities=(
            "species,primary,secondary,hidden\n"
            "Bulbasaur,Overgrow,Overgrow,Chlorophyll\n"
            "Tentacruel,Clear Body,Liquid Ooze,Rain Dish\n"
        ),
    )


@pytest.fixture
def write_save(tmp_path):
    def _write(data, name="game.sav"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


# The six-member party of the Radical Red reference save, in slot order:
# (nickname, species, level, item, nature, moves)
REFERENCE_PARTY = [
    ("2Kewl", "Tentacruel", 28, None, "Relaxed",
     ["Water Pulse", "Wring Out", "Supersonic", "Acid"]),
    ("Smell", "Skuntank", 28, None, "Modest",
     ["Bite", "Acid Spray", "Toxic", "Flamethrower"]),
    ("Mimi", "Pawmo", 28, None, "Jolly",
     ["Arm Thrust", "Nuzzle", "Dig", "Bite"]),
    ("Kaeman", "Arbok", 28, "Oran Berry", "Jolly",
     ["Thunder Fang", "Poison Jab", "Sucker Punch", "Fire Fang"]),
    ("Sparky", "Luxio", 28, None, "Adamant",
     ["Thunder Fang", "Swagger", "Spark", "Bite"]),
    ("horny", "Cetoddle", 28, None, "Careful",
     ["Ice Shard", "Rest", "Take Down", "Flail"]),
]

TENTACRUEL_TEXT = (
    "2Kewl (Tentacruel)\n"
    "Level: 28\n"
    "Relaxed Nature\n"
    "Ability: Clear Body\n"
    "- Water Pulse\n"
    "- Wring Out\n"
    "- Supersonic\n"
    "- Acid"
)

ARBOK_TEXT = (
    "Kaeman (Arbok) @ Oran Berry\n"
    "Level: 28\n"
    "Jolly Nature\n"
    "Ability: Intimidate\n"
    "- Thunder Fang\n"
    "- Poison Jab\n"
    "- Sucker Punch\n"
    "- Fire Fang"
)
