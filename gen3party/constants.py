"""
Gen 3 Save Party Parser - Constants
Save layout, party record offsets and the nature table
"""

# ============================================================
# SAVE LAYOUT
# ============================================================
# A save holds two copies (slots) of the game data. Each slot is
# 14 sections of 0x1000 bytes; the footer of every section says
# which logical section it holds and how many times it was saved.

SECTION_SIZE = 0x1000
SECTION_COUNT = 14
SLOT_SIZE = SECTION_SIZE * SECTION_COUNT
SLOT_OFFSETS = (0x0000, SLOT_SIZE)
MIN_SAVE_SIZE = SLOT_SIZE * 2

SECTION_ID_OFFSET = 0x0FF4
SECTION_SIGNATURE_OFFSET = 0x0FF8
SECTION_SAVE_INDEX_OFFSET = 0x0FFC
SECTION_SIGNATURE = 0x08012025

# Logical section ids
SECTION_TRAINER_INFO = 0
SECTION_TEAM_ITEMS = 1

SECTION_NAMES = {
    0: "Trainer Info",
    1: "Team/Items",
    2: "Game State",
    3: "Misc Data",
    4: "Rival Info",
    5: "PC Buffer A",
    6: "PC Buffer B",
    7: "PC Buffer C",
    8: "PC Buffer D",
    9: "PC Buffer E",
    10: "PC Buffer F",
    11: "PC Buffer G",
    12: "PC Buffer H",
    13: "PC Buffer I",
}

# ============================================================
# TEAM / ITEMS SECTION (FireRed layout)
# ============================================================

PARTY_COUNT_OFFSET = 0x0034
PARTY_DATA_OFFSET = 0x0038
PARTY_MAX = 6
POKEMON_SIZE = 100

# ============================================================
# TRAINER INFO SECTION
# ============================================================

TRAINER_OFFSETS = {
    "name": 0x00,
    "name_length": 7,
    "gender": 0x08,
    "trainer_id": 0x0A,
    "secret_id": 0x0C,
}

# ============================================================
# PARTY RECORD (100 bytes, unencrypted, fixed substructure order)
# ============================================================
# The hack stores Growth(32), Attacks(44), EVs(56), Misc(68) in
# that order with no XOR key, so every field sits at a fixed offset.

POKEMON_OFFSETS = {
    "personality": 0,
    "ot_id": 4,
    "nickname": 8,
    "nickname_length": 10,
    "ot_name": 20,
    "ot_name_length": 7,
    # Growth
    "species": 32,
    "item": 34,
    "experience": 36,
    # Attacks
    "moves": (44, 46, 48, 50),
    # EVs
    "evs": 56,
    # Misc
    "iv_egg_ability": 72,
    # Party-only block
    "level": 84,
    "hp": 86,
    "max_hp": 88,
    "attack": 90,
    "defense": 92,
    "speed": 94,
    "sp_attack": 96,
    "sp_defense": 98,
}

HIDDEN_ABILITY_BIT = 31

ABILITY_SLOT_PRIMARY = 0
ABILITY_SLOT_SECONDARY = 1
ABILITY_SLOT_HIDDEN = 2

STAT_NAMES = ("hp", "attack", "defense", "speed", "sp_attack", "sp_defense")

SHINY_THRESHOLD = 8

# ============================================================
# NATURES
# ============================================================
# Nature is personality % 25, indexed into this list.

NATURE_NAMES = [
    "Hardy",
    "Lonely",
    "Brave",
    "Adamant",
    "Naughty",
    "Bold",
    "Docile",
    "Relaxed",
    "Impish",
    "Lax",
    "Timid",
    "Hasty",
    "Serious",
    "Jolly",
    "Naive",
    "Modest",
    "Mild",
    "Quiet",
    "Bashful",
    "Rash",
    "Calm",
    "Gentle",
    "Sassy",
    "Careful",
    "Quirky",
]

UNKNOWN_NAME = "???"
