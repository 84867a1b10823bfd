#!/usr/bin/env python3

"""
gen3party Configuration
Data, settings and log locations; GEN3PARTY_DATA_DIR and GEN3PARTY_HOME
override the defaults
"""

import os
import sys

# ===== Directory Paths =====

# Bundled reference data (internal, read-only)
BASE_DIR = getattr(sys, "_MEIPASS", os.path.dirname(os.path.abspath(__file__)))
BUNDLED_DATA_DIR = os.path.join(BASE_DIR, "data")

if os.environ.get("GEN3PARTY_DATA_DIR"):
    # Point at a ROM hack's own tables instead of the bundled Gen 3 ones
    DATA_DIR = os.environ["GEN3PARTY_DATA_DIR"]
else:
    DATA_DIR = BUNDLED_DATA_DIR

# User-writable directory for settings and the log file
if os.environ.get("GEN3PARTY_HOME"):
    SETTINGS_DIR = os.environ["GEN3PARTY_HOME"]
else:
    SETTINGS_DIR = os.path.join(os.path.expanduser("~"), ".gen3party")

SETTINGS_FILE = os.path.join(SETTINGS_DIR, "settings.json")
LOG_DIR = SETTINGS_DIR
LOG_FILE_NAME = "gen3party.log"

# ===== Reference Data Files =====
SPECIES_FILE = "Species.txt"
MOVES_FILE = "Moves.txt"
ITEMS_FILE = "Items.txt"
ABILITIES_FILE = "species_abilities.csv"
CHARMAP_FILE = "charmap.tbl"


def data_path(name, data_dir=None):
    """Absolute path of a reference data file."""
    return os.path.join(data_dir or DATA_DIR, name)
