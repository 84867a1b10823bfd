"""
Settings persistence - remembers the last opened save file
"""

import json
import logging
import os

from . import config

logger = logging.getLogger("gen3party.settings")

LAST_PATH_KEY = "sav_path"


def load_settings(settings_file=None):
    """Load settings from settings.json"""
    settings_file = settings_file or config.SETTINGS_FILE
    if not os.path.exists(settings_file):
        logger.debug(f"[Settings] File not found: {settings_file}")
        return {}
    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            settings = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"[Settings] Failed to load settings from {settings_file}: {e}")
        return {}
    if not isinstance(settings, dict):
        logger.warning(f"[Settings] Ignoring malformed settings in {settings_file}")
        return {}
    logger.debug(f"[Settings] Loaded from: {settings_file}")
    return settings


def save_settings(data, settings_file=None):
    """
    Save settings to settings.json

    Returns:
        bool: True if the file was written
    """
    settings_file = settings_file or config.SETTINGS_FILE
    try:
        # The settings directory may not exist on first run
        os.makedirs(os.path.dirname(settings_file), exist_ok=True)
        with open(settings_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except (OSError, TypeError) as e:
        logger.error(f"[Settings] Failed to save settings to {settings_file}: {e}")
        return False
    logger.debug(f"[Settings] Saved to: {settings_file}")
    return True


def get_last_path(settings_file=None):
    """Get the last opened save path, or None."""
    path = load_settings(settings_file).get(LAST_PATH_KEY)
    return path if isinstance(path, str) and path else None


def set_last_path(path, settings_file=None):
    """Remember path as the last opened save, keeping any other settings."""
    settings = load_settings(settings_file)
    settings[LAST_PATH_KEY] = str(path)
    return save_settings(settings, settings_file)
