"""
Gen 3 Save Party Parser - Text Module
Decodes the game's proprietary one-byte-per-glyph text encoding.

The byte -> character mapping lives in data/charmap.tbl (standard ROM
hacking table format, one ``HH=c`` entry per line) rather than in code.
"""

import logging
import threading

from .config import BUNDLED_DATA_DIR, CHARMAP_FILE, data_path

logger = logging.getLogger("gen3party.charmap")

STRING_TERMINATOR = 0xFF


class CharMap:
    """Byte -> character table with the ``decode(bytes) -> str`` contract."""

    def __init__(self, table):
        self.table = dict(table)

    def decode(self, raw):
        """
        Decode Gen 3 text to a string.

        Args:
            raw: bytes or bytearray of encoded text

        Returns:
            str: Decoded text, stopping at the 0xFF terminator. Bytes with no
            table entry are dropped.
        """
        result = []
        for byte in raw:
            if byte == STRING_TERMINATOR:
                break
            char = self.table.get(byte)
            if char is None:
                logger.debug(f"[Charmap] No glyph for byte 0x{byte:02X}")
                continue
            result.append(char)
        return "".join(result)

    __call__ = decode


def parse_table(text):
    """
    Parse table-file text into a {byte: char} dict.

    Lines without ``=`` are ignored. The value is taken verbatim so that
    ``00= `` maps to a space.
    """
    table = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep or not key.strip():
            continue
        try:
            code = int(key.strip(), 16)
        except ValueError:
            logger.debug(f"[Charmap] Skipping malformed table line: {line!r}")
            continue
        table[code] = value
    return table


def load_charmap(path=None):
    """Load a CharMap from a table file (defaults to the bundled one)."""
    # Always the bundled table; GEN3PARTY_DATA_DIR does not apply
    path = path or data_path(CHARMAP_FILE, BUNDLED_DATA_DIR)
    with open(path, "r", encoding="utf-8") as f:
        table = parse_table(f.read())
    logger.debug(f"[Charmap] Loaded {len(table)} glyphs from {path}")
    return CharMap(table)


_charmap = None
_charmap_lock = threading.Lock()


def get_charmap():
    """Get the process-wide CharMap, loading it on first use."""
    global _charmap
    if _charmap is None:
        with _charmap_lock:
            if _charmap is None:
                _charmap = load_charmap()
    return _charmap


def decode_text(raw):
    """Decode Gen 3 text with the bundled table."""
    return get_charmap().decode(raw)
