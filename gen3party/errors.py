"""
Save parsing errors.

Only the first three are fatal to a parse. OutOfBoundsError is raised by the
byte readers and absorbed by the party decoder as an early stop.
"""


class SaveParseError(Exception):
    """Base class for every error raised while decoding a save file."""


class IoFailure(SaveParseError):
    """The save file could not be read from disk."""


class FormatTooSmall(SaveParseError):
    """The file is smaller than two full save slots."""

    def __init__(self, size, minimum):
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"File too small to be a valid .sav ({size} bytes, need {minimum})"
        )


class SectionNotFound(SaveParseError):
    """The active slot has no section with the requested logical id."""

    def __init__(self, section_id):
        self.section_id = section_id
        super().__init__(f"Section {section_id} not found")


class OutOfBoundsError(SaveParseError):
    """A fixed-offset read ran past the end of its buffer."""

    def __init__(self, offset, width, length):
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"Read of {width} byte(s) at 0x{offset:X} exceeds buffer of {length} bytes"
        )
