"""
Gen 3 Save Party Parser - Save Structure Module
Splits save slots into sections and picks the active slot
"""

import logging
from dataclasses import dataclass

from .binary import check_range, read_u16, read_u32
from .constants import (
    SECTION_COUNT,
    SECTION_ID_OFFSET,
    SECTION_NAMES,
    SECTION_SAVE_INDEX_OFFSET,
    SECTION_SIGNATURE,
    SECTION_SIGNATURE_OFFSET,
    SECTION_SIZE,
    SLOT_OFFSETS,
)
from .errors import SectionNotFound

logger = logging.getLogger("gen3party.save_structure")


@dataclass(frozen=True)
class Section:
    """One 4 KB section of a save slot."""

    index: int
    logical_id: int
    save_index: int
    signature: int
    data: bytes

    @property
    def signature_ok(self):
        return self.signature == SECTION_SIGNATURE

    @property
    def name(self):
        return SECTION_NAMES.get(self.logical_id, f"Unknown ({self.logical_id})")


def read_section(data, offset, index=0):
    """
    Read one section starting at offset.

    Args:
        data: Save file data
        offset: Absolute offset of the section
        index: Physical position of the section within its slot

    Returns:
        Section
    """
    check_range(data, offset, SECTION_SIZE)
    raw = bytes(data[offset:offset + SECTION_SIZE])
    return Section(
        index=index,
        logical_id=read_u16(raw, SECTION_ID_OFFSET),
        save_index=read_u32(raw, SECTION_SAVE_INDEX_OFFSET),
        signature=read_u32(raw, SECTION_SIGNATURE_OFFSET),
        data=raw,
    )


def build_section_table(data, slot_offset):
    """
    Build the table of all 14 sections of one save slot.

    Sections are returned in physical order; their logical ids are passed
    through unchecked.

    Args:
        data: Save file data
        slot_offset: Base offset of the save slot

    Returns:
        list[Section]: Exactly 14 sections
    """
    return [
        read_section(data, slot_offset + i * SECTION_SIZE, index=i)
        for i in range(SECTION_COUNT)
    ]


def select_active_slot(slot_a, slot_b):
    """
    Pick the most recently written of the two slot copies.

    Only the first section's save index is compared. Slot A wins ties.

    Args:
        slot_a: Section table built from offset 0x0000
        slot_b: Section table built from offset 0xE000

    Returns:
        tuple: ("A" or "B", sections)
    """
    index_a = slot_a[0].save_index
    index_b = slot_b[0].save_index
    label = "A" if index_a >= index_b else "B"
    logger.debug(
        f"[SectionMap] Slot A save index: {index_a}, Slot B save index: {index_b}, using slot {label}"
    )
    if label == "A":
        return label, slot_a
    return label, slot_b


def find_active_slot(data):
    """Build both slot tables from the save data and return the active one."""
    slot_a = build_section_table(data, SLOT_OFFSETS[0])
    slot_b = build_section_table(data, SLOT_OFFSETS[1])
    return select_active_slot(slot_a, slot_b)


def find_section(sections, section_id):
    """
    Get the first section with the given logical id.

    Raises:
        SectionNotFound: if no section carries that id
    """
    for section in sections:
        if section.logical_id == section_id:
            return section
    raise SectionNotFound(section_id)


def describe_sections(sections):
    """One summary line per section, in physical order."""
    lines = []
    for section in sections:
        status = "OK" if section.signature_ok else "BAD"
        lines.append(
            f"Section {section.logical_id:>2} ({section.name}): signature {status}, "
            f"save index {section.save_index}"
        )
    return lines
