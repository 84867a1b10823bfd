"""
Gen 3 Save Party Parser - Trainer Module
Trainer info from the Trainer Info section, trainer ID formatting and shiny checks
"""

from dataclasses import asdict, dataclass

from .binary import read_bytes, read_u8, read_u16
from .constants import SHINY_THRESHOLD, TRAINER_OFFSETS


@dataclass(frozen=True)
class TrainerInfo:
    name: str
    gender: str
    trainer_id: int
    secret_id: int

    @property
    def full_id(self):
        return (self.secret_id << 16) | self.trainer_id

    def to_dict(self):
        return asdict(self)


def parse_trainer_info(section_data, decode_text):
    """
    Parse trainer info from the Trainer Info section.

    Args:
        section_data: Raw bytes of the section with logical id 0
        decode_text: Text decoder, decode(bytes) -> str

    Returns:
        TrainerInfo
    """
    name_raw = read_bytes(
        section_data, TRAINER_OFFSETS["name"], TRAINER_OFFSETS["name_length"]
    )
    gender_byte = read_u8(section_data, TRAINER_OFFSETS["gender"])
    return TrainerInfo(
        name=decode_text(name_raw),
        gender="Boy" if gender_byte == 0 else "Girl",
        trainer_id=read_u16(section_data, TRAINER_OFFSETS["trainer_id"]),
        secret_id=read_u16(section_data, TRAINER_OFFSETS["secret_id"]),
    )


def format_trainer_id(tid, sid, show_secret=False):
    if show_secret:
        return f"{tid:05d}-{sid:05d}"
    return f"{tid:05d}"


def is_shiny(personality, ot_id):
    """
    Check whether a Pokemon is shiny.

    Args:
        personality: Personality value (PID)
        ot_id: Full 32-bit original trainer ID (secret ID in the high half)

    Returns:
        bool
    """
    tid = ot_id & 0xFFFF
    sid = (ot_id >> 16) & 0xFFFF
    pid_low = personality & 0xFFFF
    pid_high = (personality >> 16) & 0xFFFF
    return (tid ^ sid ^ pid_low ^ pid_high) < SHINY_THRESHOLD
