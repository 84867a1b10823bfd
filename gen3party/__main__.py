#!/usr/bin/env python3

"""
__main__.py - Command line entry point. Prints the party of a save file and
remembers the file for next time.
"""

import argparse
import json
import logging
import sys

from . import __version__
from .errors import SaveParseError
from .party_logging import setup_logging
from .save_parser import load_save
from .save_structure import describe_sections
from .settings import get_last_path, set_last_path
from .trainer import format_trainer_id

logger = logging.getLogger("gen3party.main")


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="gen3party",
        description="Show the party Pokemon stored in a Gen 3 (CFRU) save file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="path to the .sav file (defaults to the last file opened)",
    )
    parser.add_argument("--json", action="store_true", help="print the party as JSON")
    parser.add_argument("--trainer", action="store_true", help="also print trainer info")
    parser.add_argument("--sections", action="store_true", help="also print the section table")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug output on stderr")
    parser.add_argument("--log-dir", help="directory for gen3party.log")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_trainer(trainer):
    return "\n".join(
        [
            f"Trainer: {trainer.name}",
            f"Gender: {trainer.gender}",
            f"ID: {format_trainer_id(trainer.trainer_id, trainer.secret_id)}",
        ]
    )


def run(args, out=None):
    out = out or sys.stdout

    path = args.path or get_last_path()
    if not path:
        print("Error: no save file given and none remembered", file=sys.stderr)
        return 2

    # Remembered even when the parse below fails
    if not set_last_path(path):
        logger.warning(f"[Main] Could not remember {path}")

    try:
        save = load_save(path)
    except SaveParseError as e:
        logger.error(f"[Main] {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = save.to_dict()
        if not args.trainer:
            payload.pop("trainer")
        print(json.dumps(payload, indent=2, ensure_ascii=False), file=out)
        return 0

    blocks = []
    if args.sections:
        blocks.append(f"Slot {save.slot} (save index {save.save_index})")
        blocks.append("\n".join(describe_sections(save.sections)))
    if args.trainer and save.trainer:
        blocks.append(format_trainer(save.trainer))
    if save.party:
        blocks.extend(mon.display_text for mon in save.party)
    else:
        blocks.append("Party is empty")
    print("\n\n".join(blocks), file=out)
    return 0


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    setup_logging(log_dir=args.log_dir, verbose=args.verbose, version=__version__)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
