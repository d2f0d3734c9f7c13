import argparse
import logging
import sys

from .errors import Chip8Error
from .frontend import INSTRUCTIONS_PER_SECOND, SCREEN_MULTIPLIER, Frontend
from .loader import read_program
from .machine import CHIP8
from .quirks import COSMAC_VIP, MODERN

logger = logging.getLogger(__name__)

EXIT_LOAD_FAILED = 1
EXIT_HALTED = 2


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8", description="Run a CHIP-8 program.")
    parser.add_argument("program",
                        help="Path of the .ch8 program to load.")
    parser.add_argument("--scale", type=int, default=SCREEN_MULTIPLIER,
                        help="Size of an individual pixel on screen (default: %(default)s).")
    parser.add_argument("--speed", type=int, default=INSTRUCTIONS_PER_SECOND,
                        help="Instructions executed per second (default: %(default)s).")
    parser.add_argument("--mute", action="store_true",
                        help="Don't play the sound timer tone.")
    parser.add_argument("--cosmac", action="store_true",
                        help="Use the original COSMAC VIP instruction quirks.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity, DEBUG traces every instruction.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(levelname)s]:  %(message)s", stream=sys.stderr)

    try:
        program = read_program(args.program)
    except (OSError, Chip8Error) as exc:
        logger.error(f"Could not load {args.program}: {exc}")
        return EXIT_LOAD_FAILED

    machine = CHIP8(quirks=COSMAC_VIP if args.cosmac else MODERN)
    machine.load_program(program)

    try:
        Frontend(machine, scale=args.scale, speed=args.speed, sound=not args.mute).run()
    except Chip8Error as exc:
        logger.error(f"Emulation stopped: {exc}")
        return EXIT_HALTED
    return 0
