import logging
from pathlib import Path

from .errors import ProgramTooLargeError
from .memory import MAX_PROGRAM_SIZE

logger = logging.getLogger(__name__)

PROGRAM_SUFFIX = ".ch8"


def read_program(path):
    """
    Read a raw CHIP-8 program file. There is no header, the file is the
    opcode stream that gets copied to 0x200.
    """
    path = Path(path)
    if path.suffix.lower() != PROGRAM_SUFFIX:
        logger.warning(f"{path.name} does not have a {PROGRAM_SUFFIX} extension, loading it anyway.")
    logger.debug(f"Loading program at path {path}.")
    program = path.read_bytes()
    if len(program) > MAX_PROGRAM_SIZE:
        raise ProgramTooLargeError(len(program), MAX_PROGRAM_SIZE)
    return program
