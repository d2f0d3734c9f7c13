"""CHIP-8 interpreter."""
from .display import Display
from .errors import (Chip8Error, DecodeError, FatalError, MachineHaltedError,
                     ProgramTooLargeError, ProtectedMemoryError, StackOverflowError,
                     StackUnderflowError, UnsupportedInstructionError)
from .instructions import decode, disassemble
from .keypad import Keypad
from .machine import CHIP8, StepResult
from .memory import Memory
from .quirks import COSMAC_VIP, MODERN, Quirks
from .timers import Timers

__version__ = "0.1.0"
