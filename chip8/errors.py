"""Exceptions raised by the CHIP-8 interpreter."""


class Chip8Error(Exception):
    """Base class for everything the interpreter raises."""


class ProgramTooLargeError(Chip8Error):
    def __init__(self, size, capacity):
        self.size = size
        self.capacity = capacity
        super().__init__(f"program is {size} bytes, only {capacity} bytes fit in memory")


class FatalError(Chip8Error):
    """
    An error that halts the machine.

    opcode and address are filled in by the executor when the error escapes
    a step, so that the failing instruction can be located in the program.
    """
    reason = "fatal error"

    def __init__(self, detail=None, opcode=None, address=None):
        super().__init__(detail)
        self.detail = detail
        self.opcode = opcode
        self.address = address

    def locate(self, opcode, address):
        if self.opcode is None:
            self.opcode = opcode
        if self.address is None:
            self.address = address

    def __str__(self):
        message = self.reason
        if self.detail:
            message += f": {self.detail}"
        if self.opcode is not None:
            message += f" (opcode {self.opcode:04X}"
            if self.address is not None:
                message += f" at {self.address:03X}"
            message += ")"
        return message


class DecodeError(FatalError):
    reason = "undefined opcode"


class UnsupportedInstructionError(FatalError):
    reason = "unsupported instruction"


class StackOverflowError(FatalError):
    reason = "stack overflow"


class StackUnderflowError(FatalError):
    reason = "stack underflow"


class ProtectedMemoryError(FatalError):
    reason = "write to reserved memory"


class MachineHaltedError(Chip8Error):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"machine halted after {cause}")
