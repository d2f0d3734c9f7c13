import numpy

from .errors import ProgramTooLargeError, ProtectedMemoryError

#constants
MEMORY_SIZE = 4096
ADDRESS_MASK = 0xFFF
FONT_START = 0x050
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START
GLYPH_SIZE = 5

FONT = [
    0xF0, 0x90, 0x90, 0x90, 0xF0, # 0
    0x20, 0x60, 0x20, 0x20, 0x70, # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0, # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0, # 3
    0x90, 0x90, 0xF0, 0x10, 0x10, # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0, # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0, # 6
    0xF0, 0x10, 0x20, 0x40, 0x40, # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0, # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0, # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90, # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0, # B
    0xF0, 0x80, 0x80, 0x80, 0xF0, # C
    0xE0, 0x90, 0x90, 0x90, 0xE0, # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0, # E
    0xF0, 0x80, 0xF0, 0x80, 0x80  # F
]


def glyph_address(digit):
    """Address of the font sprite for the low nibble of digit."""
    return FONT_START + (digit & 0x0F) * GLYPH_SIZE


class Memory:
    """
    4KiB of byte addressable memory.

    Addresses are truncated to 12 bits, so reads and writes past 0xFFF wrap
    back to 0x000. Everything below PROGRAM_START belongs to the interpreter
    and can only be written by load_font().
    """

    def __init__(self):
        self.data = numpy.zeros(MEMORY_SIZE, dtype=numpy.uint8)
        self.load_font()

    def clear(self):
        self.data.fill(0)
        self.load_font()

    #load font into memory (0x050 - 0x09F)
    def load_font(self):
        self.data[FONT_START:FONT_START + len(FONT)] = FONT

    #copy program bytes verbatim to 0x200, nothing is touched if it doesn't fit
    def load_program(self, program):
        program = bytes(program)
        if len(program) > MAX_PROGRAM_SIZE:
            raise ProgramTooLargeError(len(program), MAX_PROGRAM_SIZE)
        self.data[PROGRAM_START:] = 0
        self.data[PROGRAM_START:PROGRAM_START + len(program)] = numpy.frombuffer(program, dtype=numpy.uint8)

    def read(self, address):
        return int(self.data[address & ADDRESS_MASK])

    #take two bytes from memory and combine them into one big-endian word
    def read_word(self, address):
        return (self.read(address) << 8) | self.read(address + 1)

    def read_block(self, address, length):
        addresses = (numpy.arange(length) + address) & ADDRESS_MASK
        return self.data[addresses].tolist()

    def write(self, address, value):
        self.write_block(address, [value])

    def write_block(self, address, values):
        addresses = (numpy.arange(len(values)) + address) & ADDRESS_MASK
        reserved = addresses[addresses < PROGRAM_START]
        if reserved.size:
            raise ProtectedMemoryError(f"address {int(reserved[0]):03X}")
        self.data[addresses] = [value & 0xFF for value in values]
