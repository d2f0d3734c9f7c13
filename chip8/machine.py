import logging
import random
from collections import namedtuple

import numpy

from .display import Display
from .errors import (FatalError, MachineHaltedError, StackOverflowError,
                     StackUnderflowError, UnsupportedInstructionError)
from .instructions import (Add, AddByte, AddIndex, And, Call, Cls, Draw, Jump, JumpOffset,
                           LoadByte, LoadDelay, LoadFont, LoadIndex, LoadRegisters, Move, Or,
                           Rand, Ret, SetDelay, SetSound, ShiftLeft, ShiftRight, SkipEqByte,
                           SkipEqReg, SkipKey, SkipNeByte, SkipNeReg, SkipNotKey, StoreBcd,
                           StoreRegisters, Sub, SubN, Sys, WaitKey, Xor, decode, disassemble)
from .keypad import Keypad
from .memory import ADDRESS_MASK, PROGRAM_START, Memory, glyph_address
from .quirks import MODERN
from .timers import Timers

logger = logging.getLogger(__name__)

REGISTER_COUNT = 16
STACK_SIZE = 16
VF = 0xF                        #flag register

StepResult = namedtuple("StepResult", "advanced instruction")


class CHIP8:
    """
    A single CHIP-8 machine: memory, registers, stack, timers, keypad and
    display, plus the fetch-decode-execute loop that mutates them.

    The host drives it: set_key() before a batch of step() calls,
    tick_timers() at 60Hz and get_display() whenever it wants to render.
    Nothing here sleeps or blocks.
    """

    def __init__(self, quirks=MODERN, rng=None):
        self.quirks = quirks
        self.rng = rng if rng is not None else random.Random()
        self.memory = Memory()
        self.display = Display()
        self.timers = Timers()
        self.keypad = Keypad()
        self.reset()

    #initialize memory, stack, counters and registers
    def reset(self):
        self.memory.clear()
        self.display.clear()
        self.timers.reset()
        self.keypad.reset()
        self.regs = numpy.zeros(REGISTER_COUNT, dtype=numpy.uint8)
        self.I = 0
        self.PC = PROGRAM_START
        self.stack = []
        self.waiting_for_key = False
        self.halted = None

    def load_program(self, program):
        self.memory.load_program(program)
        self.PC = PROGRAM_START
        logger.debug(f"Loaded {len(program)} byte program at {PROGRAM_START:03X}.")

    @property
    def SP(self):
        return len(self.stack)

    def V(self, register):
        return int(self.regs[register])

    #take two bytes from memory and combine them into one instruction
    def fetch_instruction(self):
        return self.memory.read_word(self.PC)

    def step(self):
        """
        Execute the instruction at PC.

        Returns StepResult(advanced, instruction); advanced is False only
        while an Fx0A is still waiting for a key. A FatalError halts the
        machine and is re-raised, after which every step() raises
        MachineHaltedError until reset().
        """
        if self.halted is not None:
            raise MachineHaltedError(self.halted)

        address = self.PC
        opcode = self.fetch_instruction()
        try:
            instruction = decode(opcode)
            if not self.waiting_for_key:
                logger.debug(f"{address:03X}: {opcode:04X}  {disassemble(instruction)}")
            advanced = self.execute(instruction)
        except FatalError as exc:
            exc.locate(opcode, address)
            self.halted = exc
            logger.error(f"Machine halted: {exc}")
            raise
        return StepResult(advanced, instruction)

    def run(self, steps):
        """Run up to steps instructions, returning how many actually advanced."""
        advanced = 0
        for _ in range(steps):
            if self.step().advanced:
                advanced += 1
        return advanced

    def tick_timers(self):
        self.timers.tick()

    def set_key(self, key, pressed):
        self.keypad.set_key(key, pressed)

    def get_display(self):
        return self.display.pixels

    def is_sound_active(self):
        return self.timers.sound_active

    def get_delay_timer(self):
        return self.timers.delay

    def execute(self, instr):
        """
        Apply one decoded instruction. Every check that can fail runs before
        the first write, so a failing instruction leaves the machine as it was.
        VF is always written last, from values read before the result register.
        """
        regs = self.regs
        next_pc = (self.PC + 2) & ADDRESS_MASK
        skip_pc = (self.PC + 4) & ADDRESS_MASK

        match instr:
            case Sys(nnn):
                raise UnsupportedInstructionError(f"machine code routine at {nnn:03X}")
            case Cls():
                self.display.clear()
            case Ret():
                if not self.stack:
                    raise StackUnderflowError("return with empty stack")
                next_pc = self.stack.pop()
            case Jump(nnn):
                next_pc = nnn
            case Call(nnn):
                if len(self.stack) >= STACK_SIZE:
                    raise StackOverflowError(f"call depth exceeds {STACK_SIZE}")
                self.stack.append(next_pc)
                next_pc = nnn
            case SkipEqByte(x, kk):
                if self.V(x) == kk:
                    next_pc = skip_pc
            case SkipNeByte(x, kk):
                if self.V(x) != kk:
                    next_pc = skip_pc
            case SkipEqReg(x, y):
                if self.V(x) == self.V(y):
                    next_pc = skip_pc
            case LoadByte(x, kk):
                regs[x] = kk
            case AddByte(x, kk):
                regs[x] = (self.V(x) + kk) & 0xFF
            case Move(x, y):
                regs[x] = regs[y]
            case Or(x, y):
                self._logic(x, self.V(x) | self.V(y))
            case And(x, y):
                self._logic(x, self.V(x) & self.V(y))
            case Xor(x, y):
                self._logic(x, self.V(x) ^ self.V(y))
            case Add(x, y):
                total = self.V(x) + self.V(y)
                self._set_with_flag(x, total & 0xFF, 1 if total > 0xFF else 0)
            case Sub(x, y):
                vx, vy = self.V(x), self.V(y)
                self._set_with_flag(x, (vx - vy) & 0xFF, 1 if vx >= vy else 0)
            case SubN(x, y):
                vx, vy = self.V(x), self.V(y)
                self._set_with_flag(x, (vy - vx) & 0xFF, 1 if vy >= vx else 0)
            case ShiftRight(x, y):
                value = self.V(y) if self.quirks.shift_uses_vy else self.V(x)
                self._set_with_flag(x, value >> 1, value & 0x01)
            case ShiftLeft(x, y):
                value = self.V(y) if self.quirks.shift_uses_vy else self.V(x)
                self._set_with_flag(x, (value << 1) & 0xFF, (value >> 7) & 0x01)
            case SkipNeReg(x, y):
                if self.V(x) != self.V(y):
                    next_pc = skip_pc
            case LoadIndex(nnn):
                self.I = nnn
            case JumpOffset(x, nnn):
                offset = self.V(x) if self.quirks.jump_uses_vx else self.V(0)
                next_pc = (nnn + offset) & ADDRESS_MASK
            case Rand(x, kk):
                regs[x] = self.rng.randint(0, 0xFF) & kk
            case Draw(x, y, n):
                sprite = self.memory.read_block(self.I, n)
                collision = self.display.draw_sprite(self.V(x), self.V(y), sprite,
                                                     wrap=self.quirks.wrap_sprites)
                regs[VF] = 1 if collision else 0
            case SkipKey(x):
                if self.keypad.is_pressed(self.V(x)):
                    next_pc = skip_pc
            case SkipNotKey(x):
                if not self.keypad.is_pressed(self.V(x)):
                    next_pc = skip_pc
            case LoadDelay(x):
                regs[x] = self.timers.delay
            case WaitKey(x):
                if not self.waiting_for_key:
                    logger.debug(f"Waiting for a key press to store in V{x:X}.")
                    self.waiting_for_key = True
                    self.keypad.clear_press()
                key = self.keypad.take_press()
                if key is None:
                    return False
                logger.debug(f"Storing the key {key:X} in V{x:X}, resuming execution.")
                self.waiting_for_key = False
                regs[x] = key
            case SetDelay(x):
                self.timers.delay = self.V(x)
            case SetSound(x):
                self.timers.sound = self.V(x)
            case AddIndex(x):
                total = self.I + self.V(x)
                self.I = total & ADDRESS_MASK
                if self.quirks.index_overflow_flag:
                    regs[VF] = 1 if total > ADDRESS_MASK else 0
            case LoadFont(x):
                self.I = glyph_address(self.V(x))
            case StoreBcd(x):
                value = self.V(x)
                self.memory.write_block(self.I, [value // 100, value // 10 % 10, value % 10])
            case StoreRegisters(x):
                self.memory.write_block(self.I, [self.V(r) for r in range(x + 1)])
                if self.quirks.load_store_increments_index:
                    self.I = (self.I + x + 1) & ADDRESS_MASK
            case LoadRegisters(x):
                regs[:x + 1] = self.memory.read_block(self.I, x + 1)
                if self.quirks.load_store_increments_index:
                    self.I = (self.I + x + 1) & ADDRESS_MASK

        self.PC = next_pc
        return True

    def _set_with_flag(self, x, value, flag):
        self.regs[x] = value
        self.regs[VF] = flag

    def _logic(self, x, value):
        self.regs[x] = value
        if self.quirks.logic_resets_vf:
            self.regs[VF] = 0
