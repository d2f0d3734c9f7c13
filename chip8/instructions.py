"""
Opcode decoding.

decode() turns a 16 bit opcode into one of the instruction tuples below
without touching any machine state; the executor then matches on the tuple
type. Opcode patterns use x/y for register nibbles, n for a nibble, kk for a
byte and nnn for an address.
"""
from collections import namedtuple

from .errors import DecodeError

Sys = namedtuple("Sys", "nnn")                       # 0nnn
Cls = namedtuple("Cls", "")                          # 00E0
Ret = namedtuple("Ret", "")                          # 00EE
Jump = namedtuple("Jump", "nnn")                     # 1nnn
Call = namedtuple("Call", "nnn")                     # 2nnn
SkipEqByte = namedtuple("SkipEqByte", "x kk")        # 3xkk
SkipNeByte = namedtuple("SkipNeByte", "x kk")        # 4xkk
SkipEqReg = namedtuple("SkipEqReg", "x y")           # 5xy0
LoadByte = namedtuple("LoadByte", "x kk")            # 6xkk
AddByte = namedtuple("AddByte", "x kk")              # 7xkk
Move = namedtuple("Move", "x y")                     # 8xy0
Or = namedtuple("Or", "x y")                         # 8xy1
And = namedtuple("And", "x y")                       # 8xy2
Xor = namedtuple("Xor", "x y")                       # 8xy3
Add = namedtuple("Add", "x y")                       # 8xy4
Sub = namedtuple("Sub", "x y")                       # 8xy5
ShiftRight = namedtuple("ShiftRight", "x y")         # 8xy6
SubN = namedtuple("SubN", "x y")                     # 8xy7
ShiftLeft = namedtuple("ShiftLeft", "x y")           # 8xyE
SkipNeReg = namedtuple("SkipNeReg", "x y")           # 9xy0
LoadIndex = namedtuple("LoadIndex", "nnn")           # Annn
JumpOffset = namedtuple("JumpOffset", "x nnn")       # Bnnn
Rand = namedtuple("Rand", "x kk")                    # Cxkk
Draw = namedtuple("Draw", "x y n")                   # Dxyn
SkipKey = namedtuple("SkipKey", "x")                 # Ex9E
SkipNotKey = namedtuple("SkipNotKey", "x")           # ExA1
LoadDelay = namedtuple("LoadDelay", "x")             # Fx07
WaitKey = namedtuple("WaitKey", "x")                 # Fx0A
SetDelay = namedtuple("SetDelay", "x")               # Fx15
SetSound = namedtuple("SetSound", "x")               # Fx18
AddIndex = namedtuple("AddIndex", "x")               # Fx1E
LoadFont = namedtuple("LoadFont", "x")               # Fx29
StoreBcd = namedtuple("StoreBcd", "x")               # Fx33
StoreRegisters = namedtuple("StoreRegisters", "x")   # Fx55
LoadRegisters = namedtuple("LoadRegisters", "x")     # Fx65

#8xy_ family, selected by the last nibble
ARITHMETIC = {
    0x0: Move,
    0x1: Or,
    0x2: And,
    0x3: Xor,
    0x4: Add,
    0x5: Sub,
    0x6: ShiftRight,
    0x7: SubN,
    0xE: ShiftLeft,
}

#Ex__ family, selected by the low byte
KEY_SKIPS = {
    0x9E: SkipKey,
    0xA1: SkipNotKey,
}

#Fx__ family, selected by the low byte
MISC = {
    0x07: LoadDelay,
    0x0A: WaitKey,
    0x15: SetDelay,
    0x18: SetSound,
    0x1E: AddIndex,
    0x29: LoadFont,
    0x33: StoreBcd,
    0x55: StoreRegisters,
    0x65: LoadRegisters,
}

MNEMONICS = {
    Sys: "SYS {nnn:03X}",
    Cls: "CLS",
    Ret: "RET",
    Jump: "JP {nnn:03X}",
    Call: "CALL {nnn:03X}",
    SkipEqByte: "SE V{x:X}, {kk:02X}",
    SkipNeByte: "SNE V{x:X}, {kk:02X}",
    SkipEqReg: "SE V{x:X}, V{y:X}",
    LoadByte: "LD V{x:X}, {kk:02X}",
    AddByte: "ADD V{x:X}, {kk:02X}",
    Move: "LD V{x:X}, V{y:X}",
    Or: "OR V{x:X}, V{y:X}",
    And: "AND V{x:X}, V{y:X}",
    Xor: "XOR V{x:X}, V{y:X}",
    Add: "ADD V{x:X}, V{y:X}",
    Sub: "SUB V{x:X}, V{y:X}",
    ShiftRight: "SHR V{x:X}, V{y:X}",
    SubN: "SUBN V{x:X}, V{y:X}",
    ShiftLeft: "SHL V{x:X}, V{y:X}",
    SkipNeReg: "SNE V{x:X}, V{y:X}",
    LoadIndex: "LD I, {nnn:03X}",
    JumpOffset: "JP V0, {nnn:03X}",
    Rand: "RND V{x:X}, {kk:02X}",
    Draw: "DRW V{x:X}, V{y:X}, {n}",
    SkipKey: "SKP V{x:X}",
    SkipNotKey: "SKNP V{x:X}",
    LoadDelay: "LD V{x:X}, DT",
    WaitKey: "LD V{x:X}, K",
    SetDelay: "LD DT, V{x:X}",
    SetSound: "LD ST, V{x:X}",
    AddIndex: "ADD I, V{x:X}",
    LoadFont: "LD F, V{x:X}",
    StoreBcd: "LD B, V{x:X}",
    StoreRegisters: "LD [I], V{x:X}",
    LoadRegisters: "LD V{x:X}, [I]",
}


def decode(opcode):
    """Decode a 16 bit opcode, raising DecodeError if it isn't an instruction."""
    #Splitting instruction for easier access to certain parts/digits
    family = opcode >> 12           #First nibble
    x = (opcode >> 8) & 0x0F        #Second nibble
    y = (opcode >> 4) & 0x0F        #Third nibble
    n = opcode & 0x000F             #Fourth nibble
    kk = opcode & 0x00FF            #Second byte
    nnn = opcode & 0x0FFF           #Second, third and fourth nibbles

    match family:
        case 0x0:
            if opcode == 0x00E0:
                return Cls()
            if opcode == 0x00EE:
                return Ret()
            return Sys(nnn)
        case 0x1:
            return Jump(nnn)
        case 0x2:
            return Call(nnn)
        case 0x3:
            return SkipEqByte(x, kk)
        case 0x4:
            return SkipNeByte(x, kk)
        case 0x5 if n == 0x0:
            return SkipEqReg(x, y)
        case 0x6:
            return LoadByte(x, kk)
        case 0x7:
            return AddByte(x, kk)
        case 0x8 if n in ARITHMETIC:
            return ARITHMETIC[n](x, y)
        case 0x9 if n == 0x0:
            return SkipNeReg(x, y)
        case 0xA:
            return LoadIndex(nnn)
        case 0xB:
            return JumpOffset(x, nnn)
        case 0xC:
            return Rand(x, kk)
        case 0xD:
            return Draw(x, y, n)
        case 0xE if kk in KEY_SKIPS:
            return KEY_SKIPS[kk](x)
        case 0xF if kk in MISC:
            return MISC[kk](x)
    raise DecodeError(opcode=opcode)


def disassemble(instruction):
    """Conventional mnemonic for a decoded instruction, e.g. 'ADD V1, V2'."""
    return MNEMONICS[type(instruction)].format(**instruction._asdict())
