import random

import pytest

from chip8 import CHIP8


@pytest.fixture
def machine():
    return CHIP8(rng=random.Random(0))


@pytest.fixture
def load(machine):
    """Load a program given as 16 bit words and return the machine."""
    def load(*words, quirks=None):
        if quirks is not None:
            machine.quirks = quirks
        machine.load_program(b"".join(word.to_bytes(2, "big") for word in words))
        return machine
    return load
