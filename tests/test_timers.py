import pytest

from chip8 import Keypad, Timers


def test_tick_stops_at_zero():
    timers = Timers()
    timers.delay = 3
    for _ in range(5):
        timers.tick()
    assert timers.delay == 0


def test_timers_are_independent():
    timers = Timers()
    timers.delay = 1
    timers.sound = 2
    timers.tick()
    assert timers.delay == 0
    assert timers.sound_active
    timers.tick()
    assert not timers.sound_active


def test_keypad_records_press_transition():
    keypad = Keypad()
    keypad.set_key(0xA, True)
    keypad.set_key(0xA, True)
    assert keypad.is_pressed(0xA)
    assert keypad.take_press() == 0xA
    assert keypad.take_press() is None


def test_keypad_release_is_not_a_press():
    keypad = Keypad()
    keypad.set_key(2, False)
    assert keypad.take_press() is None


@pytest.mark.parametrize("key", [-1, 16, 0x20])
def test_keypad_rejects_unknown_keys(key):
    with pytest.raises(ValueError):
        Keypad().set_key(key, True)
