import logging

logger = logging.getLogger(__name__)

KEY_COUNT = 16


class Keypad:
    """
    State of the 16 key hex keypad, written by the host and read by the
    interpreter.

    Besides the current state of each key it remembers the last key that went
    from released to pressed, which is what Fx0A waits for.
    """

    def __init__(self):
        self.keys = [False] * KEY_COUNT
        self.last_press = None

    def reset(self):
        self.keys = [False] * KEY_COUNT
        self.last_press = None

    def set_key(self, key, pressed):
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"no such key: {key!r}")
        pressed = bool(pressed)
        if pressed and not self.keys[key]:
            self.last_press = key
        if pressed != self.keys[key]:
            logger.debug(f"Key state changed. Key: {key:X}, Pressed: {pressed}.")
        self.keys[key] = pressed

    def is_pressed(self, key):
        return self.keys[key & 0x0F]

    def take_press(self):
        key, self.last_press = self.last_press, None
        return key

    def clear_press(self):
        self.last_press = None
