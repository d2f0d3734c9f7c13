import logging

logger = logging.getLogger(__name__)

TIMER_HZ = 60


class Timers:
    """Delay and sound timers, both counting down to zero at TIMER_HZ."""

    def __init__(self):
        self.delay = 0
        self.sound = 0

    def reset(self):
        self.delay = 0
        self.sound = 0

    def tick(self):
        if self.delay > 0:
            self.delay -= 1
            if self.delay == 0:
                logger.debug("Delay timer expired.")
        if self.sound > 0:
            self.sound -= 1
            if self.sound == 0:
                logger.debug("Sound timer expired, stopping tone.")

    @property
    def sound_active(self):
        return self.sound > 0
