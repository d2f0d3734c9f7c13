import logging

import numpy
import pygame

from .display import SCREEN_HEIGHT, SCREEN_WIDTH
from .timers import TIMER_HZ

logger = logging.getLogger(__name__)

SCREEN_MULTIPLIER = 10
INSTRUCTIONS_PER_SECOND = 700
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SAMPLE_RATE = 44100
TONE_HZ = 440
TONE_VOLUME = 4096

KEY_CODES = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC, # 1 2 3 4
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD, # Q W E R
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE, # A S D F
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF, # Z X C V
}


def square_wave(frequency=TONE_HZ, sample_rate=SAMPLE_RATE, channels=1):
    """One second of a square wave as signed 16 bit samples."""
    t = numpy.arange(sample_rate) / sample_rate
    wave = numpy.where(numpy.sin(2 * numpy.pi * frequency * t) >= 0, TONE_VOLUME, -TONE_VOLUME)
    wave = wave.astype(numpy.int16)
    if channels > 1:
        wave = numpy.repeat(wave[:, None], channels, axis=1)
    return numpy.ascontiguousarray(wave)


def frame_colours(pixels):
    """Turn a (height, width) bool buffer into the (width, height, 3) array surfarray expects."""
    return numpy.where(pixels.T[..., None], WHITE, BLACK).astype(numpy.uint8)


class Frontend:
    """
    pygame host for a CHIP8 machine: window, keyboard and tone.

    Each 60Hz frame polls input, runs speed / 60 instructions, ticks the
    timers once and redraws, so the timers keep real time whatever the
    instruction rate is.
    """

    def __init__(self, machine, scale=SCREEN_MULTIPLIER, speed=INSTRUCTIONS_PER_SECOND, sound=True):
        self.machine = machine
        self.scale = scale
        self.steps_per_frame = max(1, speed // TIMER_HZ)
        self.sound_enabled = sound
        self.tone = None
        self.playing = False
        self.running = False

    #launch pygame window and scale size up
    def launch_window(self):
        pygame.init()
        pygame.display.set_caption("CHIP-8")
        self.window = pygame.display.set_mode((SCREEN_WIDTH * self.scale, SCREEN_HEIGHT * self.scale))
        self.screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        if self.sound_enabled:
            self.load_tone()
        self.running = True

    def load_tone(self):
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning(f"Could not open audio device, continuing without sound: {exc}")
            return
        _, _, channels = pygame.mixer.get_init()
        self.tone = pygame.sndarray.make_sound(square_wave(channels=channels))

    #stops the loop if window has been closed, forwards keypad keys to the machine
    def check_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in KEY_CODES:
                    self.machine.set_key(KEY_CODES[event.key], event.type == pygame.KEYDOWN)

    def update_sound(self):
        if self.tone is None:
            return
        if self.machine.is_sound_active():
            if not self.playing:
                self.tone.play(loops=-1)
                self.playing = True
        elif self.playing:
            self.tone.stop()
            self.playing = False

    def render(self):
        pygame.surfarray.blit_array(self.screen, frame_colours(self.machine.get_display()))
        self.window.blit(pygame.transform.scale(self.screen, self.window.get_rect().size), (0, 0))
        pygame.display.update()

    def run(self):
        self.launch_window()
        try:
            while self.running:
                self.check_events()
                self.machine.run(self.steps_per_frame)
                self.machine.tick_timers()
                self.update_sound()
                self.render()
                self.clock.tick(TIMER_HZ)
        finally:
            self.close_window()

    def close_window(self):
        pygame.quit()
