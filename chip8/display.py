import numpy

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SPRITE_WIDTH = 8


class Display:
    """64x32 monochrome frame buffer, indexed as pixels[y, x]."""

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.buffer = numpy.zeros((height, width), dtype=bool)

    def clear(self):
        self.buffer.fill(False)

    @property
    def pixels(self):
        return self.buffer.copy()

    def draw_sprite(self, x, y, rows, wrap=True):
        """
        XOR an 8 pixel wide sprite onto the buffer and return True if any
        pixel that was set got erased.

        The starting coordinates always wrap around the screen. With wrap set,
        pixels running off an edge reappear on the other side; otherwise they
        are clipped.
        """
        x %= self.width
        y %= self.height
        columns = x + numpy.arange(SPRITE_WIDTH)
        if wrap:
            columns %= self.width
        else:
            columns = columns[columns < self.width]

        collision = False
        for offset, byte in enumerate(rows):
            row = y + offset
            if row >= self.height:
                if not wrap:
                    break
                row %= self.height
            bits = numpy.unpackbits(numpy.array([byte], dtype=numpy.uint8)).astype(bool)[:len(columns)]
            collision |= bool(numpy.any(self.buffer[row, columns] & bits))
            self.buffer[row, columns] ^= bits
        return collision
