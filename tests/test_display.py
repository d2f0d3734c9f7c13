from chip8 import Display


def test_starts_blank():
    assert not Display().pixels.any()


def test_draw_sets_pixels_from_msb():
    display = Display()
    assert not display.draw_sprite(0, 0, [0b10100000])
    row = display.pixels[0]
    assert row[0] and not row[1] and row[2]


def test_redraw_erases_and_reports_collision():
    display = Display()
    display.draw_sprite(10, 5, [0xFF, 0x81])
    assert display.draw_sprite(10, 5, [0xFF, 0x81])
    assert not display.pixels.any()


def test_overlap_without_erasing_is_not_a_collision():
    display = Display()
    display.draw_sprite(0, 0, [0xF0])
    assert not display.draw_sprite(0, 0, [0x0F])
    assert display.pixels[0, :8].all()


def test_start_coordinates_wrap():
    display = Display()
    display.draw_sprite(64 + 2, 32 + 1, [0x80])
    assert display.pixels[1, 2]


def test_rows_wrap_to_top():
    display = Display()
    display.draw_sprite(0, 31, [0x80, 0x80])
    assert display.pixels[31, 0]
    assert display.pixels[0, 0]


def test_rows_clip_at_bottom_without_wrap():
    display = Display()
    display.draw_sprite(0, 31, [0x80, 0x80], wrap=False)
    assert display.pixels[31, 0]
    assert not display.pixels[0, 0]


def test_columns_wrap_per_pixel():
    display = Display()
    display.draw_sprite(60, 0, [0xFF])
    assert display.pixels[0].sum() == 8
    assert display.pixels[0, 63] and display.pixels[0, 0] and display.pixels[0, 3]


def test_clear():
    display = Display()
    display.draw_sprite(0, 0, [0xFF])
    display.clear()
    assert not display.pixels.any()
