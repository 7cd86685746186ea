import pytest

from colormed.font import glyph
from colormed.ssd1306 import HEIGHT, WIDTH, SSD1306, Command, setup_ssd1306

ADDRESS = 0x3C


class FakeBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return FakeBus()


@pytest.fixture
def display(bus):
    return SSD1306(bus, ADDRESS)


def lit(display):
    return {
        (x, y)
        for x in range(display.width)
        for y in range(display.height)
        if display.get_pixel(x, y)
    }


def glyph_pixels(char, x, y):
    return {
        (x + i, y + j)
        for i, column in enumerate(glyph(char))
        for j in range(8)
        if column & (1 << j)
    }


def test_command_values():
    local_bus = FakeBus()
    panel = SSD1306(local_bus, ADDRESS)
    panel.command(Command.SET_CONTRAST)
    panel.command(Command.SET_CHARGE_PUMP)
    assert local_bus.writes == [
        (ADDRESS, bytes([0x80, 0x81])),
        (ADDRESS, bytes([0x80, 0x8D])),
    ]
    assert panel.is_empty()


def test_new_buffer_layout(display):
    buf = display.buffer
    assert len(buf) == WIDTH * HEIGHT // 8 + 1
    assert buf[0] == 0x40
    assert display.is_empty()


def test_invalid_size_rejected(bus):
    with pytest.raises(ValueError):
        SSD1306(bus, ADDRESS, 128, 60)


def test_command_wire_format():
    local_bus = FakeBus()
    panel = SSD1306(local_bus, ADDRESS)
    panel.command(Command.SET_DISP | 0x01)
    assert local_bus.writes == [(ADDRESS, bytes([0x80, 0xAF]))]
    assert panel.is_empty()


def test_send_data_sequence(display, bus):
    display.pixel(3, 5, True)
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:6]]
    assert commands == [
        Command.SET_COL_ADDR, 0, display.width - 1,
        Command.SET_PAGE_ADDR, 0, display.pages - 1,
    ]
    assert bus.writes[6] == (ADDRESS, display.buffer)
    assert len(bus.writes) == 7


def test_config_sequence():
    local_bus = FakeBus()
    panel = SSD1306(local_bus, ADDRESS)
    panel.config()
    commands = [data[1] for _, data in local_bus.writes]
    assert commands[0] == Command.SET_DISP
    assert commands[-1] == Command.SET_DISP | 0x01
    assert commands[commands.index(Command.SET_MUX_RATIO) + 1] == HEIGHT - 1
    assert commands[commands.index(Command.SET_CONTRAST) + 1] == 0xFF
    assert all(address == ADDRESS and data[0] == 0x80 for address, data in local_bus.writes)
    assert panel.is_empty()


def test_pixel_round_trip(display):
    display.pixel(10, 20, True)
    assert display.get_pixel(10, 20)
    assert lit(display) == {(10, 20)}
    display.pixel(10, 20, False)
    assert not display.get_pixel(10, 20)
    assert display.is_empty()


def test_pixel_off_panel_ignored(display):
    display.pixel(200, 5, True)
    display.pixel(5, 100, True)
    assert display.is_empty()
    assert display.get_pixel(200, 5) is False


def test_fill(display):
    display.fill(True)
    assert not display.is_empty()
    assert len(lit(display)) == display.width * display.height
    assert display.buffer[0] == 0x40
    display.fill(False)
    assert display.is_empty()


def test_rect_outline(display):
    display.rect(2, 3, 10, 6, True, False)
    pixels = lit(display)
    assert {(3, 2), (12, 2), (3, 7), (12, 7)} <= pixels
    assert (5, 4) not in pixels
    assert all(x in (3, 12) or y in (2, 7) for x, y in pixels)
    assert len(pixels) == 2 * 10 + 2 * 6 - 4


def test_rect_filled(display):
    display.rect(2, 3, 10, 6, True, True)
    assert lit(display) == {(x, y) for x in range(3, 13) for y in range(2, 8)}


def test_diagonal_line(display):
    display.line(0, 0, 7, 7, True)
    assert lit(display) == {(i, i) for i in range(8)}


def test_line_reverse_matches_endpoints(display):
    display.line(20, 10, 4, 2, True)
    pixels = lit(display)
    assert (20, 10) in pixels and (4, 2) in pixels
    assert len(pixels) == 17


def test_hline_and_vline(display):
    display.hline(5, 9, 3, True)
    display.vline(30, 1, 4, True)
    assert lit(display) == {(x, 3) for x in range(5, 10)} | {(30, y) for y in range(1, 5)}


def test_draw_char_matches_glyph(display):
    display.draw_char("A", 16, 8)
    assert lit(display) == glyph_pixels("A", 16, 8)


def test_draw_char_unsupported_is_skipped(display):
    display.draw_char("@", 0, 0)
    assert display.is_empty()


def test_draw_string_wraps(display):
    display.draw_string("AB", 112, 0)
    assert lit(display) == glyph_pixels("A", 112, 0) | glyph_pixels("B", 0, 8)


def test_draw_string_stops_at_bottom(display):
    display.draw_string("1" * 40, 0, 48)
    pixels = lit(display)
    assert pixels
    assert all(y < 56 for _, y in pixels)


def test_draw_filled_square(display, bus):
    display.draw_filled_square(40, 16)
    assert lit(display) == {(x, y) for x in range(40, 48) for y in range(16, 24)}
    assert bus.writes[-1] == (ADDRESS, display.buffer)


def test_to_text(bus):
    small = SSD1306(bus, ADDRESS, 4, 8)
    small.pixel(1, 2, True)
    rows = small.to_text().split("\n")
    assert len(rows) == 8
    assert all(len(row) == 4 for row in rows)
    assert rows[2][1] == "#"
    assert small.to_text().count("#") == 1


def test_setup_ssd1306(bus):
    display = setup_ssd1306(bus, ADDRESS)
    assert display.width == WIDTH and display.height == HEIGHT
    assert display.is_empty()
    assert bus.writes[0] == (ADDRESS, bytes([0x80, Command.SET_DISP]))
    assert bus.writes[-1] == (ADDRESS, display.buffer)