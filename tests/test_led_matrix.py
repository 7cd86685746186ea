import pytest

from colormed.led_matrix import NUM_PIXELS, Color, LedMatrix, frame_for, matrix_rgb


def test_matrix_rgb_black_is_zero():
    assert matrix_rgb(0.0, 0.0, 0.0) == 0


def test_matrix_rgb_channel_positions():
    assert matrix_rgb(1.0, 0.0, 0.0) == 0xFF << 8
    assert matrix_rgb(0.0, 1.0, 0.0) == 0xFF << 16
    assert matrix_rgb(0.0, 0.0, 1.0) == 0xFF << 24


def test_matrix_rgb_low_byte_always_clear():
    for b, r, g in [(0.3, 0.7, 0.9), (1.0, 1.0, 1.0), (0.2, 0.6, 0.2)]:
        assert matrix_rgb(b, r, g) & 0xFF == 0


def test_matrix_rgb_fits_32_bits():
    assert matrix_rgb(1.0, 1.0, 1.0) <= 0xFFFFFFFF


@pytest.mark.parametrize("bad", [-0.1, 1.5])
def test_matrix_rgb_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        matrix_rgb(bad, 0.0, 0.0)


def test_frame_has_one_word_per_pixel():
    frame = frame_for(Color.RED)
    assert len(frame) == NUM_PIXELS
    assert len(set(frame)) == 1


def test_frame_colours_use_expected_channels():
    assert frame_for(Color.GREEN)[0] == matrix_rgb(0.0, 0.0, 0.2)
    assert frame_for(Color.RED)[0] == matrix_rgb(0.0, 0.2, 0.0)
    assert frame_for(Color.BLUE)[0] == matrix_rgb(0.2, 0.0, 0.0)
    assert frame_for(Color.YELLOW)[0] == matrix_rgb(0.0, 0.6, 0.2)
    assert frame_for(Color.PURPLE)[0] == matrix_rgb(0.2, 0.2, 0.0)


def test_off_frame_is_dark():
    assert frame_for(Color.OFF) == (0,) * NUM_PIXELS


def test_frame_accepts_plain_int():
    assert frame_for(2) == frame_for(Color.BLUE)


def test_frame_rejects_unknown_colour():
    with pytest.raises(ValueError):
        frame_for(6)


def test_colours_are_distinct():
    words = {frame_for(color)[0] for color in Color}
    assert len(words) == len(Color)


def test_led_matrix_draw_sends_whole_frame():
    sent = []
    LedMatrix(sent.append).draw(Color.YELLOW)
    assert sent == list(frame_for(Color.YELLOW))


def test_led_matrix_draw_unknown_sends_nothing():
    sent = []
    with pytest.raises(ValueError):
        LedMatrix(sent.append).draw(9)
    assert sent == []