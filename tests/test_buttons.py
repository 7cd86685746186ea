from colormed.buttons import DEBOUNCE_MS, Button


class FakePin:
    def __init__(self, levels, default=True):
        self.levels = list(levels)
        self.default = default
        self.reads = []

    def __call__(self, pin):
        self.reads.append(pin)
        if self.levels:
            return self.levels.pop(0)
        return self.default


def make_button(levels, pin=5):
    reader = FakePin(levels)
    sleeps = []
    return Button(pin, reader, sleeps.append), reader, sleeps


def test_is_pressed_follows_low_level():
    button, _, _ = make_button([False, True])
    assert button.is_pressed() is True
    assert button.is_pressed() is False


def test_reads_its_own_pin():
    button, reader, _ = make_button([True], pin=22)
    button.is_pressed()
    assert reader.reads == [22]


def test_debounce_not_pressed_returns_false_without_waiting():
    button, _, sleeps = make_button([True])
    assert button.debounce() is False
    assert sleeps == []


def test_debounce_bounce_is_rejected():
    button, _, sleeps = make_button([False, True])
    assert button.debounce() is False
    assert sleeps == [DEBOUNCE_MS]


def test_debounce_full_press_waits_for_release():
    button, reader, sleeps = make_button([False, False, False, False, True])
    assert button.debounce() is True
    assert sleeps == [DEBOUNCE_MS]
    assert reader.levels == []


def test_debounce_after_release_is_false_again():
    button, _, _ = make_button([False, False, True])
    assert button.debounce() is True
    assert button.debounce() is False