# colormed

A colour-coded medication alarm clock. You set alarms by hour and minute
and give each one a colour. When an alarm comes due, the clock shows
"ALARME ATIVO!" on a 128x64 monochrome display. It also lights a 5x5 LED
matrix in that alarm's colour and sounds a buzzer. The buzzer stops when the
cancel button is pressed or after sixty seconds.

The book holds up to ten alarms. Adding a second alarm at the same hour and
minute fails, and so does adding one when the book is full.

Every piece of hardware is reached through objects and callables that you pass
in:

- the display needs a bus with `write(address, data)`;
- the buttons need a pin reader;
- the buzzer needs a pin writer, sleep functions, a millisecond clock and a
  cancel check;
- the LED matrix needs a sink that takes pixel words;
- the application needs a clock with `now()` and `set(value)`.

Because of this, the same code can run against real devices or entirely in
memory.

## Installation

```
pip install .
```

You need Python 3.10 or later. The package has no runtime dependencies.

## Running

```
colormed --steps 5 --alarm 08:30:0 --alarm 20:00:3
```

The `colormed` command runs the application on simulated peripherals:

- display writes are discarded;
- the buttons always read as released;
- the buzzer and the LED matrix are silent;
- the clock starts out reset and runs from the system's monotonic clock.

At start-up, `init_rtc()` finds the reset clock, prints
`RTC zerado, definindo hora...` and sets it to 2025-02-26 12:13:00.

Options:

- `--alarm HH:MM:COLOR` stores an alarm before the loop starts. You can repeat
  it. COLOR is 0 to 4: green, red, blue, yellow or purple. Values out of range
  are rejected.
- `--steps N` runs N passes of the main loop, then prints the final screen as
  text: `#` for a lit pixel, `.` for an unlit one. Without `--steps` the loop
  runs forever and prints nothing.

## Library overview

### `colormed.font`

The 8x8 bitmap font.

- `glyph(char)` returns the eight column bytes of a character. It raises
  `ValueError` for a character that has no glyph.
- `font_index(char)` returns the glyph's offset in `FONT`, or `None` when the
  character has no glyph.

### `colormed.ssd1306`

- `SSD1306` is a frame buffer for the display. It provides `pixel()`,
  `get_pixel()`, `fill()`, `rect()`, `line()`, `hline()`, `vline()`,
  `draw_char()`, `draw_string()`, `draw_filled_square()` and `is_empty()`.
  Pixels off the panel are ignored.
- `send_data()` pushes the frame to the bus, and `config()` sends the power-up
  command sequence.
- `to_text()` renders the frame as text.
- `Command` lists the controller opcodes.
- `setup_ssd1306(bus, address)` returns a configured, cleared 128x64 display.

### `colormed.buttons`

`Button` reads an active-low pin.

- `is_pressed()` is true while the button is held.
- `debounce()` returns `True` only after a press that survives a 50 ms
  settling delay, and waits for the release.

### `colormed.buzzer`

`Buzzer` plays a square-wave `tone(frequency, duration_ms)` and three tunes:

- `alarm()` alternates low and high tones;
- `confirmation()` plays three rising beeps;
- `error()` plays two falling beeps.

`cycle_count(frequency, duration_ms)` gives the number of whole cycles in a
tone. It raises `ValueError` for a frequency that is not positive or for a
negative duration.

### `colormed.led_matrix`

- `Color` lists the choices `GREEN`, `RED`, `BLUE`, `YELLOW`, `PURPLE` and
  `OFF`.
- `matrix_rgb(b, r, g)` packs intensities from 0 to 1 into a GRB word. It
  raises `ValueError` for an intensity out of range.
- `frame_for(color)` returns the 25 pixel words for a colour.
- `LedMatrix.draw(color)` sends those words to the sink.

### `colormed.alarms`

`AlarmBook(capacity=10)` holds `Alarm` entries in the order they were added.

- `add()` raises `DuplicateAlarmError` or `AlarmLimitError`, both subclasses of
  `AlarmError`.
- `due(hour, minute, second)` returns the alarms set for exactly that second.
  Alarms are always set for second 0.

### `colormed.app`

`ColorMed` is the application. It provides:

- the time screen, `display_time()`;
- the hour, minute and colour screens, `configure_time()`,
  `show_color_list()` and `configure_alarm()`;
- `add_alarm()`, which shows an error screen and sounds the error tune on
  failure;
- `check_alarms()`;
- `on_config_button(now_us)`, which applies a 4 ms debounce;
- `step()`, a single pass of the main loop.

`init_rtc(clock)` is also defined here.

## Example

```python
from colormed.alarms import AlarmBook, DuplicateAlarmError
from colormed.ssd1306 import setup_ssd1306

book = AlarmBook(capacity=10)
book.add(8, 30, 0)

try:
    book.add(8, 30, 2)
except DuplicateAlarmError:
    print("an alarm already exists at 08:30")

print(len(book))                  # 1
print(book.due(8, 30, 0))         # [Alarm(hours=8, minutes=30, color=0, seconds=0)]


class RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, data))


display = setup_ssd1306(RecordingBus(), 0x3C)
display.draw_string("08:30", 44, 28)
print(display.is_empty())         # False
```

## What the package does not do

The package contains no drivers for real pins, I2C buses, LED chains or
real-time clocks. To use it with physical devices, you must supply those
callables yourself.

The `colormed` command never receives button presses, so an alarm cannot be
set interactively from it. Use `--alarm` instead.

Alarms are kept in memory only. They are lost when the program ends.

## Tests

```
pip install .[test]
pytest
```