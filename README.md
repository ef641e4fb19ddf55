# vgatron

An in-memory model of the VGA pixel buffer of the DE10-Lite and DE1-SoC
computer systems, with two programs that draw on it:

- a colour-bar demo that fills the four quadrants of the screen with blue,
  green, red and white gradients, and
- a Tron light-cycle game, human (blue) against robot (red), played in
  rounds until one side scores nine points.

Pixels are 16-bit RGB565 values. Each row of the buffer holds
`1 << yshift` slots, of which the first `max_x` are visible.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### vgatron-bars

```
vgatron-bars [--board NAME] [--rows] [--output FILE]
```

Clears the screen to black and draws the colour bars, printing `start`
before and `done` after.

- `--board NAME` – board geometry, `DE10-Lite` (the default, 160×120),
  `DE1-SoC` (320×240) or `CPUlator` (same as DE1-SoC). Case does not matter.
- `--rows` – print `drew row: N` after each row of bars.
- `--output FILE` – save the visible screen as a binary PPM (P6) image.

### vgatron-tron

```
vgatron-tron [--board NAME]
```

Plays rounds on the chosen board (default `DE1-SoC`) until one player has
nine points, fills the screen with the winner's colour, and prints
`Starting Tron on <board>` and `Game over: H=<human> R=<robot>`.

## Using the library

### Boards

`vgatron.board.get_board(name)` returns a frozen `Board` with `name`,
`max_x`, `max_y`, `yshift` and a `stride` property (`1 << yshift`). An
unknown name raises `ValueError`. The module also defines the memory-map
addresses of the computer system (`FPGA_PIXEL_BUF_BASE`, `KEY_BASE`,
`HEX3_HEX0_BASE` and so on) as constants.

### Framebuffer

```python
from vgatron.board import get_board
from vgatron.framebuffer import Framebuffer, make_pixel, draw_colour_bars

board = get_board("DE10-Lite")
fb = Framebuffer(board)
fb.rect(0, 10, 0, 10, make_pixel(255, 0, 0))
print(hex(fb.read_pixel(5, 5)))   # 0xf800

draw_colour_bars(fb)
```

- `make_pixel(r8, g8, b8)` packs 8-bit channels into RGB565.
- `Framebuffer.draw_pixel(y, x, colour)` and `read_pixel(y, x)` take the row
  first. Coordinates off the visible screen raise `IndexError`.
- `Framebuffer.rect(y1, y2, x1, x2, colour)` fills rows `y1..y2-1` and
  columns `x1..x2-1`; an empty range does nothing, and a rectangle reaching
  off screen raises `IndexError`.
- `BLACK`, `WHITE`, `RED`, `GREEN` and `BLUE` are RGB565 constants.

### Tron

```python
from vgatron.tron import TronGame

game = TronGame(fb, read_keys=lambda: 0xF)   # no keys pressed
winner = game.play()
print(game.score_human, game.score_robot)
```

`read_keys` is called once per tick and returns four active-low bits:
bit 0 up, bit 1 down, bit 2 left, bit 3 right. The robot keeps its heading
unless something lies within two cells ahead, then tries turning left, then
right.

`TronGame` also offers `reset_round()`, `play_round()` (returns the
surviving `Player`, or `None` if both crashed), `step_player(player)`,
`is_collision(x, y)` and `choose_robot_direction(player)`. Scores are kept
in `score_human` and `score_robot`, and the seven-segment register values in
`hex0` and `hex4`; `set_hex_digit(register, digit_idx, value)` computes such
a register value. `Direction`, `turn_left` and `turn_right` handle headings.

## What it does not do

There is no window or display: drawing happens only in memory, and the
colour-bar command can save the result as a PPM file. `vgatron-tron` reads
no keyboard; it always plays with no keys pressed, so the human player never
steers. Interactive play needs a `read_keys` function supplied through the
library.