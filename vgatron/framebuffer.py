"""RGB565 pixel buffer and the colour-bar demonstration."""

from __future__ import annotations

import argparse
from array import array
from collections.abc import Iterator
from pathlib import Path

from vgatron.board import Board, get_board

BLACK = 0x0000
WHITE = 0xFFFF
RED = 0xF800
GREEN = 0x07E0
BLUE = 0x001F


def make_pixel(r8: int, g8: int, b8: int) -> int:
    """Pack 8-bit red, green and blue into a 16-bit RGB565 pixel."""
    r5 = (r8 & 0xF8) >> 3
    g6 = (g8 & 0xFC) >> 2
    b5 = (b8 & 0xF8) >> 3
    return ((r5 << 11) | (g6 << 5) | b5) & 0xFFFF


class Framebuffer:
    """A pixel buffer laid out as the VGA pixel memory: rows of ``1 << yshift`` slots."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self._pixels = array("H", [BLACK]) * (board.max_y << board.yshift)

    @property
    def width(self) -> int:
        return self.board.max_x

    @property
    def height(self) -> int:
        return self.board.max_y

    def _offset(self, y: int, x: int) -> int:
        if not (0 <= y < self.board.max_y and 0 <= x < self.board.max_x):
            raise IndexError(f"pixel ({y}, {x}) is off the {self.board.name} screen")
        return (y << self.board.yshift) + x

    def draw_pixel(self, y: int, x: int, colour: int) -> None:
        """Set the pixel at row *y*, column *x*."""
        self._pixels[self._offset(y, x)] = colour & 0xFFFF

    def read_pixel(self, y: int, x: int) -> int:
        """Return the pixel at row *y*, column *x*."""
        return self._pixels[self._offset(y, x)]

    def rect(self, y1: int, y2: int, x1: int, x2: int, colour: int) -> None:
        """Fill rows ``y1..y2-1`` and columns ``x1..x2-1`` with *colour*."""
        if y1 >= y2 or x1 >= x2:
            return
        self._offset(y1, x1)
        self._offset(y2 - 1, x2 - 1)
        width = x2 - x1
        row = array("H", [colour & 0xFFFF]) * width
        for y in range(y1, y2):
            start = self._offset(y, x1)
            self._pixels[start:start + width] = row


def _colour_bar_rows(framebuffer: Framebuffer) -> Iterator[int]:
    """Clear the screen, then draw the bars row by row, yielding each row index."""
    board = framebuffer.board
    framebuffer.rect(0, board.max_y, 0, board.max_x, BLACK)
    half_y = board.max_y // 2
    half_x = board.max_x // 2
    for y in range(half_y):
        for x in range(half_x):
            scale = 256 * x // half_x
            framebuffer.draw_pixel(y, x, make_pixel(0, 0, scale))
            framebuffer.draw_pixel(y, x + half_x, make_pixel(0, scale, 0))
            framebuffer.draw_pixel(y + half_y, x, make_pixel(scale, 0, 0))
            framebuffer.draw_pixel(y + half_y, x + half_x, make_pixel(scale, scale, scale))
        yield y


def draw_colour_bars(framebuffer: Framebuffer) -> None:
    """Draw blue, green, red and white gradient bars in the four screen quadrants."""
    for _ in _colour_bar_rows(framebuffer):
        pass


def _expand(value: int, bits: int) -> int:
    return (value << (8 - bits)) | (value >> (2 * bits - 8))


def _write_ppm(framebuffer: Framebuffer, path: Path) -> None:
    """Save the visible screen as a binary PPM image."""
    data = bytearray()
    for y in range(framebuffer.height):
        for x in range(framebuffer.width):
            pixel = framebuffer.read_pixel(y, x)
            data += bytes((
                _expand((pixel >> 11) & 0x1F, 5),
                _expand((pixel >> 5) & 0x3F, 6),
                _expand(pixel & 0x1F, 5),
            ))
    header = f"P6\n{framebuffer.width} {framebuffer.height}\n255\n".encode("ascii")
    path.write_bytes(header + bytes(data))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Draw RGB565 colour bars.")
    parser.add_argument("--board", default="DE10-Lite", help="board geometry to use")
    parser.add_argument("--rows", action="store_true", help="report each row as it is drawn")
    parser.add_argument("--output", type=Path, help="save the screen as a PPM image")
    args = parser.parse_args(argv)

    try:
        board = get_board(args.board)
    except ValueError as exc:
        parser.error(str(exc))
    framebuffer = Framebuffer(board)

    print("start")
    for y in _colour_bar_rows(framebuffer):
        if args.rows:
            print(f"drew row: {y}")
    print("done")

    if args.output is not None:
        _write_ppm(framebuffer, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())