"""Board geometry and the memory map of the FPGA computer systems."""

from __future__ import annotations

from dataclasses import dataclass

# Memory
SDRAM_BASE = 0x00000000
SDRAM_END = 0x03FFFFFF
FPGA_PIXEL_BUF_BASE = 0x08000000
FPGA_PIXEL_BUF_END = 0x0800FFFF
FPGA_CHAR_BASE = 0x09000000
FPGA_CHAR_END = 0x09001FFF

# Devices
LED_BASE = 0xFF200000
LEDR_BASE = 0xFF200000
HEX3_HEX0_BASE = 0xFF200020
HEX5_HEX4_BASE = 0xFF200030
SW_BASE = 0xFF200040
KEY_BASE = 0xFF200050
JP1_BASE = 0xFF200060
ARDUINO_GPIO = 0xFF200100
ARDUINO_RESET_N = 0xFF200110
JTAG_UART_BASE = 0xFF201000
TIMER_BASE = 0xFF202000
TIMER_2_BASE = 0xFF202020
MTIMER_BASE = 0xFF202100
RGB_RESAMPLER_BASE = 0xFF203010
PIXEL_BUF_CTRL_BASE = 0xFF203020
CHAR_BUF_CTRL_BASE = 0xFF203030
ADC_BASE = 0xFF204000
ACCELEROMETER_BASE = 0xFF204020

# Memory-mapped processor registers
MTIME_BASE = 0xFF202100


@dataclass(frozen=True)
class Board:
    """Screen geometry of one board: visible size and row shift of the pixel buffer."""

    name: str
    max_x: int
    max_y: int
    yshift: int

    @property
    def stride(self) -> int:
        """Number of pixel slots between the starts of two rows."""
        return 1 << self.yshift


DE10_LITE = Board("DE10-Lite", max_x=160, max_y=120, yshift=8)
DE1_SOC = Board("DE1-SoC", max_x=320, max_y=240, yshift=9)

_BOARDS = {
    "de10-lite": DE10_LITE,
    "de1-soc": DE1_SOC,
    "cpulator": DE1_SOC,
}


def get_board(name: str) -> Board:
    """Return the board called *name* (case does not matter)."""
    try:
        return _BOARDS[name.casefold()]
    except KeyError:
        known = ", ".join(sorted({board.name for board in _BOARDS.values()}))
        raise ValueError(f"unknown board {name!r}; expected one of: {known}") from None