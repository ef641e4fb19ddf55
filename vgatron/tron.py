"""A two-player light-cycle game: a human against a robot on the pixel buffer."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from vgatron.board import get_board
from vgatron.framebuffer import BLACK, BLUE, RED, WHITE, Framebuffer

HEX_DIGITS = (0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07, 0x7F, 0x6F)
BORDER = 1
WINNING_SCORE = 9
NO_KEYS_PRESSED = 0xF


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def dx(self) -> int:
        return (0, 1, 0, -1)[self]

    @property
    def dy(self) -> int:
        return (-1, 0, 1, 0)[self]


def turn_left(direction: Direction) -> Direction:
    """Return the direction a quarter turn anticlockwise."""
    return Direction((direction - 1) % 4)


def turn_right(direction: Direction) -> Direction:
    """Return the direction a quarter turn clockwise."""
    return Direction((direction + 1) % 4)


def set_hex_digit(register: int, digit_idx: int, value: int) -> int:
    """Return *register* with seven-segment digit *digit_idx* showing *value*.

    Values outside 0..9 leave the register unchanged.
    """
    if not 0 <= value <= 9:
        return register
    shift = 8 * digit_idx
    cleared = register & ~(0xFF << shift)
    return (cleared | (HEX_DIGITS[value] << shift)) & 0xFFFFFFFF


@dataclass
class Player:
    colour: int
    is_human: bool = False
    x: int = 0
    y: int = 0
    direction: Direction = Direction.UP

    def apply_input(self, keys: int) -> None:
        """Steer from the active-low push-button bits (UP, DOWN, LEFT, RIGHT)."""
        if not self.is_human:
            return
        pressed = ~keys & 0xF
        if pressed & 0x1:
            self.direction = Direction.UP
        if pressed & 0x2:
            self.direction = Direction.DOWN
        if pressed & 0x4:
            self.direction = Direction.LEFT
        if pressed & 0x8:
            self.direction = Direction.RIGHT


class TronGame:
    """Game state: the arena, both players, scores and score displays."""

    def __init__(self, framebuffer: Framebuffer, read_keys: Callable[[], int]) -> None:
        self.framebuffer = framebuffer
        self.board = framebuffer.board
        self.read_keys = read_keys
        self.human = Player(colour=BLUE, is_human=True)
        self.robot = Player(colour=RED)
        self.score_human = 0
        self.score_robot = 0
        self.hex0 = 0
        self.hex4 = 0
        self._show_scores()

    def _show_scores(self) -> None:
        self.hex0 = set_hex_digit(self.hex0, 0, self.score_human)
        self.hex4 = set_hex_digit(self.hex4, 0, self.score_robot)

    def _draw_border(self) -> None:
        max_x, max_y = self.board.max_x, self.board.max_y
        self.framebuffer.rect(0, max_y, 0, BORDER, WHITE)
        self.framebuffer.rect(0, max_y, max_x - BORDER, max_x, WHITE)
        self.framebuffer.rect(0, BORDER, 0, max_x, WHITE)
        self.framebuffer.rect(max_y - BORDER, max_y, 0, max_x, WHITE)

    def _draw_obstacles(self) -> None:
        cx, cy = self.board.max_x // 2, self.board.max_y // 2
        self.framebuffer.rect(cy - 10, cy + 10, cx - 2, cx + 2, WHITE)
        self.framebuffer.rect(cy - 2, cy + 2, cx - 20, cx + 20, WHITE)

    def reset_round(self) -> None:
        """Clear the arena and put both players at their starting positions."""
        max_x, max_y = self.board.max_x, self.board.max_y
        self.framebuffer.rect(0, max_y, 0, max_x, BLACK)
        self._draw_border()
        self._draw_obstacles()

        self.human.x, self.human.y = max_x // 3, max_y // 2
        self.human.direction = Direction.RIGHT
        self.robot.x, self.robot.y = (2 * max_x) // 3, max_y // 2
        self.robot.direction = Direction.LEFT

        for player in (self.human, self.robot):
            self.framebuffer.draw_pixel(player.y, player.x, player.colour)

    def is_collision(self, x: int, y: int) -> bool:
        """True if (x, y) is off screen or already painted."""
        if not (0 <= x < self.board.max_x and 0 <= y < self.board.max_y):
            return True
        return self.framebuffer.read_pixel(y, x) != BLACK

    def choose_robot_direction(self, player: Player) -> Direction:
        """Keep going unless blocked within two cells; then try left, then right."""
        d = player.direction
        nx1, ny1 = player.x + d.dx, player.y + d.dy
        nx2, ny2 = nx1 + d.dx, ny1 + d.dy
        if not (self.is_collision(nx1, ny1) or self.is_collision(nx2, ny2)):
            return d
        for candidate in (turn_left(d), turn_right(d)):
            if not self.is_collision(player.x + candidate.dx, player.y + candidate.dy):
                return candidate
        return d

    def step_player(self, player: Player) -> bool:
        """Move one cell, leaving a trail; return False on a crash."""
        nx = player.x + player.direction.dx
        ny = player.y + player.direction.dy
        if self.is_collision(nx, ny):
            return False
        self.framebuffer.draw_pixel(ny, nx, player.colour)
        player.x, player.y = nx, ny
        return True

    def play_round(self) -> Player | None:
        """Play one round; return the surviving player, or None if both crashed."""
        self.reset_round()
        human_alive = robot_alive = True
        while human_alive and robot_alive:
            self.human.apply_input(self.read_keys())
            self.robot.direction = self.choose_robot_direction(self.robot)
            human_alive = self.step_player(self.human)
            robot_alive = self.step_player(self.robot)

        if human_alive == robot_alive:
            return None
        if human_alive:
            self.score_human += 1
            winner = self.human
        else:
            self.score_robot += 1
            winner = self.robot
        self._show_scores()
        return winner

    def play(self) -> Player:
        """Play rounds until one side reaches the winning score; return the winner."""
        while self.score_human < WINNING_SCORE and self.score_robot < WINNING_SCORE:
            self.play_round()
        winner = self.human if self.score_human > self.score_robot else self.robot
        self.framebuffer.rect(0, self.board.max_y, 0, self.board.max_x, winner.colour)
        return winner


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play light-cycles against a robot.")
    parser.add_argument("--board", default="DE1-SoC", help="board geometry to use")
    args = parser.parse_args(argv)

    try:
        board = get_board(args.board)
    except ValueError as exc:
        parser.error(str(exc))

    game = TronGame(Framebuffer(board), lambda: NO_KEYS_PRESSED)
    print(f"Starting Tron on {board.name}")
    game.play()
    print(f"Game over: H={game.score_human} R={game.score_robot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())