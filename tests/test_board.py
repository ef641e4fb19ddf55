import pytest

from vgatron.board import Board, get_board


def test_de10_lite_geometry():
    board = get_board("DE10-Lite")
    assert (board.max_x, board.max_y, board.yshift) == (160, 120, 8)
    assert board.name == "DE10-Lite"


def test_de1_soc_geometry():
    board = get_board("DE1-SoC")
    assert (board.max_x, board.max_y, board.yshift) == (320, 240, 9)


def test_lookup_ignores_case():
    assert get_board("de1-soc") == get_board("DE1-SOC")


def test_cpulator_uses_de1_soc_geometry():
    assert get_board("CPUlator") == get_board("DE1-SoC")


@pytest.mark.parametrize("name", ["DE10-Lite", "DE1-SoC"])
def test_rows_fit_in_stride(name):
    board = get_board(name)
    assert board.stride >= board.max_x
    assert board.stride == 1 << board.yshift


def test_unknown_board_raises():
    with pytest.raises(ValueError):
        get_board("nonexistent")


def test_board_is_immutable():
    board = get_board("DE10-Lite")
    assert isinstance(board, Board)
    with pytest.raises(AttributeError):
        board.max_x = 1  # type: ignore[misc]
    assert board.max_x == 160
    assert get_board("DE10-Lite").max_x == 160