import pytest

from vgatron.board import get_board
from vgatron.framebuffer import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    Framebuffer,
    draw_colour_bars,
    main,
    make_pixel,
)


@pytest.fixture
def fb():
    return Framebuffer(get_board("DE10-Lite"))


def test_make_pixel_primaries_match_named_colours():
    assert make_pixel(255, 255, 255) == WHITE == 0xFFFF
    assert make_pixel(255, 0, 0) == RED == 0xF800
    assert make_pixel(0, 255, 0) == GREEN == 0x07E0
    assert make_pixel(0, 0, 255) == BLUE == 0x001F
    assert make_pixel(0, 0, 0) == BLACK


def test_make_pixel_drops_low_bits():
    assert make_pixel(7, 3, 7) == BLACK
    assert make_pixel(0xFF, 0, 0) == make_pixel(0xF8, 0, 0)


def test_make_pixel_fields_do_not_overlap():
    assert make_pixel(255, 0, 0) | make_pixel(0, 255, 0) | make_pixel(0, 0, 255) == WHITE
    assert make_pixel(255, 0, 0) & make_pixel(0, 255, 0) == 0


def test_new_buffer_is_black(fb):
    assert all(fb.read_pixel(y, x) == BLACK for y in range(fb.height) for x in range(fb.width))


def test_draw_then_read(fb):
    fb.draw_pixel(5, 7, RED)
    assert fb.read_pixel(5, 7) == RED
    assert fb.read_pixel(7, 5) == BLACK


def test_colour_is_truncated_to_sixteen_bits(fb):
    fb.draw_pixel(0, 0, 0x1F800)
    assert fb.read_pixel(0, 0) == RED


@pytest.mark.parametrize("y, x", [(-1, 0), (0, -1), (120, 0), (0, 160)])
def test_out_of_screen_access_raises(fb, y, x):
    with pytest.raises(IndexError):
        fb.draw_pixel(y, x, RED)
    with pytest.raises(IndexError):
        fb.read_pixel(y, x)


def test_rect_fills_exactly_its_region(fb):
    fb.rect(2, 5, 3, 9, GREEN)
    painted = {(y, x) for y in range(fb.height) for x in range(fb.width) if fb.read_pixel(y, x) == GREEN}
    assert painted == {(y, x) for y in range(2, 5) for x in range(3, 9)}


def test_empty_rect_draws_nothing(fb):
    fb.rect(5, 5, 0, 10, RED)
    fb.rect(0, 10, 8, 3, RED)
    assert all(fb.read_pixel(y, x) == BLACK for y in range(fb.height) for x in range(fb.width))


def test_rect_off_screen_raises(fb):
    with pytest.raises(IndexError):
        fb.rect(0, fb.height + 1, 0, 1, RED)


def test_full_screen_rect(fb):
    fb.rect(0, fb.height, 0, fb.width, WHITE)
    assert fb.read_pixel(fb.height - 1, fb.width - 1) == WHITE
    assert fb.read_pixel(0, 0) == WHITE


def test_colour_bars_quadrants(fb):
    draw_colour_bars(fb)
    half_y, half_x = fb.height // 2, fb.width // 2
    assert fb.read_pixel(0, 0) == BLACK
    for y in (0, half_y - 1):
        for x in range(half_x):
            assert fb.read_pixel(y, x) & ~BLUE == 0
            assert fb.read_pixel(y, x + half_x) & ~GREEN == 0
            assert fb.read_pixel(y + half_y, x) & ~RED == 0


def test_colour_bars_brighten_left_to_right(fb):
    draw_colour_bars(fb)
    half_x = fb.width // 2
    row = [fb.read_pixel(fb.height - 1, x + half_x) for x in range(half_x)]
    assert row == sorted(row)
    assert row[-1] > row[0]


def test_colour_bars_rows_identical(fb):
    draw_colour_bars(fb)
    first = [fb.read_pixel(0, x) for x in range(fb.width)]
    last = [fb.read_pixel(fb.height // 2 - 1, x) for x in range(fb.width)]
    assert first == last


def test_main_prints_start_and_done(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["start", "done"]


def test_main_reports_rows(capsys):
    assert main(["--rows"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "drew row: 0"
    assert lines[-1] == "done"


def test_main_writes_ppm(tmp_path):
    out = tmp_path / "bars.ppm"
    assert main(["--output", str(out)]) == 0
    data = out.read_bytes()
    header = b"P6\n160 120\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 160 * 120 * 3


def test_main_rejects_unknown_board():
    with pytest.raises(SystemExit):
        main(["--board", "nonexistent"])