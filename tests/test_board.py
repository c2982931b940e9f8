import pytest

from pacman_console.board import EMPTY, FOOD, WALL, Board, load_board, parse_board


def test_new_board_is_filled():
    board = Board(3, 5, "#")
    assert board.lines() == ["#####"] * 3
    assert (board.rows, board.cols) == (3, 5)


def test_default_fill_is_empty():
    board = Board(2, 4)
    assert board.lines() == [EMPTY * 4] * 2


def test_set_then_get_round_trip():
    board = Board(4, 6)
    board[5, 3] = "@"
    assert board[5, 3] == "@"
    assert board.lines()[3][5] == "@"


@pytest.mark.parametrize("pos", [(6, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_raises(pos):
    board = Board(4, 6)
    with pytest.raises(IndexError):
        board[pos]
    with pytest.raises(IndexError):
        board[pos] = "x"
    assert board.lines() == [EMPTY * 6] * 4
    assert pos not in board


def test_contains_matches_bounds():
    board = Board(4, 6)
    assert (0, 0) in board
    assert (5, 3) in board
    assert (6, 3) not in board
    assert "nope" not in board


def test_cell_must_be_single_character():
    board = Board(2, 2)
    with pytest.raises(ValueError):
        board[0, 0] = "ab"
    assert board[0, 0] == EMPTY
    assert board.lines() == [EMPTY * 2] * 2


@pytest.mark.parametrize("rows,cols,fill", [(0, 3, " "), (3, 0, " "), (2, 2, "")])
def test_invalid_construction(rows, cols, fill):
    with pytest.raises(ValueError):
        Board(rows, cols, fill)


def test_clamp_keeps_inside_positions():
    board = Board(4, 6)
    for x in range(6):
        for y in range(4):
            assert board.clamp(x, y) == (x, y)


def test_clamp_always_lands_on_board():
    board = Board(4, 6)
    for x in range(-3, 10):
        for y in range(-3, 10):
            assert board.clamp(x, y) in board


def test_clamp_edges():
    board = Board(4, 6)
    assert board.clamp(-5, -5) == (0, 0)
    assert board.clamp(100, 100) == (board.cols - 1, board.rows - 1)


def test_food_detection():
    board = Board(3, 3)
    assert not board.has_food()
    assert board.count_food() == 0
    board[1, 1] = FOOD
    assert board.has_food()
    assert board.count_food() == 1


def test_count_food_from_parsed_board():
    board = parse_board(["o#o", "#o#", "   "], 3, 3)
    assert board.count_food() == 3


def test_parse_pads_short_lines():
    board = parse_board(["ab"], 2, 5)
    assert board.lines() == ["ab".ljust(5), EMPTY * 5]


def test_parse_truncates_long_lines_and_extra_rows():
    source = ["#########", "#o  o   #", "#########", "extra row"]
    board = parse_board(source, 3, 4)
    assert board.lines() == [line[:4] for line in source[:3]]


def test_parse_strips_line_endings():
    board = parse_board(["#o\r\n", "o#\n"], 2, 2)
    assert board.lines() == ["#o", "o#"]


def test_equality():
    first = parse_board(["#o"], 1, 2)
    second = parse_board(["#o"], 1, 2)
    assert first == second
    second[1, 0] = WALL
    assert not first == second


def test_load_board_round_trip(tmp_path):
    rows = ["#####", "#o o#", "#####"]
    path = tmp_path / "mapFile.txt"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    board = load_board(path, 3, 5)
    assert board.lines() == rows


def test_load_board_reads_wide_characters(tmp_path):
    path = tmp_path / "mapFile.txt"
    path.write_text("\uff20#\n", encoding="utf-8")
    board = load_board(path, 1, 2)
    assert board[0, 0] == "\uff20"


def test_load_board_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_board(tmp_path / "missing.txt", 3, 3)