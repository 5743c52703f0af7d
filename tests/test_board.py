import pytest

from crisscross.board import GRID_SIZE, Board, LineType, get_points, get_symbol


def _filled(symbol=1):
    board = Board()
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            board.place(symbol, x, y)
    return board


@pytest.mark.parametrize(
    "number, shape",
    [(1, "*"), (2, "/"), (3, "o"), (4, "X"), (5, "#"), (6, "@"), (0, ""), (7, "")],
)
def test_get_symbol(number, shape):
    assert get_symbol(number) == shape


@pytest.mark.parametrize(
    "count, points", [(0, 0), (1, 0), (2, 2), (3, 3), (4, 8), (5, 10)]
)
def test_get_points(count, points):
    assert get_points(count) == points


def test_new_board_is_empty_and_scores_nothing():
    board = Board()
    assert all(
        board.symbol_at(x, y) == 0 for x in range(GRID_SIZE) for y in range(GRID_SIZE)
    )
    assert board.total_score() == 0


def test_place_and_symbol_at():
    board = Board()
    board.place(4, 2, 3)
    assert board.symbol_at(2, 3) == 4
    assert board.symbol_at(3, 2) == 0


def test_out_of_range_raises():
    board = Board()
    with pytest.raises(IndexError):
        board.place(1, GRID_SIZE, 0)
    with pytest.raises(IndexError):
        board.symbol_at(0, -1)
    with pytest.raises(IndexError):
        board.count_points(LineType.ROW, GRID_SIZE)


def test_first_valid_pos_needs_empty_cell_and_empty_neighbour():
    board = Board()
    assert board.is_first_valid_pos(0, 0)
    board.place(1, 0, 0)
    assert not board.is_first_valid_pos(0, 0)
    board.place(2, 1, 1)
    board.place(2, 0, 2)
    # (0, 1) is empty but all its neighbours are taken
    assert not board.is_first_valid_pos(0, 1)


def test_second_valid_pos_must_touch_last_cell():
    board = Board()
    board.place(3, 2, 2)
    assert board.is_second_valid_pos(1, 2, 2, 2)
    assert board.is_second_valid_pos(3, 2, 2, 2)
    assert board.is_second_valid_pos(2, 1, 2, 2)
    assert board.is_second_valid_pos(2, 3, 2, 2)
    assert not board.is_second_valid_pos(1, 1, 2, 2)
    assert not board.is_second_valid_pos(2, 4, 2, 2)
    board.place(3, 1, 2)
    assert not board.is_second_valid_pos(1, 2, 2, 2)


def test_finished_states():
    board = Board()
    assert not board.is_finished()
    full = _filled()
    assert full.is_finished()
    full.place(0, 0, 0)
    assert full.is_finished()
    full.place(0, 0, 1)
    assert not full.is_finished()


def test_full_row_of_same_symbol():
    board = Board()
    for y in range(GRID_SIZE):
        board.place(2, 1, y)
    assert board.count_points(LineType.ROW, 1) == 10
    assert board.count_points(LineType.ROW, 0) == 0
    assert all(board.count_points(LineType.COL, y) == 0 for y in range(GRID_SIZE))


def test_runs_are_broken_by_other_symbols_and_gaps():
    board = Board()
    for y, symbol in enumerate([1, 1, 0, 1, 1]):
        board.place(symbol, 0, y)
    assert board.count_points(LineType.ROW, 0) == 2 * get_points(2)
    for x, symbol in enumerate([5, 5, 5, 5, 6]):
        board.place(symbol, x, 4)
    assert board.count_points(LineType.COL, 4) == get_points(4)


def test_diagonal_runs_bottom_left_to_top_right():
    board = Board()
    for j in range(3):
        board.place(6, GRID_SIZE - 1 - j, j)
    assert board.count_points(LineType.DIAG) == 3
    # the main diagonal does not count
    other = Board()
    for j in range(GRID_SIZE):
        other.place(6, j, j)
    assert other.count_points(LineType.DIAG) == 0


def test_diagonal_counts_twice_in_total():
    board = Board()
    for j in range(GRID_SIZE):
        board.place(1, GRID_SIZE - 1 - j, j)
    assert board.total_score() == 2 * board.count_points(LineType.DIAG)


def test_full_board_of_one_symbol_total():
    assert _filled(3).total_score() == 120


def test_count_points_accepts_plain_ints():
    board = _filled(2)
    assert board.count_points(1, 0) == board.count_points(LineType.ROW, 0)