import io

from greedysnake.board import HEIGHT, WIDTH, Board
from greedysnake.point import Point
from greedysnake.tools import Screen


def test_border_cells_lie_on_edges():
    border = Board().border()
    for point in border:
        assert point.x in (1, WIDTH) or point.y in (1, HEIGHT)
        assert 1 <= point.x <= WIDTH and 1 <= point.y <= HEIGHT


def test_border_has_no_duplicates_and_contains_corners():
    border = Board().border()
    assert len(set(border)) == len(border)
    for corner in (Point(1, 1), Point(WIDTH, 1), Point(1, HEIGHT), Point(WIDTH, HEIGHT)):
        assert corner in border


def test_border_covers_every_edge_cell():
    border = set(Board().border())
    for x in range(1, WIDTH + 1):
        assert Point(x, 1) in border
        assert Point(x, HEIGHT) in border
    for y in range(1, HEIGHT + 1):
        assert Point(1, y) in border
        assert Point(WIDTH, y) in border
    assert Point(2, 2) not in border


def test_draw_pauses_once_per_cell():
    stream = io.StringIO()
    pauses = []
    board = Board()
    board.draw(Screen(stream), pauses.append)
    assert len(pauses) == len(board.border())
    assert stream.getvalue().count("■") == len(board.border())