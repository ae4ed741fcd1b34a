import pytest

from chromakit.color import Color
from chromakit.color_list import ColorList

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def make_list():
    return ColorList([RED, GREEN, BLUE])


def test_initial_colors():
    assert make_list().colors == [RED, GREEN, BLUE]


def test_append_uses_current_color():
    cl = make_list()
    cl.set_current_color(GREEN)
    cl.append()
    assert cl.colors == [RED, GREEN, BLUE, GREEN]
    assert len(cl) == 4


def test_default_current_color_is_black():
    cl = ColorList()
    cl.append()
    assert cl.colors == [Color(0, 0, 0)]


def test_remove():
    cl = make_list()
    cl.remove(1)
    assert cl.colors == [RED, BLUE]


def test_remove_out_of_range():
    cl = make_list()
    with pytest.raises(IndexError):
        cl.remove(3)
    with pytest.raises(IndexError):
        cl.remove(-1)


def test_move_up_and_down():
    cl = make_list()
    assert cl.move_up(2) is True
    assert cl.colors == [RED, BLUE, GREEN]
    assert cl.move_down(0) is True
    assert cl.colors == [BLUE, RED, GREEN]


def test_move_at_edges_does_nothing():
    cl = make_list()
    assert cl.move_up(0) is False
    assert cl.move_down(2) is False
    assert cl.colors == [RED, GREEN, BLUE]


def test_can_move_flags():
    cl = make_list()
    assert [cl.can_move_up(i) for i in range(3)] == [False, True, True]
    assert [cl.can_move_down(i) for i in range(3)] == [True, True, False]


def test_swap_is_involution():
    cl = make_list()
    cl.swap(0, 2)
    assert cl.colors == [BLUE, GREEN, RED]
    cl.swap(0, 2)
    assert cl.colors == [RED, GREEN, BLUE]


def test_swap_invalid():
    with pytest.raises(IndexError):
        make_list().swap(0, 5)


def test_set_color_at():
    cl = make_list()
    cl.set_color_at(1, RED)
    assert cl[1] == RED


def test_set_colors_and_clear():
    cl = make_list()
    cl.set_colors([BLUE])
    assert cl.colors == [BLUE]
    cl.clear()
    assert cl.colors == []
    assert len(cl) == 0


def test_listeners_receive_each_change():
    cl = make_list()
    seen = []
    cl.connect(seen.append)
    cl.move_down(0)
    cl.remove(0)
    assert seen == [[GREEN, RED, BLUE], [RED, BLUE]]


def test_colors_returns_copy():
    cl = make_list()
    cl.colors.append(RED)
    assert len(cl) == 3