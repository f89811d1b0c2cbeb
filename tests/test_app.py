import pytest

from wireframe.app import MIN_SCALE, MOVE_STEP, Key, apply_key, main
from wireframe.render import View


@pytest.fixture
def view():
    return View(scale=10, offset_x=200, offset_y=300)


def test_raw_keysyms_for_escape_and_zoom(view):
    assert apply_key(view, 65307) == view
    assert apply_key(view, 45).scale == view.scale - 1
    assert apply_key(view, 61).scale == view.scale + 1


def test_up_moves_view_up(view):
    moved = apply_key(view, Key.UP)
    assert moved.offset_y == view.offset_y - MOVE_STEP
    assert moved.offset_x == view.offset_x
    assert moved.scale == view.scale


def test_down_moves_view_down(view):
    moved = apply_key(view, Key.DOWN)
    assert moved.offset_y == view.offset_y + MOVE_STEP
    assert moved.offset_x == view.offset_x


def test_left_and_right_move_horizontally(view):
    assert apply_key(view, Key.LEFT).offset_x == view.offset_x - MOVE_STEP
    assert apply_key(view, Key.RIGHT).offset_x == view.offset_x + MOVE_STEP


def test_opposite_moves_cancel(view):
    assert apply_key(apply_key(view, Key.LEFT), Key.RIGHT) == view
    assert apply_key(apply_key(view, Key.UP), Key.DOWN) == view


def test_zoom_in_and_out(view):
    assert apply_key(view, Key.ZOOM_IN).scale == view.scale + 1
    assert apply_key(view, Key.ZOOM_OUT).scale == view.scale - 1


def test_zoom_out_stops_at_minimum():
    smallest = View(scale=MIN_SCALE, offset_x=0, offset_y=0)
    assert apply_key(smallest, Key.ZOOM_OUT) == smallest


def test_raw_keysym_accepted(view):
    assert apply_key(view, ord("w")) == apply_key(view, Key.UP)
    assert apply_key(view, ord("d")) == apply_key(view, Key.RIGHT)


@pytest.mark.parametrize("key", [Key.ESC, 0, ord("x"), 999999])
def test_escape_and_unknown_keys_leave_view(view, key):
    assert apply_key(view, key) == view


def test_apply_key_does_not_mutate(view):
    original = View(view.scale, view.offset_x, view.offset_y)
    apply_key(view, Key.ZOOM_IN)
    assert view == original


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"]])
def test_main_rejects_wrong_argument_count(argv):
    assert main(argv) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.fdf")]) == -1


def test_main_malformed_map(tmp_path):
    path = tmp_path / "bad.fdf"
    path.write_text("0 0 0\n0 0\n", encoding="utf-8")
    assert main([str(path)]) == -1


def test_main_empty_map(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == -1