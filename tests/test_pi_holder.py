import pytest
from solid import cube

from dactyl.config import Side
from dactyl.pi_holder import (
    pi_holder,
    pi_holder_holder,
    pi_holder_holder_screw_holes,
    pi_holder_holes,
    reset_hole_x,
)
from scad_tree import bounds, find

def test_reset_button_moves_with_the_side():
    assert reset_hole_x(Side.LEFT) == 2
    assert reset_hole_x(Side.RIGHT) == pytest.approx(9.2)
    assert reset_hole_x("left") == 2

def test_plate_covers_the_board_with_a_margin():
    lo, hi = bounds(pi_holder(3))
    assert lo == pytest.approx([-4, -4, 0])
    assert hi == pytest.approx([15.2, 50.85, 3])

def test_board_holes():
    holes = pi_holder_holes(3, Side.RIGHT)
    assert len(holes.children) == 5
    corners = [list(t.params["v"]) for t in holes.children[:4]]
    assert sorted(corners) == [[0, 0, 0], [0, 46.85, 0], [11.2, 0, 0], [11.2, 46.85, 0]]
    assert list(holes.children[4].params["v"]) == pytest.approx([9.2, 37.3, 0])

def test_holder_screw_holes_surround_the_center():
    holes = pi_holder_holder_screw_holes(cube(1))
    expected = [[10.1, 23.425, 0], [1.1, 23.425, 0], [5.6, 14.425, 0]]
    for t, offset in zip(holes.children, expected, strict=True):
        assert list(t.params["v"]) == pytest.approx(offset)

def test_case_side_holder():
    holder = pi_holder_holder(3, Side.LEFT)
    reset = holder.children[1]
    assert list(reset.params["v"]) == pytest.approx([2, 37.3, 0])
    # three posts of two stacked cylinders, plus the reset hole
    assert len(find(holder, "cylinder")) == 7

def test_plate_is_cut_by_both_hole_sets():
    plate = pi_holder(3, Side.LEFT)
    assert plate.name == "difference"
    assert len(plate.children) == 3
