import pytest

from dactyl.keycaps import sa_cap
from scad_tree import bounds, find

@pytest.mark.parametrize("units,half_x,half_y", [
    (1, 9.25, 9.25),
    (1.5, 14, 9.125),
    (2, 9.125, 18.75),
])
def test_cap_footprints(units, half_x, half_y):
    lo, hi = bounds(sa_cap(units))
    assert lo == pytest.approx([-half_x, -half_y, 10])
    assert hi == pytest.approx([half_x, half_y, 22.05])

def test_cap_is_a_coloured_hull():
    cap = sa_cap(1)
    assert cap.name == "color"
    assert len(find(cap, "hull")) == 1
    assert len(find(cap, "polygon")) == 3
    assert len(find(sa_cap(2), "polygon")) == 2

def test_unknown_width_is_rejected():
    with pytest.raises(ValueError, match="1.25u"):
        sa_cap(1.25)
