import pytest

from dactyl.walls import (
    wall_locate1,
    wall_locate2,
    wall_locate3,
    web_post,
    web_post_bl,
    web_post_br,
    web_post_tl,
    web_post_tr,
)
from scad_tree import bounds

def test_wall_locates_step_outwards():
    assert wall_locate1(5, 1, 0) == [5, 0, -1]
    assert wall_locate1(3, 0, -1) == [0, -3, -1]
    assert wall_locate2(5, 0, 1) == [0, 5, -15]
    assert wall_locate2(3, -1, 0) == [-5, 0, -15]
    assert wall_locate3(5, 1, 0) == [10, 0, -15]
    assert wall_locate3(3, 0, -1) == [0, -8, -15]

def test_web_post_hangs_from_the_plate_top():
    lo, hi = bounds(web_post(7))
    assert lo == pytest.approx([-0.05, -0.05, -2])
    assert hi == pytest.approx([0.05, 0.05, 5])

@pytest.mark.parametrize("post,sx,sy", [
    (web_post_tr, 1, 1),
    (web_post_tl, -1, 1),
    (web_post_bl, -1, -1),
    (web_post_br, 1, -1),
])
def test_web_posts_sit_inside_the_mount_corners(post, sx, sy):
    lo, hi = bounds(post(4))
    center = [(a + b) / 2 for a, b in zip(lo, hi)]
    assert center[0] == pytest.approx(sx * 8.7)
    assert center[1] == pytest.approx(sy * 8.7)
    assert hi[2] == pytest.approx(5)
    assert lo[2] == pytest.approx(1)
