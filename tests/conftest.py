import pytest

from dactyl.config import BoardConfig, SwitchType

def make_config(**overrides):
    params = dict(
        nrows=5,
        ncols=6,
        alpha=0.2967,
        beta=0.1396,
        centercol=2,
        tenting_angle=0.1047,
        switch_type=SwitchType.PLAIN,
        z_offset=13,
        wall_thickness=5,
        web_thickness=7,
        rotate_x_angle=0,
        use_hotswap=False,
        use_wide_pinky=False,
        is_right=False,
    )
    params.update(overrides)
    return BoardConfig(**params)

@pytest.fixture
def config():
    return make_config()

@pytest.fixture
def flat_config():
    # no stagger, tent, tilt or lift: the home key sits on the origin
    return make_config(stagger=True, tenting_angle=0, rotate_x_angle=0, z_offset=0)
