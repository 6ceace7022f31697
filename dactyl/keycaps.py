from solid import *

from .switches import plate_thickness

sa_length = 18.25
sa_double_length = 37.5

# lift of the keycap's bottom edge above the top of the plate
sa_cap_lift = 5

def _layer(points, z):
    return translate([0, 0, z])(
        linear_extrude(height=0.1, center=True, twist=0, convexity=0)(polygon(points)))

def _rect(half_x, half_y):
    return [[half_x, half_y], [half_x, -half_y], [-half_x, -half_y], [-half_x, half_y]]

def _sa_1u():
    bl2 = 18.5 / 2
    m = 17 / 2
    cap = hull()(
        _layer(_rect(bl2, bl2), 0.05),
        _layer(_rect(m, m), 6),
        _layer(_rect(6, 6), 12))
    return cap, [220 / 255, 163 / 255, 163 / 255, 1]

def _sa_1_5u():
    bl2 = sa_length / 2
    bw2 = 28 / 2
    cap = hull()(
        _layer(_rect(bw2, bl2), 0.05),
        _layer([[11, 6], [-11, 6], [-11, -6], [11, -6]], 12))
    return cap, [240 / 255, 223 / 255, 175 / 255, 1]

def _sa_2u():
    bl2 = sa_double_length / 2
    bw2 = sa_length / 2
    cap = hull()(
        _layer(_rect(bw2, bl2), 0.05),
        _layer(_rect(6, 16), 12))
    return cap, [127 / 255, 159 / 255, 127 / 255, 1]

SA_CAPS = {
    1: _sa_1u,
    1.5: _sa_1_5u,
    2: _sa_2u,
}

def sa_cap(units=1):
    """SA profile keycap silhouette, ``units`` wide, sitting over a plate at the origin."""
    if units not in SA_CAPS:
        raise ValueError(f"no SA keycap preset for {units}u, expected one of {sorted(SA_CAPS)}")
    cap, rgba = SA_CAPS[units]()
    return color(rgba)(translate([0, 0, sa_cap_lift + plate_thickness])(cap))
