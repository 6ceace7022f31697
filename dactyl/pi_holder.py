from solid import *

from .config import Side
from .screws import (
    hex_screw_slit,
    m3_hex_screw_slit_length,
    plate_hole_bottom_radius,
    plate_hole_top_radius,
    screw_bolt_holder,
)

pi_holder_inner_screw = 2.7
pi_holder_outer_screw = 4

pi_holder_x_hole_distance = 11.2
pi_holder_y_hole_distance = 46.85

pi_holder_reset_x = 2
pi_holder_reset_y = 37.3

plate_screw_hole_offset = 4.5

def pi_holder_screw_hole(x, y, z, thickness, segments=30):
    return translate([x, y, z])(union()(
        linear_extrude(height=thickness, center=False)(
            circle(r=pi_holder_inner_screw / 2, segments=segments)),
        linear_extrude(height=thickness - 1, center=False)(
            circle(r=pi_holder_outer_screw / 2, segments=segments))))

def pi_holder_reset_hole(thickness, segments=30):
    return cylinder(r=pi_holder_inner_screw / 2, h=thickness, center=False, segments=segments)

def reset_hole_x(side):
    # the board is flipped on the other half, so the button moves across
    match Side(side):
        case Side.LEFT:
            return pi_holder_reset_x
        case Side.RIGHT:
            return pi_holder_x_hole_distance - pi_holder_reset_x

def pi_holder_holes(thickness, side, segments=30):
    """The board's four mounting holes plus the reset button access hole."""
    res = union()
    for x, y in [
        [pi_holder_x_hole_distance, 0],
        [pi_holder_x_hole_distance, pi_holder_y_hole_distance],
        [0, pi_holder_y_hole_distance],
        [0, 0],
    ]:
        res.add(pi_holder_screw_hole(x, y, 0, thickness, segments=segments))
    res.add(translate([reset_hole_x(side), pi_holder_reset_y, 0])(
        pi_holder_reset_hole(thickness, segments=segments)))
    return res

def pi_holder_holder_screw_holes(hole):
    """Three copies of ``hole`` where the holder plate is screwed to the case."""
    center_x = pi_holder_x_hole_distance / 2
    center_y = pi_holder_y_hole_distance / 2
    return union()(
        translate([center_x + plate_screw_hole_offset, center_y, 0])(hole),
        translate([center_x - plate_screw_hole_offset, center_y, 0])(hole),
        translate([center_x, center_y - plate_screw_hole_offset * 2, 0])(hole))

def pi_holder(thickness, side=Side.RIGHT, segments=30):
    plate = translate([-pi_holder_outer_screw, -pi_holder_outer_screw, 0])(
        cube([pi_holder_x_hole_distance + 2 * pi_holder_outer_screw,
              pi_holder_y_hole_distance + 2 * pi_holder_outer_screw,
              thickness], center=False))
    plate_screw_hole = union()(
        hex_screw_slit(m3_hex_screw_slit_length / 2, thickness - 0.4),
        hex_screw_slit(2, thickness))
    return difference()(
        plate,
        pi_holder_holder_screw_holes(plate_screw_hole),
        pi_holder_holes(thickness, side, segments=segments))

def pi_holder_holder(thickness, side, segments=30):
    """Screw posts and reset hole in the case floor under the holder plate."""
    hole = screw_bolt_holder(plate_hole_bottom_radius, plate_hole_top_radius, thickness, segments=segments)
    return union()(
        pi_holder_holder_screw_holes(hole),
        translate([reset_hole_x(side), pi_holder_reset_y, 0])(
            pi_holder_reset_hole(thickness, segments=segments)))
