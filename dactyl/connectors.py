from solid import *

from .anchors import Anchor

# measured 12.75 x 14.05 x 17, with some slack
rj9_hole = [13.90, 12.75, 22]
rj9_hole_wall_thickness = 1.5
rj9_hole_wall_modifier = rj9_hole_wall_thickness * 2 # both sides of each dimension
rj9_wire_hole = [rj9_hole[0], rj9_hole[1], rj9_hole[2] / 2.6]
rj9_base_height = 11

usb_holder_size = [12.5, 13.0, 8.0]
usb_holder_thickness = 2
usb_holder_offset = [-17, 2.4, 0]

def rj9_cube():
    return cube([d + rj9_hole_wall_modifier for d in rj9_hole], center=True)

def rj9_position(anchor):
    return Anchor(anchor.x, anchor.y, rj9_base_height + rj9_hole_wall_thickness, anchor.rotation)

def rj9_space(anchor):
    """Solid block the rj9 holder occupies, to clear room in the case."""
    return rj9_position(anchor).place(rj9_cube())

def rj9_holder(anchor):
    socket = cube(rj9_hole, center=True)
    wire_z = rj9_hole[2] / 2 - rj9_wire_hole[2] / 2
    cavity = union()(
        socket,
        translate([0, rj9_hole_wall_thickness, 0])(cube(rj9_hole, center=True)),
        translate([0, -rj9_hole_wall_thickness, wire_z])(cube(rj9_wire_hole, center=True)))
    return rj9_position(anchor).place(rj9_cube() - cavity)

def _usb_anchor(anchor):
    return Anchor(
        anchor.x + usb_holder_offset[0],
        anchor.y + usb_holder_offset[1],
        (usb_holder_size[2] + usb_holder_thickness) / 2 + usb_holder_offset[2],
        anchor.rotation)

def usb_holder(anchor):
    shell = cube([usb_holder_size[0] + usb_holder_thickness,
                  usb_holder_size[1],
                  usb_holder_size[2] + usb_holder_thickness], center=True)
    return _usb_anchor(anchor).place(shell)

def usb_holder_hole(anchor):
    return _usb_anchor(anchor).place(cube(usb_holder_size, center=True))
