import math
from enum import Enum

from solid import *

from .anchors import Anchor, Edge, left_key_position
from .curvature import last_col, last_row
from .placement import diff_coords, key_position, sum_coords
from .switches import mount_height, mount_width
from .walls import wall_locate2, wall_locate3

screw_insert_height = 6
screw_insert_bottom_radius = 5.55 / 2
screw_insert_top_radius = 5.55 / 2

# material around the insert in the case wall
screw_insert_outer_extra_radius = 1.6
screw_insert_outer_extra_height = 1.5

plate_hole_bottom_radius = 2
plate_hole_top_radius = 3.1

m3_hex_screw_slit_length = 5.9 # height of an M3 hex bolt hexagon == 2 * apothem

class InsertKind(Enum):
    OUTER = "outer-hole"
    INNER = "inner-hole"
    PLATE = "plate-hole"

class WallShift(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

def hexagon_side_length(apothem):
    return 2 * apothem * math.tan(math.pi / 6)

def hex_screw_slit(hex_apothem, height):
    """Three slits 60 degrees apart whose union grips a hex bolt head."""
    side = hexagon_side_length(hex_apothem)
    return union()(*[
        translate([0, 0, height / 2])(rotate(a=angle, v=[0, 0, 1])(
            cube([side, hex_apothem * 2, height], center=True)))
        for angle in [0, 60, 120]])

def hex_bolt_hole_shape(height, segments=30):
    apothem = m3_hex_screw_slit_length / 2
    return hull()(
        hex_screw_slit(apothem, height),
        translate([0, 0, height])(sphere(r=hexagon_side_length(apothem), segments=segments)))

def hex_bolt_case_shape(bottom_radius, top_radius, height, segments=30):
    return union()(
        cylinder(r1=bottom_radius, r2=top_radius, h=height, center=False, segments=segments),
        translate([0, 0, height])(sphere(r=top_radius, segments=segments)))

def screw_bolt_holder(bottom_radius, top_radius, height, segments=30):
    return union()(
        cylinder(r=bottom_radius, h=height, center=False, segments=segments),
        cylinder(r=top_radius, h=height - 1, center=False, segments=segments))

def screw_insert_shift(config, column, row):
    """
    Which wall an insert for key (column, row) is pushed onto. Outer
    columns win over the first and last rows.
    """
    shift_right = column == last_col(config.ncols)
    shift_left = column == 0
    on_column_edge = shift_left or shift_right
    if not on_column_edge and row == 0:
        return WallShift.UP
    if not on_column_edge and row >= last_row(config.nrows):
        return WallShift.DOWN
    if shift_left:
        return WallShift.LEFT
    return WallShift.RIGHT

def screw_insert_position(config, column, row):
    wall_thickness = config.wall_thickness
    match screw_insert_shift(config, column, row):
        case WallShift.UP:
            position = key_position(config, column, row,
                sum_coords(wall_locate2(wall_thickness, 0, 1), [0, mount_height / 2, 0]))
        case WallShift.DOWN:
            position = key_position(config, column, row,
                diff_coords(wall_locate2(wall_thickness, 0, -1), [0, mount_height / 2, 0]))
        case WallShift.LEFT:
            position = sum_coords(
                left_key_position(config, row, Edge.CENTER),
                wall_locate3(wall_thickness, -1, 0))
        case WallShift.RIGHT:
            position = key_position(config, column, row,
                sum_coords(wall_locate2(wall_thickness, 1, 0), [mount_width / 2, 0, 0]))
    # inserts stand on the floor
    return Anchor(position[0], position[1], 0)

def screw_insert(config, column, row, bottom_radius, top_radius, height, kind, segments=30):
    match InsertKind(kind):
        case InsertKind.OUTER:
            shape = hex_bolt_case_shape(bottom_radius, top_radius, height, segments=segments)
        case InsertKind.INNER:
            shape = hex_bolt_hole_shape(height, segments=segments)
        case InsertKind.PLATE:
            shape = screw_bolt_holder(bottom_radius, top_radius, height, segments=segments)
    return screw_insert_position(config, column, row).place(shape)

def screw_insert_holes(config, positions, segments=30):
    return union()(*[
        screw_insert(config, column, row,
                     screw_insert_bottom_radius,
                     screw_insert_top_radius,
                     screw_insert_height,
                     InsertKind.INNER,
                     segments=segments)
        for column, row in positions])

def screw_insert_outers(config, positions, segments=30):
    return union()(*[
        screw_insert(config, column, row,
                     screw_insert_bottom_radius + screw_insert_outer_extra_radius,
                     screw_insert_top_radius + screw_insert_outer_extra_radius,
                     screw_insert_height + screw_insert_outer_extra_height,
                     InsertKind.OUTER,
                     segments=segments)
        for column, row in positions])

def screw_insert_screw_holes(config, positions, thickness, segments=30):
    return union()(*[
        screw_insert(config, column, row,
                     plate_hole_bottom_radius,
                     plate_hole_top_radius,
                     thickness,
                     InsertKind.PLATE,
                     segments=segments)
        for column, row in positions])
