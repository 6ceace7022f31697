#!/bin/python3

import argparse
import sys

from solid import *

from dactyl.anchors import Edge, left_key_anchor, wall_anchor
from dactyl.config import DEFAULT_CONFIG, Side, load_config
from dactyl.connectors import rj9_holder, rj9_space, usb_holder, usb_holder_hole
from dactyl.curvature import last_col, last_row
from dactyl.keycaps import sa_cap
from dactyl.placement import key_grid, key_place, offset_for_column
from dactyl.screws import screw_insert_holes, screw_insert_outers
from dactyl.switches import single_plate
from dactyl.walls import web_post_bl, web_post_br, web_post_tl, web_post_tr

def make_plates(config):
    plate = single_plate(config)
    res = cube(0)
    for column, row in key_grid(config):
        res += key_place(config, column, row, plate)
    return res

def make_keycaps(config):
    res = cube(0)
    for column, row in key_grid(config):
        units = 1.5 if offset_for_column(config, column, row) else 1
        res += key_place(config, column, row, sa_cap(units))
    return res

def make_web(config):
    # stitch each key to its right and lower neighbours
    res = cube(0)
    t = config.web_thickness
    for column, row in key_grid(config):
        if column < last_col(config.ncols):
            res += hull()(
                key_place(config, column, row, web_post_tr(t)),
                key_place(config, column, row, web_post_br(t)),
                key_place(config, column + 1, row, web_post_tl(t)),
                key_place(config, column + 1, row, web_post_bl(t)))
        if row < last_row(config.nrows):
            res += hull()(
                key_place(config, column, row, web_post_bl(t)),
                key_place(config, column, row, web_post_br(t)),
                key_place(config, column, row + 1, web_post_tl(t)),
                key_place(config, column, row + 1, web_post_tr(t)))
    return res

def screw_positions(config):
    lr = last_row(config.nrows)
    lc = last_col(config.ncols)
    return [[0, 0], [0, lr], [3, 0], [lc, 0], [lc, lr]]

def make_model(config, with_caps=True):
    usb_anchor = wall_anchor(config, 1, 0, 0, 1)
    rj9_anchor = left_key_anchor(config, 0, Edge.BACK)
    positions = screw_positions(config)

    body = make_plates(config) + make_web(config)
    body += screw_insert_outers(config, positions)
    body -= rj9_space(rj9_anchor)
    body += rj9_holder(rj9_anchor)
    body += usb_holder(usb_anchor)
    body -= usb_holder_hole(usb_anchor)
    body -= screw_insert_holes(config, positions)

    out = body
    if with_caps:
        phantoms = make_keycaps(config).set_modifier('%')
        out += phantoms

    # the geometry is built for the right hand, the left one is its mirror
    if config.side is Side.LEFT:
        out = mirror([1, 0, 0])(out)
    return out

def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a dactyl keyboard half as OpenSCAD")
    parser.add_argument("--config", help="TOML file with board parameters")
    parser.add_argument("-o", "--output", default="out.scad", help="Output path")
    parser.add_argument("--no-caps", action="store_true", help="Leave out the keycap phantoms")
    args = parser.parse_args()

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        out = make_model(config, with_caps=not args.no_caps)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"{config.side.value} half: {config.ncols}x{config.nrows} {config.switch_type.value} keys")
    scad_render_to_file(out, args.output)
    print(f"wrote {args.output}")

    return 0

if __name__ == '__main__':
    sys.exit(main())
