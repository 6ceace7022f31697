from solid import *

from .switches import mount_height, mount_width, plate_thickness

post_size = 0.1
post_adj = post_size / 2

# length of the first downward-sloping part of the wall
WALL_Z_OFFSET = -15
# x and/or y offset of the first downward-sloping part of the wall
WALL_XY_OFFSET = 5

def web_post(web_thickness):
    return translate([0, 0, web_thickness / -2 + plate_thickness])(
        cube([post_size, post_size, web_thickness], center=True))

def web_post_tr(web_thickness):
    return translate([mount_width / 2 - post_adj, mount_height / 2 - post_adj, 0])(web_post(web_thickness))

def web_post_tl(web_thickness):
    return translate([mount_width / -2 + post_adj, mount_height / 2 - post_adj, 0])(web_post(web_thickness))

def web_post_bl(web_thickness):
    return translate([mount_width / -2 + post_adj, mount_height / -2 + post_adj, 0])(web_post(web_thickness))

def web_post_br(web_thickness):
    return translate([mount_width / 2 - post_adj, mount_height / -2 + post_adj, 0])(web_post(web_thickness))

def wall_locate1(wall_thickness, dx, dy):
    return [dx * wall_thickness, dy * wall_thickness, -1]

def wall_locate2(wall_thickness, dx, dy):
    return [dx * WALL_XY_OFFSET, dy * WALL_XY_OFFSET, WALL_Z_OFFSET]

def wall_locate3(wall_thickness, dx, dy):
    return [dx * (WALL_XY_OFFSET + wall_thickness), dy * (WALL_XY_OFFSET + wall_thickness), WALL_Z_OFFSET]
