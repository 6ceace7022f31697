import math
from enum import Enum
from typing import NamedTuple

from solid import *

from .placement import diff_coords, key_position, sum_coords
from .switches import mount_height, mount_width
from .walls import wall_locate3

LEFT_WALL_X_OFFSET = 10
LEFT_WALL_Z_OFFSET = 3

class Edge(int, Enum):
    # y direction of a point relative to the centre of a key mount
    FRONT = -1
    CENTER = 0
    BACK = 1

class Anchor(NamedTuple):
    """A board-space point parts are hung from; rotation is about Z, in radians."""
    x: float
    y: float
    z: float = 0.0
    rotation: float = 0.0

    @classmethod
    def of(cls, point, rotation=0.0):
        x, y, z = point
        return cls(x, y, z, rotation)

    @property
    def position(self):
        return [self.x, self.y, self.z]

    def place(self, shape):
        if self.rotation:
            shape = rotate(a=math.degrees(self.rotation), v=[0, 0, 1])(shape)
        return translate(self.position)(shape)

def _edge_key_position(config, column, row, edge):
    corner = [mount_width * -0.5, Edge(edge) * mount_height * 0.5, 0]
    return diff_coords(
        key_position(config, column, row, corner),
        [LEFT_WALL_X_OFFSET, 0, LEFT_WALL_Z_OFFSET])

def left_key_position(config, row, edge):
    """Where the left wall hangs off column 0 of ``row``."""
    return _edge_key_position(config, 0, row, edge)

def index_key_position(config, row, edge):
    return _edge_key_position(config, 1, row, edge)

def left_key_anchor(config, row, edge=Edge.CENTER):
    return Anchor.of(left_key_position(config, row, edge))

def index_key_anchor(config, row, edge=Edge.CENTER):
    return Anchor.of(index_key_position(config, row, edge))

def wall_anchor(config, column, row, dx, dy):
    """Foot of the outer wall past the edge of key (column, row) in direction (dx, dy)."""
    edge = [dx * mount_width / 2, dy * mount_height / 2, 0]
    return Anchor.of(key_position(
        config, column, row,
        sum_coords(wall_locate3(config.wall_thickness, dx, dy), edge)))
