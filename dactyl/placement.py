import math

from solid import *

from .curvature import center_row, column_radius, last_col, last_row, row_radius

# column index -> finger: 0 inner index, 1 index, 2 middle, 3 ring, 4+ pinky
DEFAULT_STAGGER = {
    2: [0, 0, -6.5],
    4: [0, 0, 6],
}

WIDE_PINKY_OFFSET = 5.5

def sum_coords(*args):
    res = [0 for i in range(0, len(args[0]))]
    for a in args:
        for i in range(0, len(res)):
            res[i] += a[i]
    return res

def diff_coords(*args):
    res = [args[0][i] for i in range(0, len(args[0]))]
    for a in range(1, len(args)):
        arg = args[a]
        for i in range(0, len(res)):
            res[i] -= arg[i]
    return res

def column_offset(config, column):
    """
    Stagger of a column as [x, y, z] in millimeters. Configured per finger
    when ``config.stagger`` is set, otherwise the built-in table.
    """
    if config.stagger:
        if column == 2:
            return list(config.stagger_middle)
        if column == 3:
            return list(config.stagger_ring)
        if column >= 4:
            return list(config.stagger_pinky)
        return list(config.stagger_index)
    return list(DEFAULT_STAGGER.get(min(column, 4), [0, 0, 0]))

def offset_for_column(config, column, row):
    # widens the outer pinky key of the bottom row to 1.5u
    if (config.use_wide_pinky
            and column == last_col(config.ncols)
            and row == last_row(config.nrows)):
        return WIDE_PINKY_OFFSET
    return 0

def apply_key_geometry(config, translate_fn, rotate_x_fn, rotate_y_fn, column, row, subject):
    """
    Moves ``subject`` from the origin to the pose of key (column, row).
    The same sequence drives shapes and points, only the three primitive
    operations differ.
    """
    alpha = config.effective_pinky_alpha if column >= 4 else config.alpha
    beta = config.beta
    row_r = row_radius(alpha, config.switch_type)
    column_r = column_radius(config, beta, config.switch_type)
    row_angle = alpha * (center_row(config.nrows) - row)
    column_angle = beta * (config.centercol - column)

    res = translate_fn([offset_for_column(config, column, row), 0, -row_r], subject)
    res = rotate_x_fn(row_angle, res)
    res = translate_fn([0, 0, row_r], res)
    res = translate_fn([0, 0, -column_r], res)
    res = rotate_y_fn(column_angle, res)
    res = translate_fn([0, 0, column_r], res)
    res = translate_fn(column_offset(config, column), res)

    res = rotate_y_fn(config.tenting_angle, res)
    res = rotate_x_fn(config.rotate_x_angle, res)
    return translate_fn([0, 0, config.z_offset], res)

def rotate_around_x(angle, position):
    c, s = math.cos(angle), math.sin(angle)
    x, y, z = position
    return [x, c * y - s * z, s * y + c * z]

def rotate_around_y(angle, position):
    c, s = math.cos(angle), math.sin(angle)
    x, y, z = position
    return [c * x + s * z, y, -s * x + c * z]

def _translate_shape(v, shape):
    return translate(v)(shape)

def _rotate_shape_x(angle, shape):
    return rotate(a=math.degrees(angle), v=[1, 0, 0])(shape)

def _rotate_shape_y(angle, shape):
    return rotate(a=math.degrees(angle), v=[0, 1, 0])(shape)

def key_place(config, column, row, shape):
    return apply_key_geometry(config, _translate_shape, _rotate_shape_x, _rotate_shape_y, column, row, shape)

def key_position(config, column, row, position):
    return apply_key_geometry(config, sum_coords, rotate_around_x, rotate_around_y, column, row, list(position))

def key_grid(config):
    return [(column, row) for column in range(config.ncols) for row in range(config.nrows)]
