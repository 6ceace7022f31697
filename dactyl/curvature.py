import math

from .errors import ConfigurationError
from .switches import cap_top_height, mount_height, mount_width

# extra height between two keys in a column
EXTRA_HEIGHT = 1.0

def extra_width(nrows):
    """Extra width between two keys in a row."""
    return 3.5 if nrows > 5 else 2.5

def center_row(nrows):
    """
    Row sitting at the bottom of the row curve. Rows are counted from the
    top (function row first), so the home row is the third from the end.
    """
    subtractor = {3: 2.5, 2: 2}.get(nrows, 3)
    return nrows - subtractor

def last_row(nrows):
    return nrows - 1

def corner_row(nrows):
    return nrows - 2

def middle_row(nrows):
    return nrows - 3

def last_col(ncols):
    return ncols - 1

def _bend_radius(span, angle, switch_type, name):
    if math.sin(angle / 2) == 0:
        raise ConfigurationError(f"{name} must be a non-zero bend angle, got {angle!r}")
    return (span / 2) / math.sin(angle / 2) + cap_top_height(switch_type)

def row_radius(alpha, switch_type):
    return _bend_radius(mount_height + EXTRA_HEIGHT, alpha, switch_type, "alpha")

def column_radius(config, beta, switch_type):
    return _bend_radius(mount_width + extra_width(config.nrows), beta, switch_type, "beta")
