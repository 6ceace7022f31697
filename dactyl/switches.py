from dataclasses import dataclass
from enum import Enum

from solid import *

from .config import SwitchType
from .errors import UnsupportedSwitchType

# mx style keyswitch, in millimeters
keyswitch_width = 14.0
keyswitch_height = 14.0

alps_width = 15.6
alps_height = 13
alps_notch_width = 15.5
alps_notch_height = 1

sa_profile_key_height = 12.7
choc_profile_key_height = 3.5

plate_thickness = 5
mount_width = keyswitch_width + 3.5
mount_height = keyswitch_height + 3.5

holder_thickness = 1.65

class WallStyle(Enum):
    BOX = "box"
    ALPS = "alps"
    CHOC = "choc"

@dataclass(frozen=True)
class HotswapCradle:
    """Socket cavity under the plate; pin positions are [x, y, z] offsets."""
    holder_z: float
    plus_pins: tuple
    minus_pins: tuple
    friction_radius: float
    friction_x: float
    base_z: float
    base_depth: float
    socket_holder: bool

MX_CRADLE = HotswapCradle(
    holder_z = -1.5,
    plus_pins = ([-3.81, 2.54, 0], [3.81, 2.54, 0]),
    minus_pins = ([2.54, 5.08, 0], [-2.54, 5.08, 0]),
    friction_radius = 1.7 / 2,
    friction_x = 5,
    base_z = -2.6,
    base_depth = 8.2,
    socket_holder = False,
)

CHOC_CRADLE = HotswapCradle(
    holder_z = 1.5,
    plus_pins = ([-5, 4, 0], [5, 4, 5]),
    minus_pins = ([0, 6, 5], [0, 6, 5]),
    friction_radius = 1,
    friction_x = 5.5,
    base_z = 0.2,
    base_depth = 11.5,
    socket_holder = True,
)

@dataclass(frozen=True)
class SwitchSpec:
    profile_key_height: float
    walls: WallStyle
    side_nub: bool = False
    nub_height: float = 0
    top_wall_cutout: bool = False
    cradle: HotswapCradle | None = MX_CRADLE

SWITCHES = {
    SwitchType.PLAIN: SwitchSpec(sa_profile_key_height, WallStyle.BOX),
    SwitchType.MX: SwitchSpec(sa_profile_key_height, WallStyle.BOX, side_nub=True),
    # snap-in plates raise the nub to grip the switch's press-fit lip
    SwitchType.MX_SNAP_IN: SwitchSpec(sa_profile_key_height, WallStyle.BOX, side_nub=True, nub_height=0.75),
    SwitchType.ALPS: SwitchSpec(sa_profile_key_height, WallStyle.ALPS, cradle=None),
    SwitchType.CHOC: SwitchSpec(choc_profile_key_height, WallStyle.CHOC, cradle=CHOC_CRADLE),
    SwitchType.KAILH: SwitchSpec(sa_profile_key_height, WallStyle.BOX, top_wall_cutout=True),
}

def switch_spec(switch_type) -> SwitchSpec:
    try:
        return SWITCHES[SwitchType.parse(switch_type)]
    except KeyError:
        raise UnsupportedSwitchType(f"no switch geometry for {switch_type!r}") from None

def profile_key_height(switch_type):
    return switch_spec(switch_type).profile_key_height

def cap_top_height(switch_type):
    return plate_thickness + profile_key_height(switch_type)

def _walls(spec):
    match spec.walls:
        case WallStyle.ALPS:
            top_wall = translate([0, 2.7 / 2 + alps_height / 2, plate_thickness / 2])(
                cube([keyswitch_width + 3, 2.7, plate_thickness], center=True))
            left_wall = translate([2 / 2 + alps_width / 2, 0, plate_thickness / 2])(
                cube([2, keyswitch_height + 3, plate_thickness], center=True))
            left_wall += translate([1.5 / 2 + alps_notch_width / 2, 0, plate_thickness - alps_notch_height / 2])(
                cube([1.5, keyswitch_height + 3, 1.0], center=True))
        case WallStyle.CHOC:
            top_wall = translate([0, holder_thickness + keyswitch_height / 2, plate_thickness * 0.7])(
                cube([keyswitch_width + 3, holder_thickness, plate_thickness * 0.65], center=True))
            left_wall = translate([holder_thickness / 2 + keyswitch_width / 2, 0, plate_thickness * 0.7])(
                cube([holder_thickness, keyswitch_height + 3.3, plate_thickness * 0.65], center=True))
        case WallStyle.BOX:
            top_wall = translate([0, holder_thickness / 2 + keyswitch_height / 2, plate_thickness / 2])(
                cube([keyswitch_width + 3.3, holder_thickness, plate_thickness], center=True))
            left_wall = translate([holder_thickness / 2 + keyswitch_width / 2, 0, plate_thickness / 2])(
                cube([holder_thickness, keyswitch_height + 3.3, plate_thickness], center=True))
        case _:
            raise UnsupportedSwitchType(f"no wall geometry for {spec.walls!r}")
    return top_wall, left_wall

def side_nub(nub_height=0, segments=30):
    nub = rotate(a=90, v=[1, 0, 0])(cylinder(r=1, h=2.75, center=True, segments=segments))
    nub = translate([keyswitch_width / 2, 0, 1 + nub_height])(nub)
    return hull()(
        translate([1.5 / 2 + keyswitch_width / 2, 0, (plate_thickness + nub_height) / 2])(
            cube([1.5, 2.75, plate_thickness - nub_height], center=True)),
        nub)

def kailh_cutout():
    # TODO: z sits at 1/plate_thickness, every other wall part uses plate_thickness/2;
    # measure a Kailh box switch before moving it
    return translate([0, 1.5 / 2 + keyswitch_height / 2, 1 / plate_thickness])(
        cube([keyswitch_width / 3, 1.6, plate_thickness + 1.8], center=True))

def plate_half(switch_type, nub_segments=30):
    """One quadrant of the switch hole: the top wall and the left wall."""
    spec = switch_spec(switch_type)
    top_wall, left_wall = _walls(spec)
    if spec.top_wall_cutout:
        return (top_wall - kailh_cutout()) + left_wall
    res = top_wall + left_wall
    if spec.side_nub:
        res += side_nub(spec.nub_height, segments=nub_segments)
    return res

def _pin(radius, pos, segments):
    return translate(pos)(cylinder(r=radius, h=10, center=True, segments=segments))

def choc_socket_holder(base_z):
    height = 5.5
    thickness = 1
    return (translate([2, 5, base_z])(cube([10, 7, height], center=True))
        - translate([-0.6, 6, base_z + thickness])(cube([5, 7, height], center=True))
        - translate([5, 4, base_z + thickness])(cube([7, 7, height], center=True)))

def hotswap_holder(cradle, pin_segments=8, axis_segments=12):
    holder = translate([0, (keyswitch_height + 3) / 4, cradle.holder_z])(
        cube([keyswitch_width + 3, keyswitch_height / 2, 3], center=True))
    main_axis_hole = cylinder(r=4.0 / 2, h=10, center=True, segments=axis_segments)
    plus_holes = union()(*[_pin(3.3 / 2, p, pin_segments) for p in cradle.plus_pins])
    minus_holes = union()(*[_pin(3.3 / 2, p, pin_segments) for p in cradle.minus_pins])
    friction_holes = union()(
        _pin(cradle.friction_radius, [-cradle.friction_x, 0, 0], pin_segments),
        _pin(cradle.friction_radius, [cradle.friction_x, 0, 0], pin_segments))
    base = translate([0, 5, cradle.base_z])(cube([19, cradle.base_depth, 3.5], center=True))

    res = difference()(holder, main_axis_hole, plus_holes, minus_holes, friction_holes, base)
    if cradle.socket_holder:
        res = choc_socket_holder(cradle.base_z) + res
    return res

def single_plate(config, nub_segments=30, pin_segments=8, axis_segments=12):
    """
    Switch hole for ``config.switch_type``: a quadrant mirrored across X
    then Y, plus the optional fill-in plate and hotswap cradle.
    """
    spec = switch_spec(config.switch_type)
    half = plate_half(config.switch_type, nub_segments=nub_segments)
    res = half + mirror([0, 1, 0])(mirror([1, 0, 0])(half))
    if config.plate_projection:
        res += translate([0, 0, plate_thickness / 2])(
            cube([alps_width, alps_height, plate_thickness], center=True))
    if config.use_hotswap and spec.cradle is not None:
        res += hotswap_holder(spec.cradle, pin_segments=pin_segments, axis_segments=axis_segments)
    return res
