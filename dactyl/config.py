import math
import tomllib
from dataclasses import MISSING, dataclass, fields
from enum import Enum

from .errors import ConfigurationError, UnsupportedSwitchType

class SwitchType(str, Enum):
    PLAIN = "plain"
    MX = "mx"
    MX_SNAP_IN = "mx-snap-in"
    ALPS = "alps"
    CHOC = "choc"
    KAILH = "kailh"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower().lstrip(":")
        name = _SWITCH_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedSwitchType(f"unsupported switch type: {value!r}") from None

_SWITCH_ALIASES = {
    "box": "plain",
    "plain-mx": "plain",
}

class Side(Enum):
    LEFT = "left"
    RIGHT = "right"

Vec3 = tuple[float, float, float]

def _vec3(name, value) -> Vec3:
    try:
        x, y, z = value
        return (float(x), float(y), float(z))
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a 3-vector, got {value!r}") from None

def _count(name, value) -> int:
    # TOML hands back floats for "6.0" and strings for quoted numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ConfigurationError(f"{name} must be a whole number, got {value!r}")
    return int(value)

@dataclass(frozen=True)
class BoardConfig:
    ncols: int
    alpha: float
    beta: float
    tenting_angle: float
    switch_type: SwitchType
    z_offset: float
    nrows: int = 5
    pinky_alpha: float | None = None
    centercol: int = 2
    web_thickness: float = 7
    rotate_x_angle: float = 0
    use_wide_pinky: bool = False
    use_hotswap: bool = False
    plate_projection: bool = False
    wall_thickness: float = 5
    stagger: bool = False
    stagger_index: Vec3 = (0, 0, 0)
    stagger_middle: Vec3 = (0, 0, 0)
    stagger_ring: Vec3 = (0, 0, 0)
    stagger_pinky: Vec3 = (0, 0, 0)
    is_right: bool = False

    def __post_init__(self):
        # frozen, so normalisation goes through object.__setattr__
        object.__setattr__(self, "switch_type", SwitchType.parse(self.switch_type))
        for name in ("stagger_index", "stagger_middle", "stagger_ring", "stagger_pinky"):
            object.__setattr__(self, name, _vec3(name, getattr(self, name)))
        for name in ("nrows", "ncols", "centercol"):
            object.__setattr__(self, name, _count(name, getattr(self, name)))
        if self.nrows < 3:
            raise ConfigurationError(f"nrows must be at least 3, got {self.nrows}")
        if self.ncols < 1:
            raise ConfigurationError(f"ncols must be at least 1, got {self.ncols}")

    @property
    def effective_pinky_alpha(self) -> float:
        return self.alpha if self.pinky_alpha is None else self.pinky_alpha

    @property
    def side(self) -> Side:
        return Side.RIGHT if self.is_right else Side.LEFT

    @classmethod
    def from_mapping(cls, mapping) -> "BoardConfig":
        """
        Build a configuration from named parameters such as ``nrows``,
        ``pinky-alpha`` or ``use-hotswap?``. The ``configuration-`` prefix
        used by older config files is accepted as well.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _field_name(key)
            if name not in known:
                raise ConfigurationError(f"unknown board parameter: {key!r}")
            kwargs[name] = value
        for f in fields(cls):
            if f.name not in kwargs and f.default is MISSING:
                raise ConfigurationError(f"missing board parameter: {f.name.replace('_', '-')!r}")
        return cls(**kwargs)

def _field_name(key):
    name = str(key).lstrip(":")
    if name.startswith("configuration-"):
        name = name[len("configuration-"):]
    return name.rstrip("?").replace("-", "_")

def load_config(path) -> BoardConfig:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return BoardConfig.from_mapping(data.get("configuration", data))

# close to the stock dactyl-manuform 5x6
DEFAULT_CONFIG = BoardConfig(
    nrows=5,
    ncols=6,
    alpha=math.pi / 12,
    beta=math.pi / 36,
    tenting_angle=math.pi / 12,
    switch_type=SwitchType.MX,
    z_offset=7,
)
