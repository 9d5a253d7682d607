"""Type definitions for the geometry model.

Contains enums and data classes shared by every geometry kind.
"""

from dataclasses import dataclass, field
from enum import Enum

from maplayer.config import get_settings
from maplayer.core.exceptions import InvalidStyleError


class GeometryKind(str, Enum):
    """Concrete geometry kinds a layer can hold."""

    POINT = "point"
    LINE = "line"
    POLYGON = "polygon"
    CIRCLE = "circle"


def _check_channel(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidStyleError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise InvalidStyleError(f"{name} must be between 0 and 255, got {value}")
    return value


def _default_rgb() -> tuple[int, int, int]:
    return tuple(get_settings().default_rgb)


def _default_opacity() -> int:
    return get_settings().default_opacity


@dataclass
class Style:
    """Colour and opacity of a geometry, each channel in [0, 255]."""

    rgb: tuple[int, int, int] = field(default_factory=_default_rgb)
    opacity: int = field(default_factory=_default_opacity)

    def __post_init__(self):
        if len(self.rgb) != 3:
            raise InvalidStyleError(f"rgb must have 3 channels, got {len(self.rgb)}")
        red, green, blue = self.rgb
        self.rgb = (
            _check_channel("red", red),
            _check_channel("green", green),
            _check_channel("blue", blue),
        )
        _check_channel("opacity", self.opacity)

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        self.rgb = (
            _check_channel("red", red),
            _check_channel("green", green),
            _check_channel("blue", blue),
        )

    def set_opacity(self, opacity: int) -> None:
        self.opacity = _check_channel("opacity", opacity)
