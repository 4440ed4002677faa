"""Stroke style profiles.

Every stroke carries its own :class:`Style`; there is no "current style"
register on a surface.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class StyleProfile(str, Enum):
    DEFAULT = "default"
    MARKER = "marker"
    IMPORTANT = "important"
    DEBUG = "debug"


# (color, width in surface units)
PROFILE_STROKES: Dict[StyleProfile, Tuple[str, float]] = {
    StyleProfile.DEFAULT: ("black", 4.0),
    StyleProfile.MARKER: ("black", 3.0),
    StyleProfile.IMPORTANT: ("red", 4.0),
    StyleProfile.DEBUG: ("blue", 4.0),
}

LINE_CAP = "round"


@dataclass(frozen=True)
class Style:
    profile: StyleProfile = StyleProfile.DEFAULT
    scale: float = 1.0

    @property
    def color(self) -> str:
        return PROFILE_STROKES[self.profile][0]

    @property
    def width(self) -> float:
        return PROFILE_STROKES[self.profile][1] * self.scale

    @property
    def line_cap(self) -> str:
        return LINE_CAP

    def scaled(self, factor: float) -> "Style":
        return replace(self, scale=self.scale * factor)


StyleLike = Union[Style, StyleProfile, str, None]


def resolve_style(value: StyleLike, default: StyleProfile = StyleProfile.DEFAULT) -> Style:
    """Coerce a profile name, profile or style into a :class:`Style`.

    Unknown profile names raise ``ValueError``.
    """

    if isinstance(value, Style):
        return value
    if value is None:
        return Style(default)
    return Style(StyleProfile(value))


def scaled_style(value: StyleLike, scale: Optional[float], default: StyleProfile) -> Style:
    style = resolve_style(value, default)
    if scale is None or scale == 1.0:
        return style
    return style.scaled(scale)
