# procshade/settings.py
from __future__ import annotations

import math
import os
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional, Union

from procshade.color import Color

PATTERN_ENV_VAR = "PROCSHADE_PATTERN"


class PatternKind(str, Enum):
    """Procedural coloring strategy used by the fragment stage."""

    RANDOM_TINT = "random_tint"
    MONOCHROME = "monochrome"
    DALMATIAN = "dalmatian"
    CLOUD = "cloud"
    CELLULAR = "cellular"
    STAR = "star"


def _check_zoom(zoom: float) -> None:
    if not math.isfinite(zoom):
        raise ValueError(f"zoom must be finite, got {zoom}")


@dataclass(frozen=True, slots=True)
class RandomTintSettings:
    """One random color per whole second of time."""


@dataclass(frozen=True, slots=True)
class MonochromeSettings:
    """Black or white from a time and position seeded draw."""

    threshold: int = 50
    low_color: Color = field(default_factory=Color.black)
    high_color: Color = field(default_factory=Color.white)


@dataclass(frozen=True, slots=True)
class DalmatianSettings:
    """Hard-edged spots."""

    zoom: float = 100.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    threshold: float = 0.5
    spot_color: Color = field(default_factory=Color.white)
    base_color: Color = field(default_factory=Color.black)

    def __post_init__(self):
        _check_zoom(self.zoom)


@dataclass(frozen=True, slots=True)
class CloudSettings:
    """Clouds drifting along x over a blue sky."""

    zoom: float = 100.0
    offset_x: float = 100.0
    offset_y: float = 100.0
    drift_speed: float = 0.5
    threshold: float = 0.5
    cloud_color: Color = field(default_factory=Color.white)
    sky_color: Color = Color(30, 97, 145)

    def __post_init__(self):
        _check_zoom(self.zoom)


@dataclass(frozen=True, slots=True)
class CellularSettings:
    """Plant cells. Bands are upper bounds (exclusive) checked in order."""

    zoom: float = 30.0
    offset_x: float = 50.0
    offset_y: float = 50.0
    bands: tuple[float, float, float] = (0.15, 0.7, 0.75)
    colors: tuple[Color, Color, Color, Color] = (
        Color(85, 107, 47),  # dark olive green
        Color(124, 252, 0),  # light green
        Color(34, 139, 34),  # forest green
        Color(173, 255, 47),  # yellow green
    )

    def __post_init__(self):
        _check_zoom(self.zoom)
        if len(self.colors) != len(self.bands) + 1:
            raise ValueError(
                f"Need {len(self.bands) + 1} colors for {len(self.bands)} bands"
            )
        if any(a >= b for a, b in zip(self.bands, self.bands[1:])):
            raise ValueError(f"bands must be ascending, got {self.bands}")


@dataclass(frozen=True, slots=True)
class StarSettings:
    """Pulsating star surface from two decorrelated 3D noise samples."""

    zoom: float = 1000.0
    time_scale: float = 0.01
    base_frequency: float = 0.6
    pulsate_amplitude: float = 0.5
    decorrelation_offset: float = 1000.0
    dark_color: Color = Color(255, 193, 108)
    bright_color: Color = Color(255, 253, 190)

    def __post_init__(self):
        _check_zoom(self.zoom)

    @staticmethod
    def lava() -> StarSettings:
        return StarSettings(bright_color=Color(255, 240, 0))


PatternParams = Union[
    RandomTintSettings,
    MonochromeSettings,
    DalmatianSettings,
    CloudSettings,
    CellularSettings,
    StarSettings,
]

_FIELD_FOR_KIND: dict[PatternKind, str] = {
    PatternKind.RANDOM_TINT: "random_tint",
    PatternKind.MONOCHROME: "monochrome",
    PatternKind.DALMATIAN: "dalmatian",
    PatternKind.CLOUD: "cloud",
    PatternKind.CELLULAR: "cellular",
    PatternKind.STAR: "star",
}


@dataclass(frozen=True, slots=True)
class ShadingSettings:
    """
    Fragment stage configuration.

    pattern picks the active generator once; the other fields hold the
    tunables of every variant so any of them can be switched in.
    """

    pattern: PatternKind = PatternKind.STAR
    random_tint: RandomTintSettings = field(default_factory=RandomTintSettings)
    monochrome: MonochromeSettings = field(default_factory=MonochromeSettings)
    dalmatian: DalmatianSettings = field(default_factory=DalmatianSettings)
    cloud: CloudSettings = field(default_factory=CloudSettings)
    cellular: CellularSettings = field(default_factory=CellularSettings)
    star: StarSettings = field(default_factory=StarSettings)

    def __post_init__(self):
        object.__setattr__(self, "pattern", parse_pattern(self.pattern))

    def params(self) -> PatternParams:
        return getattr(self, _FIELD_FOR_KIND[self.pattern])

    def with_pattern(self, pattern: Union[PatternKind, str]) -> ShadingSettings:
        return replace(self, pattern=parse_pattern(pattern))

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> ShadingSettings:
        """
        Builds settings from plain data, e.g. a parsed config file:

            {"pattern": "cloud", "cloud": {"zoom": 50, "sky_color": 0x1E6191}}
        """
        data = dict(data)
        kwargs: dict[str, Any] = {}

        if "pattern" in data:
            kwargs["pattern"] = parse_pattern(data.pop("pattern"))

        for name in _FIELD_FOR_KIND.values():
            if name not in data:
                continue
            cls = type(getattr(DEFAULT_SETTINGS, name))
            kwargs[name] = _build_params(cls, data.pop(name))

        if data:
            raise ValueError(f"Unknown shading settings: {sorted(data)}")

        return ShadingSettings(**kwargs)

    @staticmethod
    def from_env(base: Optional[ShadingSettings] = None) -> ShadingSettings:
        settings = base or DEFAULT_SETTINGS
        raw = os.getenv(PATTERN_ENV_VAR)
        if raw is None or not raw.strip():
            return settings
        return settings.with_pattern(raw)


def parse_pattern(value: Union[PatternKind, str]) -> PatternKind:
    if isinstance(value, PatternKind):
        return value
    try:
        return PatternKind(str(value).strip().lower())
    except ValueError:
        options = ", ".join(k.value for k in PatternKind)
        raise ValueError(
            f"Unknown pattern {value!r}, expected one of: {options}"
        ) from None


def _parse_color(value: Any) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, int):
        return Color.from_hex(value)
    r, g, b = value
    return Color(int(r), int(g), int(b))


def _build_params(cls: type, overrides: Mapping[str, Any]) -> Any:
    known = {f.name for f in fields(cls)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} keys: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in overrides.items():
        if key.endswith("_color"):
            value = _parse_color(value)
        elif key == "colors":
            value = tuple(_parse_color(v) for v in value)
        elif key == "bands":
            value = tuple(float(v) for v in value)
        elif key == "threshold" and cls is MonochromeSettings:
            value = int(value)
        else:
            value = float(value)
        kwargs[key] = value

    return cls(**kwargs)


DEFAULT_SETTINGS = ShadingSettings()
