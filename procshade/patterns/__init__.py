# procshade/patterns/__init__.py
from typing import Callable

from procshade.color import Color
from procshade.fragment import Fragment
from procshade.patterns.cellular import cellular_pattern
from procshade.patterns.cloud import cloud_pattern
from procshade.patterns.dalmatian import dalmatian_pattern
from procshade.patterns.seeded import monochrome_pattern, random_tint_pattern
from procshade.patterns.star import star_pattern
from procshade.settings import PatternKind
from procshade.uniforms import Uniforms

PatternGenerator = Callable[[Fragment, Uniforms], Color]

PATTERNS: dict[PatternKind, Callable[..., Color]] = {
    PatternKind.RANDOM_TINT: random_tint_pattern,
    PatternKind.MONOCHROME: monochrome_pattern,
    PatternKind.DALMATIAN: dalmatian_pattern,
    PatternKind.CLOUD: cloud_pattern,
    PatternKind.CELLULAR: cellular_pattern,
    PatternKind.STAR: star_pattern,
}

__all__ = [
    "PATTERNS",
    "PatternGenerator",
    "random_tint_pattern",
    "monochrome_pattern",
    "dalmatian_pattern",
    "cloud_pattern",
    "cellular_pattern",
    "star_pattern",
]
