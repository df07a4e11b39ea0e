# procshade/preview.py
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from procshade.fragment import Fragment
from procshade.settings import DEFAULT_SETTINGS, ShadingSettings
from procshade.shading import resolve_pattern
from procshade.types import Vector3
from procshade.uniforms import Uniforms


def render_swatch(
    uniforms: Uniforms,
    settings: ShadingSettings = DEFAULT_SETTINGS,
    width: int = 64,
    height: int = 64,
    depth: float = 0.0,
    intensity: float = 1.0,
) -> np.ndarray:
    """
    Shades a flat quad whose surface positions span [-1, 1] on x and y.
    Returns an (height, width, 3) uint8 RGB buffer, row 0 at the top.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Swatch size must be positive, got {width}x{height}")

    generator = resolve_pattern(settings)
    xs = np.linspace(-1.0, 1.0, width)
    ys = np.linspace(1.0, -1.0, height)

    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    for iy, y in enumerate(ys):
        for ix, x in enumerate(xs):
            frag = Fragment(
                vertex_position=Vector3(float(x), float(y), depth),
                depth=depth,
                intensity=intensity,
            )
            pixels[iy, ix] = generator(frag, uniforms).to_tuple()

    return pixels


def save_swatch(
    path: Union[str, Path],
    uniforms: Uniforms,
    settings: ShadingSettings = DEFAULT_SETTINGS,
    width: int = 64,
    height: int = 64,
) -> Path:
    path = Path(path)
    pixels = render_swatch(uniforms, settings, width, height)
    Image.fromarray(pixels).save(path)
    return path
