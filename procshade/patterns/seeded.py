# procshade/patterns/seeded.py
import numpy as np

from procshade.color import Color
from procshade.fragment import Fragment
from procshade.seed import monochrome_seed, tint_seed
from procshade.settings import MonochromeSettings, RandomTintSettings
from procshade.uniforms import Uniforms


def random_tint_pattern(
    fragment: Fragment, uniforms: Uniforms, params: RandomTintSettings
) -> Color:
    # Seeded from time only, so the whole frame shares one color
    rng = np.random.default_rng(tint_seed(uniforms.time))
    r, g, b = rng.integers(0, 255, size=3, endpoint=True)

    return Color(int(r), int(g), int(b)) * fragment.intensity


def monochrome_pattern(
    fragment: Fragment, uniforms: Uniforms, params: MonochromeSettings
) -> Color:
    pos = fragment.vertex_position
    rng = np.random.default_rng(monochrome_seed(uniforms.time, pos.x, pos.y))
    value = int(rng.integers(0, 100, endpoint=True))

    color = params.low_color if value < params.threshold else params.high_color

    return color * fragment.intensity
