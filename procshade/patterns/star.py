# procshade/patterns/star.py
import math

from procshade.color import Color
from procshade.fragment import Fragment
from procshade.settings import StarSettings
from procshade.types import Vector3
from procshade.uniforms import Uniforms


def pulsate(time: float, params: StarSettings) -> float:
    """Slow sinusoidal breathing of the surface along z."""
    phase = time * params.time_scale * params.base_frequency
    if not math.isfinite(phase):
        return math.nan
    return math.sin(phase) * params.pulsate_amplitude


def star_noise(position: Vector3, uniforms: Uniforms, params: StarSettings) -> float:
    """
    Average of two 3D samples. The second one is taken far away from the
    first so the two behave like independent fields.
    """
    zoom = params.zoom
    p = pulsate(uniforms.time, params)
    far = position + Vector3.splat(params.decorrelation_offset)

    n1 = uniforms.noise.sample_3d(
        position.x * zoom,
        position.y * zoom,
        (position.z + p) * zoom,
    )
    n2 = uniforms.noise.sample_3d(
        far.x * zoom,
        far.y * zoom,
        (far.z + p) * zoom,
    )
    return (n1 + n2) * 0.5


def star_pattern(
    fragment: Fragment, uniforms: Uniforms, params: StarSettings
) -> Color:
    pos = fragment.vertex_position
    position = Vector3(pos.x, pos.y, fragment.depth)

    noise_value = star_noise(position, uniforms, params)

    # lerp clamps the blend factor into [0, 1]
    color = params.dark_color.lerp(params.bright_color, noise_value)

    return color * fragment.intensity
