# procshade/patterns/cloud.py
from procshade.color import Color
from procshade.fragment import Fragment
from procshade.settings import CloudSettings
from procshade.uniforms import Uniforms


def cloud_pattern(
    fragment: Fragment, uniforms: Uniforms, params: CloudSettings
) -> Color:
    pos = fragment.vertex_position
    t = uniforms.time * params.drift_speed

    noise_value = uniforms.noise.sample_2d(
        pos.x * params.zoom + params.offset_x + t,
        pos.y * params.zoom + params.offset_y,
    )

    if noise_value > params.threshold:
        color = params.cloud_color
    else:
        color = params.sky_color

    return color * fragment.intensity
