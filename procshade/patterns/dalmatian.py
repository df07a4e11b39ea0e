# procshade/patterns/dalmatian.py
from procshade.color import Color
from procshade.fragment import Fragment
from procshade.settings import DalmatianSettings
from procshade.uniforms import Uniforms


def dalmatian_pattern(
    fragment: Fragment, uniforms: Uniforms, params: DalmatianSettings
) -> Color:
    pos = fragment.vertex_position

    noise_value = uniforms.noise.sample_2d(
        (pos.x + params.offset_x) * params.zoom,
        (pos.y + params.offset_y) * params.zoom,
    )

    # Hard cut: exactly on the threshold counts as base
    if noise_value < params.threshold:
        color = params.spot_color
    else:
        color = params.base_color

    return color * fragment.intensity
