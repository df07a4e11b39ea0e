# procshade/patterns/cellular.py
from procshade.color import Color
from procshade.fragment import Fragment
from procshade.settings import CellularSettings
from procshade.uniforms import Uniforms


def cell_band(value: float, bands: tuple[float, ...]) -> int:
    """Index of the first band whose (exclusive) upper bound exceeds value."""
    for i, upper in enumerate(bands):
        if value < upper:
            return i
    return len(bands)


def cellular_pattern(
    fragment: Fragment, uniforms: Uniforms, params: CellularSettings
) -> Color:
    pos = fragment.vertex_position

    cell_value = abs(
        uniforms.noise.sample_2d(
            pos.x * params.zoom + params.offset_x,
            pos.y * params.zoom + params.offset_y,
        )
    )

    color = params.colors[cell_band(cell_value, params.bands)]

    return color * fragment.intensity
