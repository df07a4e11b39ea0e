# procshade/shading.py
import logging
from concurrent.futures import Executor
from functools import partial
from typing import Iterable, Optional

from procshade.color import Color
from procshade.fragment import Fragment
from procshade.patterns import PATTERNS, PatternGenerator
from procshade.settings import DEFAULT_SETTINGS, ShadingSettings
from procshade.uniforms import Uniforms
from procshade.vertex import Vertex, transform_vertex

logger = logging.getLogger(__name__)


def resolve_pattern(settings: ShadingSettings = DEFAULT_SETTINGS) -> PatternGenerator:
    """
    Binds the active pattern to its tunables.

    Resolve once per configuration and reuse the result for every fragment.
    """
    pattern = PATTERNS[settings.pattern]
    logger.info("Active fragment pattern: %s", settings.pattern.value)
    return partial(pattern, params=settings.params())


def shade_fragment(
    fragment: Fragment,
    uniforms: Uniforms,
    settings: ShadingSettings = DEFAULT_SETTINGS,
) -> Color:
    pattern = PATTERNS[settings.pattern]
    return pattern(fragment, uniforms, settings.params())


def transform_vertices(
    vertices: Iterable[Vertex],
    uniforms: Uniforms,
    executor: Optional[Executor] = None,
) -> list[Vertex]:
    """
    Runs the vertex stage over a mesh. Calls are independent, so an
    executor may evaluate them in any order.
    """
    fn = partial(transform_vertex, uniforms=uniforms)
    if executor is None:
        return [fn(v) for v in vertices]
    return list(executor.map(fn, vertices))


def shade_fragments(
    fragments: Iterable[Fragment],
    uniforms: Uniforms,
    settings: ShadingSettings = DEFAULT_SETTINGS,
    executor: Optional[Executor] = None,
) -> list[Color]:
    generator = resolve_pattern(settings)
    fn = partial(generator, uniforms=uniforms)
    if executor is None:
        return [fn(f) for f in fragments]
    return list(executor.map(fn, fragments))
