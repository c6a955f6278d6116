"""Point light sources."""

from dataclasses import dataclass

from whitted.core.color import Color
from whitted.core.tuples import Tuple4


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting from a single point (hard shadows only).

    Attributes:
        position: Location of the light in world space.
        intensity: Colour and brightness of the emitted light.
    """

    position: Tuple4
    intensity: Color
