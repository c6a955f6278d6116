"""Phong surface material.

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.materials.material import Material
    >>> matte_red = Material(color=Color(1.0, 0.2, 0.2), specular=0.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.color import WHITE, Color

if TYPE_CHECKING:
    from whitted.materials.patterns import Pattern


@dataclass(frozen=True)
class Material:
    """Surface appearance parameters for the Phong reflection model.

    Attributes:
        color: Base surface colour (used when ``pattern`` is None).
        ambient: Fraction of light reflected regardless of geometry.
        diffuse: Fraction of light reflected from matte (Lambertian) surface.
        specular: Strength of the specular highlight.
        shininess: Exponent controlling highlight size; larger is tighter.
        pattern: Optional surface pattern overriding ``color``.

    Raises:
        ValueError: If any coefficient is negative.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {getattr(self, name)}")
        if min(self.color) < 0.0:
            raise ValueError(f"Material color channels must be non-negative, got {self.color}")
