"""Materials module for surface appearance and illumination.

Components:
    material: Phong material parameters (colour, ambient, diffuse,
        specular, shininess, optional pattern)
    lights: Point light sources
    lighting: Phong local illumination with the in-shadow switch
    patterns: Stripe, gradient, ring and checker surface patterns
"""

from .lighting import lighting, surface_color
from .lights import PointLight
from .material import Material
from .patterns import (
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "PointLight",
    "lighting",
    "surface_color",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckerPattern",
]
