"""
Geometry module.

Implements Plücker coordinates for lines in 3D homogeneous space, the
twelve basis element accessors, and the predicates relating lines to each
other and to the origin.
"""

from .vector import (
    dot,
    cross,
    quadrance,
    homogenize,
    normalize_point,
)

from .coordinates import Plucker

from .basis import (
    BasisElement,
    AntiElement,
    anti,
    basis_element,
    BASIS,
    DUAL_BASIS,
    p01, p02, p03,
    p10, p12, p13,
    p20, p21, p23,
    p30, p31, p32,
)

from .lines import (
    LinePass,
    plucker,
    plucker_3d,
    bilinear,
    squared_error,
    isotropic,
    is_line,
    parallel,
    passes,
    intersects,
    coincides,
    coincides_oriented,
    quadrance_to_origin,
    closest_to_origin,
)

__all__ = [
    # Vectors
    "dot",
    "cross",
    "quadrance",
    "homogenize",
    "normalize_point",
    # Value type
    "Plucker",
    # Basis elements
    "BasisElement",
    "AntiElement",
    "anti",
    "basis_element",
    "BASIS",
    "DUAL_BASIS",
    "p01", "p02", "p03",
    "p10", "p12", "p13",
    "p20", "p21", "p23",
    "p30", "p31", "p32",
    # Lines
    "LinePass",
    "plucker",
    "plucker_3d",
    "bilinear",
    "squared_error",
    "isotropic",
    "is_line",
    "parallel",
    "passes",
    "intersects",
    "coincides",
    "coincides_oriented",
    "quadrance_to_origin",
    "closest_to_origin",
]
