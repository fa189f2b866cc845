"""
Plücker: line coordinates in 3D homogeneous space for PyTorch

A small library representing lines as six-component Plücker coordinates,
with batched geometric predicates built on torch tensors.

Key Features:
- Plucker value type over (..., 6) tensors with component-wise algebra
- Construction from pairs of 3D or homogeneous points
- Klein quadric bilinear form and line validity checks
- Parallelism, intersection and passing orientation of line pairs
- Distance to and closest point to the origin
- Primary and dual basis element accessors

API Design:
- All values are tensors; leading dimensions are batch dimensions
- Predicates return boolean tensors of the broadcast batch shape
- Tolerance checks take an optional eps (default chosen by dtype)

Example:
    >>> import torch
    >>> from plucker import plucker_3d, intersects
    >>> x_axis = plucker_3d(torch.zeros(3), torch.tensor([1.0, 0.0, 0.0]))
    >>> y_axis = plucker_3d(torch.zeros(3), torch.tensor([0.0, 1.0, 0.0]))
    >>> bool(intersects(x_axis, y_axis))
    True
"""

__version__ = "0.1.0"
__author__ = "Plucker Contributors"

from . import core
from . import geometry
from . import utils

from .geometry import (
    Plucker,
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
    "core",
    "geometry",
    "utils",
    "Plucker",
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
