"""
Core module for the Plücker line library.

Contains:
- Constants: default tolerances and the component layout
- Types: type aliases and shape validation
- Epsilon: tolerance-based zero tests
"""

from .constants import (
    # Tolerances
    DEFAULT_EPS_FLOAT32,
    DEFAULT_EPS_FLOAT64,
    DEFAULT_EPS_FLOAT16,
    DEFAULT_EPS_BFLOAT16,
    EXACT_EPS,
    # Layout
    NUM_COMPONENTS,
    COMPONENT_NAMES,
    DUAL_COMPONENT_NAMES,
)

from .types import (
    ScalarTensor,
    MaskTensor,
    Vector3,
    Point4,
    TensorLike,
    as_tensor,
    promote,
    validate_last_dim,
)

from .epsilon import (
    tolerance_for,
    near_zero,
    near_zero_vector,
)

__all__ = [
    # Constants
    "DEFAULT_EPS_FLOAT32",
    "DEFAULT_EPS_FLOAT64",
    "DEFAULT_EPS_FLOAT16",
    "DEFAULT_EPS_BFLOAT16",
    "EXACT_EPS",
    "NUM_COMPONENTS",
    "COMPONENT_NAMES",
    "DUAL_COMPONENT_NAMES",
    # Types
    "ScalarTensor",
    "MaskTensor",
    "Vector3",
    "Point4",
    "TensorLike",
    "as_tensor",
    "promote",
    "validate_last_dim",
    # Epsilon
    "tolerance_for",
    "near_zero",
    "near_zero_vector",
]
