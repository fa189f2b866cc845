"""
Centralized constants for the Plücker line library.

This module defines the default tolerances and the component layout used
throughout the library. Using these constants keeps the near-zero tests and
the slot ordering consistent across modules.

Usage:
    from plucker.core.constants import DEFAULT_EPS_FLOAT32

    # Use in function definitions
    def my_predicate(p, eps: float = DEFAULT_EPS_FLOAT32):
        ...
"""

# =============================================================================
# Tolerances
# =============================================================================

# Single precision near-zero threshold
DEFAULT_EPS_FLOAT32: float = 1e-6

# Double precision near-zero threshold
DEFAULT_EPS_FLOAT64: float = 1e-12

# Half precision formats carry roughly three significant digits
DEFAULT_EPS_FLOAT16: float = 1e-3
DEFAULT_EPS_BFLOAT16: float = 1e-2

# Integer and boolean scalars are compared exactly
EXACT_EPS: float = 0.0


# =============================================================================
# Component Layout
# =============================================================================

# Number of components in a Plücker coordinate
NUM_COMPONENTS: int = 6

# Slot indices, ordered (p01, p02, p03, p23, p31, p12)
IDX_P01 = 0
IDX_P02 = 1
IDX_P03 = 2
IDX_P23 = 3
IDX_P31 = 4
IDX_P12 = 5

# Direction part U and moment part V
U_SLOTS = [IDX_P01, IDX_P02, IDX_P03]
V_SLOTS = [IDX_P23, IDX_P31, IDX_P12]

COMPONENT_NAMES = ("p01", "p02", "p03", "p23", "p31", "p12")
DUAL_COMPONENT_NAMES = ("p10", "p20", "p30", "p32", "p13", "p21")


# =============================================================================
# Line Pass Codes
# =============================================================================

# Integer codes stored in batched classification tensors
CODE_COPLANAR: int = 0
CODE_CLOCKWISE: int = 1
CODE_COUNTERCLOCKWISE: int = 2
