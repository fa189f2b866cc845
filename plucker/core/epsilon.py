"""
Tolerance-based zero tests.

Floating point makes exact comparison against zero meaningless for the
quantities computed here, so every predicate goes through ``near_zero``.
Vectors (and Plücker coordinates) are near zero when their quadrance is.
"""

import logging
from typing import Optional

import torch

from .constants import (
    DEFAULT_EPS_FLOAT16,
    DEFAULT_EPS_BFLOAT16,
    DEFAULT_EPS_FLOAT32,
    DEFAULT_EPS_FLOAT64,
    EXACT_EPS,
)

logger = logging.getLogger(__name__)


_DTYPE_EPS = {
    torch.float16: DEFAULT_EPS_FLOAT16,
    torch.bfloat16: DEFAULT_EPS_BFLOAT16,
    torch.float32: DEFAULT_EPS_FLOAT32,
    torch.float64: DEFAULT_EPS_FLOAT64,
}


def tolerance_for(dtype: torch.dtype) -> float:
    """
    Default near-zero threshold for a dtype.

    Integer and boolean dtypes are exact, so their threshold is zero.
    Unlisted floating dtypes fall back to the single precision threshold.
    """
    if dtype in _DTYPE_EPS:
        return _DTYPE_EPS[dtype]
    if not dtype.is_floating_point and not dtype.is_complex:
        return EXACT_EPS
    logger.debug(f"No tolerance registered for {dtype}, using {DEFAULT_EPS_FLOAT32}")
    return DEFAULT_EPS_FLOAT32


def near_zero(x: torch.Tensor, eps: Optional[float] = None) -> torch.Tensor:
    """
    Elementwise test |x| <= eps.

    Args:
        x: Scalar tensor of any batch shape
        eps: Threshold (defaults to the dtype tolerance)

    Returns:
        Boolean tensor with the shape of x
    """
    if eps is None:
        eps = tolerance_for(x.dtype)
    return x.abs() <= eps


def near_zero_vector(v: torch.Tensor, eps: Optional[float] = None) -> torch.Tensor:
    """
    Test whether vectors along the last axis are near zero.

    Args:
        v: Tensor of shape (..., n)
        eps: Threshold on the quadrance (defaults to the dtype tolerance)

    Returns:
        Boolean tensor of shape (...)
    """
    return near_zero((v * v).sum(dim=-1), eps)
