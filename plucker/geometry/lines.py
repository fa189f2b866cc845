"""
Lines in Plücker coordinates: construction, validity and relationships.

Every predicate decomposes its arguments into the direction part U and the
moment part V and works with dot and cross products of those:

- U · V = 0                       the 6-tuple is a line (Klein quadric)
- U1 × U2 = 0                     the lines are parallel
- U1 · V2 + U2 · V1 = 0           the lines are coplanar; the sign of the
                                  sum gives the screw sense otherwise
- (V · V) / (U · U)               squared distance from the origin
- (V × U : U · U)                 closest point to the origin

All functions broadcast over leading batch dimensions. Tolerance checks take
an optional ``eps``; ``None`` uses the default for the dtype.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Optional
import warnings

import torch

from ..core.constants import CODE_COPLANAR, CODE_CLOCKWISE, CODE_COUNTERCLOCKWISE
from ..core.epsilon import near_zero, near_zero_vector
from ..core.types import (
    MaskTensor, ScalarTensor, TensorLike, Vector3, promote, validate_last_dim,
)
from .coordinates import Plucker, _to_uv
from .vector import cross, dot, homogenize, normalize_point


class LinePass(IntEnum):
    """
    How one line passes another when sighted along the first.

    Batched results of ``passes`` are int8 tensors holding these codes, so
    ``passes(a, b) == LinePass.COPLANAR`` gives a boolean mask.
    """

    COPLANAR = CODE_COPLANAR
    CLOCKWISE = CODE_CLOCKWISE
    COUNTERCLOCKWISE = CODE_COUNTERCLOCKWISE


# =============================================================================
# Construction
# =============================================================================

def plucker(p1: TensorLike, p2: TensorLike) -> Plucker:
    """
    Plücker coordinates of the line through two homogeneous points.

    The line is directed from the second point towards the first. For
    points (P, pw) and (Q, qw):

        U = qw * P - pw * Q
        V = P × Q

    Each component is a 2x2 minor of the stacked matrix [p1; p2].
    Coincident points give the zero coordinate, which is not a line.

    Args:
        p1, p2: Homogeneous points of shape (..., 4) as [x, y, z, w]

    Returns:
        Plucker coordinates with the broadcast batch shape
    """
    p1, p2 = promote(p1, p2)
    validate_last_dim(p1, 4, "p1")
    validate_last_dim(p2, 4, "p2")
    p1, p2 = torch.broadcast_tensors(p1, p2)

    P, pw = p1[..., :3], p1[..., 3:]
    Q, qw = p2[..., :3], p2[..., 3:]

    u = qw * P - pw * Q
    v = cross(P, Q)
    return Plucker.from_uv(u, v)


def plucker_3d(p1: TensorLike, p2: TensorLike) -> Plucker:
    """
    Plücker coordinates of the line through two 3D points.

    Directed from the second point towards the first.

    Args:
        p1, p2: Points of shape (..., 3)
    """
    p1, p2 = promote(p1, p2)
    return plucker(homogenize(p1), homogenize(p2))


# =============================================================================
# Bilinear form and validity
# =============================================================================

def bilinear(a: Plucker, b: Plucker) -> ScalarTensor:
    """
    Symmetric bilinear form of the Klein quadric.

        a | b = (U_a · V_b + U_b · V_a) / 2

    This isn't a metric: it gives rise to an isotropic quadratic space, and
    the isotropic vectors are exactly the real lines.
    """
    u1, v1 = _to_uv(a)
    u2, v2 = _to_uv(b)
    return 0.5 * (dot(u1, v2) + dot(u2, v1))


def squared_error(p: Plucker) -> ScalarTensor:
    """
    Valid Plücker coordinates have ``squared_error(p) == 0``.

    Floating point makes a mockery of this claim, so compare with
    ``near_zero`` (or use ``isotropic``).
    """
    return bilinear(p, p)


def isotropic(p: Plucker, eps: Optional[float] = None) -> MaskTensor:
    """Whether p is near-isotropic, i.e. represents a line in real 3D space."""
    return near_zero(bilinear(p, p), eps)


def is_line(p: Plucker, eps: Optional[float] = None) -> MaskTensor:
    """
    Whether p lies on the Grassmann manifold and so represents a 3D line.

    Not all 6-dimensional points correspond to a line. This tests U · V
    directly and agrees with ``isotropic``.
    """
    u, v = _to_uv(p)
    return near_zero(dot(u, v), eps)


# =============================================================================
# Relationships between lines
# =============================================================================

def parallel(a: Plucker, b: Plucker, eps: Optional[float] = None) -> MaskTensor:
    """Whether two lines are parallel (their directions are collinear)."""
    u1, _ = _to_uv(a)
    u2, _ = _to_uv(b)
    return near_zero_vector(cross(u1, u2), eps)


def passes(a: Plucker, b: Plucker, eps: Optional[float] = None) -> torch.Tensor:
    """
    Classify how line b passes line a when looking down a.

    Args:
        a: Line sighted along
        b: Line being classified

    Returns:
        int8 tensor of ``LinePass`` codes with the broadcast batch shape
    """
    u1, v1 = _to_uv(a)
    u2, v2 = _to_uv(b)
    s = dot(u1, v2) + dot(u2, v1)

    # The zero test must win over the sign test
    result = torch.where(
        s > 0,
        torch.tensor(CODE_COUNTERCLOCKWISE, dtype=torch.int8, device=s.device),
        torch.tensor(CODE_CLOCKWISE, dtype=torch.int8, device=s.device),
    )
    coplanar = torch.tensor(CODE_COPLANAR, dtype=torch.int8, device=s.device)
    return torch.where(near_zero(s, eps), coplanar, result)


def intersects(a: Plucker, b: Plucker, eps: Optional[float] = None) -> MaskTensor:
    """
    Whether two lines intersect (or nearly intersect) in a single point.

    Parallel lines never intersect, even when they are coplanar.
    """
    return ~parallel(a, b, eps) & (passes(a, b, eps) == CODE_COPLANAR)


def _scale_between(a: Plucker, b: Plucker) -> ScalarTensor:
    u1, _ = _to_uv(a)
    u2, _ = _to_uv(b)
    return dot(u1, u2) / dot(u1, u1)


def coincides(a: Plucker, b: Plucker, eps: Optional[float] = None) -> MaskTensor:
    """
    Whether a and b describe the same line, up to a nonzero scale factor.

    Orientation is ignored; see ``coincides_oriented``. Both arguments must
    have a nonzero direction part.
    """
    s = _scale_between(a, b)
    residual = Plucker(a.coords * s.unsqueeze(-1)) - b
    return parallel(a, b, eps) & residual.near_zero(eps)


def coincides_oriented(a: Plucker, b: Plucker, eps: Optional[float] = None) -> MaskTensor:
    """Whether a and b describe the same line with the same orientation."""
    return coincides(a, b, eps) & (_scale_between(a, b) > 0)


# =============================================================================
# Queries relative to the origin
# =============================================================================

def _direction_quadrance(u: Vector3, caller: str) -> ScalarTensor:
    uu = dot(u, u)
    if bool((uu == 0).any()):
        warnings.warn(
            f"{caller}: line has a zero direction part; the result is not finite",
            RuntimeWarning,
            stacklevel=3,
        )
    return uu


def quadrance_to_origin(p: Plucker) -> ScalarTensor:
    """
    The minimum squared distance of a line from the origin.

    Requires a nonzero direction part; otherwise the result is inf or nan.
    """
    u, v = _to_uv(p)
    return dot(v, v) / _direction_quadrance(u, "quadrance_to_origin")


def closest_to_origin(p: Plucker) -> Vector3:
    """
    The point on a line closest to the origin.

    Computed as the homogeneous point (V × U : U · U) followed by the
    perspective division. Requires a nonzero direction part.

    Returns:
        Points of shape (..., 3)
    """
    u, v = _to_uv(p)
    w = _direction_quadrance(u, "closest_to_origin")
    return normalize_point(torch.cat([cross(v, u), w.unsqueeze(-1)], dim=-1))
