"""
Minimal 3-vector and homogeneous point operations.

Only what the line predicates need: dot and cross products, quadrance,
lifting a point to homogeneous coordinates and the perspective division
back down. All functions operate on the last axis and broadcast over
leading batch dimensions.
"""

from __future__ import annotations
import torch

from ..core.types import (
    Point4, ScalarTensor, TensorLike, Vector3, as_tensor, validate_last_dim,
)


def dot(a: torch.Tensor, b: torch.Tensor) -> ScalarTensor:
    """Dot product along the last axis."""
    return (a * b).sum(dim=-1)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product of (..., 3) vectors."""
    a, b = torch.broadcast_tensors(a, b)
    return torch.cross(a, b, dim=-1)


def quadrance(v: torch.Tensor) -> ScalarTensor:
    """Squared Euclidean norm along the last axis."""
    return dot(v, v)


def homogenize(p: TensorLike) -> Point4:
    """
    Lift 3D points to homogeneous coordinates with unit weight.

    Args:
        p: Points of shape (..., 3)

    Returns:
        Homogeneous points of shape (..., 4) as [x, y, z, 1]
    """
    p = as_tensor(p)
    validate_last_dim(p, 3, "point")
    w = torch.ones_like(p[..., :1])
    return torch.cat([p, w], dim=-1)


def normalize_point(h: TensorLike) -> Vector3:
    """
    Perspective division of homogeneous points.

    Points at infinity (w = 0) produce non-finite coordinates; no clamping
    is applied.

    Args:
        h: Homogeneous points of shape (..., 4)

    Returns:
        Cartesian points of shape (..., 3)
    """
    h = as_tensor(h)
    validate_last_dim(h, 4, "homogeneous point")
    return h[..., :3] / h[..., 3:]
