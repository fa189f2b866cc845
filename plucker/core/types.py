"""
Type aliases and shape conventions for the Plücker line library.

Shape Conventions:
==================

Every geometric value is a tensor whose LAST axis holds its components and
whose leading axes are an arbitrary batch shape:

    Scalar:            (...)
    3-vector / point:  (..., 3)
    Homogeneous point: (..., 4)     # [x, y, z, w]
    Plücker line:      (..., 6)     # [p01, p02, p03, p23, p31, p12]

Binary operations broadcast their batch shapes with the usual torch rules,
so a single line can be tested against a whole batch without expanding it.

Example:
    lines_a: Tensor[B, 6]
    lines_b: Tensor[6]          # broadcast against every row of lines_a
    parallel(Plucker(lines_a), Plucker(lines_b)) -> Tensor[B] (bool)
"""

from typing import Sequence, Tuple, Union
import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Batched scalar result (distance, bilinear form value)
ScalarTensor = torch.Tensor

# Batched boolean predicate result
MaskTensor = torch.Tensor

# (..., 3) vectors and points
Vector3 = torch.Tensor

# (..., 4) homogeneous points [x, y, z, w]
Point4 = torch.Tensor

# Anything torch.as_tensor understands
TensorLike = Union[torch.Tensor, Sequence[float], float]


def as_tensor(value: TensorLike) -> torch.Tensor:
    """
    Convert a tensor-like value to a tensor.

    Tensors pass through unchanged; Python floats and sequences get torch's
    default float dtype.
    """
    if isinstance(value, torch.Tensor):
        return value
    return torch.as_tensor(value, dtype=torch.get_default_dtype())


def promote(*values: TensorLike) -> Tuple[torch.Tensor, ...]:
    """
    Convert several tensor-like values to tensors of one shared dtype.

    Each value is converted on its own, then all are cast to the promoted
    dtype (torch type promotion) and to the device of the first, so mixing
    an integer point with a float point never truncates the float one.
    """
    tensors = [as_tensor(v) for v in values]
    dtype = tensors[0].dtype
    for t in tensors[1:]:
        dtype = torch.promote_types(dtype, t.dtype)
    device = tensors[0].device
    return tuple(t.to(device=device, dtype=dtype) for t in tensors)


def validate_last_dim(tensor: torch.Tensor, expected: int, name: str = "tensor") -> None:
    """
    Validate the size of the component axis.

    Args:
        tensor: Tensor to validate
        expected: Required size of the last axis
        name: Name for error messages

    Raises:
        ValueError: If the last axis has the wrong size
    """
    if tensor.ndim == 0 or tensor.shape[-1] != expected:
        got = tensor.shape[-1] if tensor.ndim > 0 else 0
        raise ValueError(
            f"{name} should have {expected} components in its last axis, got {got}"
        )
