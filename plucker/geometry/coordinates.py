"""
Plücker coordinates for lines in 3D homogeneous space.

A Plücker coordinate is a 6-tuple of scalars ordered

    [p01, p02, p03, p23, p31, p12]
      0    1    2    3    4    5

The first three slots form the direction part U and the last three the
moment part V. A 6-tuple describes an actual line iff U · V = 0 (the Klein
quadric); this is checkable with ``is_line`` but never enforced.

Values are immutable by convention: every operation, including writes
through the basis accessors, returns a new ``Plucker``.
"""

from __future__ import annotations
from typing import Callable, Optional, Tuple, Union
import torch

from ..core.constants import NUM_COMPONENTS, U_SLOTS, V_SLOTS
from ..core.epsilon import near_zero as _near_zero
from ..core.types import TensorLike, as_tensor, promote


Operand = Union['Plucker', float, torch.Tensor]


class Plucker:
    """
    A batch of Plücker line coordinates.

    Components are stored as a tensor of shape (..., 6). Arithmetic is
    component-wise; scalars and tensors of the batch shape broadcast over
    all six components. A tensor operand may not have more dimensions than
    the batch shape; component-shaped operands must be wrapped in Plucker.
    """

    def __init__(self, components: TensorLike):
        """
        Initialize from components.

        Args:
            components: Tensor of shape (..., 6) in the order
                        [p01, p02, p03, p23, p31, p12]
        """
        components = as_tensor(components)
        if components.ndim == 0 or components.shape[-1] != NUM_COMPONENTS:
            got = components.shape[-1] if components.ndim > 0 else 0
            raise ValueError(f"Expected {NUM_COMPONENTS} components, got {got}")
        self.coords = components

    # === Construction ===

    @classmethod
    def from_uv(cls, u: TensorLike, v: TensorLike) -> 'Plucker':
        """
        Assemble a coordinate from a direction part and a moment part.

        The pair is a line iff u · v = 0; this is not checked.

        Args:
            u: Direction of shape (..., 3)
            v: Moment of shape (..., 3)
        """
        u, v = promote(u, v)
        u, v = torch.broadcast_tensors(u, v)
        return cls(torch.cat([u, v], dim=-1))

    @classmethod
    def zeros(cls, *batch_shape: int, device: torch.device = None,
              dtype: torch.dtype = None) -> 'Plucker':
        """The zero coordinate (additive identity); represents no line."""
        return cls(torch.zeros(*batch_shape, NUM_COMPONENTS, device=device,
                               dtype=dtype or torch.get_default_dtype()))

    @classmethod
    def full(cls, value: float, *batch_shape: int, device: torch.device = None,
             dtype: torch.dtype = None) -> 'Plucker':
        """Replicate one scalar into all six components."""
        return cls(torch.full((*batch_shape, NUM_COMPONENTS), value, device=device,
                              dtype=dtype or torch.get_default_dtype()))

    # === Tensor plumbing ===

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 6 components)."""
        return self.coords.shape[:-1]

    @property
    def device(self) -> torch.device:
        return self.coords.device

    @property
    def dtype(self) -> torch.dtype:
        return self.coords.dtype

    def to(self, *args, **kwargs) -> 'Plucker':
        """Move to a device and/or dtype (same arguments as Tensor.to)."""
        return Plucker(self.coords.to(*args, **kwargs))

    def clone(self) -> 'Plucker':
        """Create a copy."""
        return Plucker(self.coords.clone())

    def detach(self) -> 'Plucker':
        """Detach from computation graph."""
        return Plucker(self.coords.detach())

    def __getitem__(self, index) -> 'Plucker':
        """Index into the batch dimensions."""
        if not isinstance(index, tuple):
            index = (index,)
        return Plucker(self.coords[index + (Ellipsis, slice(None))])

    def __len__(self) -> int:
        if len(self.shape) == 0:
            raise TypeError("len() of an unbatched Plucker")
        return self.shape[0]

    # === Component access ===

    def component(self, name: str) -> torch.Tensor:
        """Read a basis element by name, e.g. ``"p01"`` or its dual ``"p10"``."""
        from .basis import basis_element
        return basis_element(name).get(self)

    def as_tuple(self) -> Tuple[torch.Tensor, ...]:
        """The six components as separate tensors of the batch shape."""
        return tuple(self.coords.unbind(dim=-1))

    # === Component-wise algebra ===

    def _lift(self, other: Operand) -> Optional[torch.Tensor]:
        if isinstance(other, Plucker):
            return other.coords
        if isinstance(other, (int, float)):
            return torch.as_tensor(other, dtype=self.dtype, device=self.device)
        if isinstance(other, torch.Tensor):
            if other.ndim > len(self.shape):
                raise ValueError(
                    f"Tensor operand of shape {tuple(other.shape)} does not match "
                    f"the batch shape {tuple(self.shape)}; wrap components in Plucker"
                )
            # Batch-shaped tensors broadcast over the component axis
            return other.unsqueeze(-1)
        return None

    def map(self, fn: Callable[[torch.Tensor], torch.Tensor]) -> 'Plucker':
        """
        Apply an elementwise tensor function to every component.

        This is the generic combinator behind the unary operations; any
        torch function such as ``torch.sqrt`` or ``torch.sin`` can be used.
        """
        return Plucker(fn(self.coords))

    def __add__(self, other: Operand) -> 'Plucker':
        """Component-wise addition."""
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Plucker(self.coords + rhs)

    def __radd__(self, other: Operand) -> 'Plucker':
        return self.__add__(other)

    def __sub__(self, other: Operand) -> 'Plucker':
        """Component-wise subtraction."""
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Plucker(self.coords - rhs)

    def __rsub__(self, other: Operand) -> 'Plucker':
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Plucker(rhs - self.coords)

    def __mul__(self, other: Operand) -> 'Plucker':
        """Component-wise product (scaling when other is a scalar)."""
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Plucker(self.coords * rhs)

    def __rmul__(self, other: Operand) -> 'Plucker':
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> 'Plucker':
        """Component-wise division."""
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Plucker(self.coords / rhs)

    def __neg__(self) -> 'Plucker':
        """Negation: the same line with opposite orientation."""
        return Plucker(-self.coords)

    def __abs__(self) -> 'Plucker':
        return self.map(torch.abs)

    def sign(self) -> 'Plucker':
        """Component-wise signum."""
        return self.map(torch.sign)

    def reciprocal(self) -> 'Plucker':
        """Component-wise reciprocal."""
        return self.map(torch.reciprocal)

    def __or__(self, other: 'Plucker') -> torch.Tensor:
        """Operator |: the symmetric bilinear form of the Klein quadric."""
        if not isinstance(other, Plucker):
            return NotImplemented
        from .lines import bilinear
        return bilinear(self, other)

    # === Metric ===

    def dot(self, other: 'Plucker') -> torch.Tensor:
        """Euclidean dot product of the 6-vectors (not the bilinear form)."""
        return (self.coords * other.coords).sum(dim=-1)

    def quadrance(self) -> torch.Tensor:
        """Squared Euclidean norm of the 6-vector."""
        return self.dot(self)

    def norm(self) -> torch.Tensor:
        return torch.sqrt(self.quadrance())

    def lerp(self, other: 'Plucker', t: Union[float, torch.Tensor]) -> 'Plucker':
        """Linear interpolation: (1 - t) * self + t * other."""
        return self * (1 - t) + other * t

    # === Comparison ===

    def equals(self, other: 'Plucker') -> torch.Tensor:
        """Exact component equality, reduced over the component axis."""
        return (self.coords == other.coords).all(dim=-1)

    def near_zero(self, eps: Optional[float] = None) -> torch.Tensor:
        """Whether the 6-vector quadrance is within tolerance of zero."""
        return _near_zero(self.quadrance(), eps)

    def __repr__(self) -> str:
        return f"Plucker(shape={tuple(self.shape)}, dtype={self.dtype}, device={self.device})"


def _to_uv(p: Plucker) -> Tuple[torch.Tensor, torch.Tensor]:
    """Split into the direction part U and moment part V."""
    return p.coords[..., U_SLOTS], p.coords[..., V_SLOTS]
