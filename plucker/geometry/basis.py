"""
Basis elements of the Plücker space, the Grassmannian Gr(2, V4).

Each element is an accessor object with a getter and an out-of-place
setter:

    p01.get(line)          -> Tensor of the batch shape
    p01.set(line, 2.0)     -> new Plucker with p01 replaced
    p01.over(line, fn)     -> new Plucker with p01 replaced by fn(p01)

The primary basis (p01, p02, p03, p23, p31, p12) reads the stored slots.
The alternate basis (p10, p20, p30, p32, p13, p21) swaps the axis pair, so
each of its elements is the negation of the matching primary element. They
are all derived by ``anti``, which negates on read and on write.
"""

from __future__ import annotations
from typing import Callable, Dict, Tuple, Union
import torch

from ..core.constants import (
    IDX_P01, IDX_P02, IDX_P03, IDX_P23, IDX_P31, IDX_P12,
)
from .coordinates import Plucker


Value = Union[float, torch.Tensor]


class BasisElement:
    """Accessor for one stored component of a Plücker coordinate."""

    def __init__(self, name: str, index: int):
        self.name = name
        self.index = index

    def get(self, p: Plucker) -> torch.Tensor:
        return p.coords[..., self.index]

    def set(self, p: Plucker, value: Value) -> Plucker:
        """Return a copy of p with this component replaced by value."""
        value = torch.as_tensor(value, dtype=p.dtype, device=p.device)
        coords = p.coords.clone()
        coords[..., self.index] = value
        return Plucker(coords)

    def over(self, p: Plucker, fn: Callable[[torch.Tensor], torch.Tensor]) -> Plucker:
        """Return a copy of p with this component replaced by fn(component)."""
        return self.set(p, fn(self.get(p)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class AntiElement(BasisElement):
    """A basis element seen through negation on both read and write."""

    def __init__(self, name: str, element: BasisElement):
        super().__init__(name, element.index)
        self.element = element

    def get(self, p: Plucker) -> torch.Tensor:
        return -self.element.get(p)

    def set(self, p: Plucker, value: Value) -> Plucker:
        return self.element.set(p, -torch.as_tensor(value, dtype=p.dtype, device=p.device))


def anti(element: BasisElement, name: str = None) -> AntiElement:
    """
    Derive the swapped-axis element: reads return -x, writes store -x.

    The name defaults to the element name with its two axes reversed.
    """
    if name is None:
        name = "p" + element.name[:0:-1]
    return AntiElement(name, element)


p01 = BasisElement("p01", IDX_P01)
p02 = BasisElement("p02", IDX_P02)
p03 = BasisElement("p03", IDX_P03)
p23 = BasisElement("p23", IDX_P23)
p31 = BasisElement("p31", IDX_P31)
p12 = BasisElement("p12", IDX_P12)

p10 = anti(p01)
p20 = anti(p02)
p30 = anti(p03)
p32 = anti(p23)
p13 = anti(p31)
p21 = anti(p12)

BASIS: Tuple[BasisElement, ...] = (p01, p02, p03, p23, p31, p12)
DUAL_BASIS: Tuple[AntiElement, ...] = (p10, p20, p30, p32, p13, p21)

_BY_NAME: Dict[str, BasisElement] = {e.name: e for e in BASIS + DUAL_BASIS}


def basis_element(name: str) -> BasisElement:
    """
    Look up a basis element by name.

    Raises:
        KeyError: If name is not one of the twelve basis elements
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"Unknown basis element: {name!r}. Expected one of {sorted(_BY_NAME)}"
        ) from None
