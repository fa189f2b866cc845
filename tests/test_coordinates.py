"""
Tests for the Plucker value type.

These tests define the storage layout, tensor plumbing, and the
component-wise algebra of Plücker coordinates.
"""

import pytest
import torch

from plucker.geometry import Plucker
from plucker.geometry.coordinates import _to_uv


# =============================================================================
# Creation and Properties
# =============================================================================

class TestPluckerCreation:
    """Tests for Plucker construction and basic properties."""

    def test_requires_6_components(self):
        """Plucker REQUIRES exactly 6 components."""
        with pytest.raises(ValueError, match="Expected 6 components"):
            Plucker(torch.zeros(5))
        with pytest.raises(ValueError, match="Expected 6 components"):
            Plucker(torch.zeros(2, 7))
        with pytest.raises(ValueError, match="Expected 6 components"):
            Plucker(torch.tensor(1.0))

    def test_accepts_sequence(self):
        """Lists are converted with the default dtype."""
        p = Plucker([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        assert p.coords.shape == (6,)
        assert p.dtype == torch.get_default_dtype()

    def test_batched_shape(self):
        """Batch shape excludes the component axis."""
        for batch_shape in [(4,), (2, 3), (2, 3, 4)]:
            p = Plucker(torch.zeros(*batch_shape, 6))
            assert p.shape == torch.Size(batch_shape)

    def test_device_and_dtype(self, cpu_device):
        """Device and dtype follow the component tensor."""
        p = Plucker(torch.zeros(6, dtype=torch.float64))
        assert p.device == cpu_device
        assert p.dtype == torch.float64
        assert p.to(torch.float32).dtype == torch.float32

    def test_from_uv_layout(self):
        """Direction fills p01..p03 and moment fills p23, p31, p12."""
        p = Plucker.from_uv(torch.tensor([1.0, 2.0, 3.0]), torch.tensor([4.0, 5.0, 6.0]))
        assert torch.equal(p.coords, torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))

    def test_from_uv_broadcasts(self):
        """A single moment broadcasts against a batch of directions."""
        p = Plucker.from_uv(torch.randn(5, 3), torch.zeros(3))
        assert p.shape == (5,)

    def test_from_uv_promotes_dtypes(self):
        """An integer half never truncates a float half."""
        p = Plucker.from_uv(torch.tensor([1, 0, 0]), torch.tensor([0.0, 0.5, 0.0], dtype=torch.float64))
        assert p.dtype == torch.float64
        assert p.coords[4].item() == 0.5

    def test_to_uv_splits_halves(self):
        """The private split returns the two 3-vector halves."""
        p = Plucker(torch.arange(12.0).reshape(2, 6))
        u, v = _to_uv(p)
        assert torch.equal(u, torch.tensor([[0.0, 1.0, 2.0], [6.0, 7.0, 8.0]]))
        assert torch.equal(v, torch.tensor([[3.0, 4.0, 5.0], [9.0, 10.0, 11.0]]))

    def test_zeros_and_full(self):
        """Factory methods fill every component."""
        assert torch.equal(Plucker.zeros(3).coords, torch.zeros(3, 6))
        full = Plucker.full(2.0, 2, dtype=torch.float64)
        assert full.dtype == torch.float64
        assert torch.equal(full.coords, torch.full((2, 6), 2.0, dtype=torch.float64))

    def test_clone_is_independent(self):
        """Clones do not share storage."""
        p = Plucker(torch.ones(6))
        q = p.clone()
        q.coords[0] = 5.0
        assert p.coords[0] == 1.0

    def test_indexing_and_len(self):
        """Indexing selects batch entries, never components."""
        p = Plucker(torch.arange(18.0).reshape(3, 6))
        assert len(p) == 3
        assert torch.equal(p[1].coords, torch.arange(6.0, 12.0))
        assert p[0:2].shape == (2,)
        with pytest.raises(TypeError):
            len(Plucker(torch.zeros(6)))

    def test_as_tuple(self):
        """as_tuple unbinds the six components."""
        components = Plucker(torch.arange(6.0)).as_tuple()
        assert len(components) == 6
        assert [c.item() for c in components] == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    def test_repr(self):
        """repr reports shape and dtype."""
        assert "shape=(2,)" in repr(Plucker(torch.zeros(2, 6)))


# =============================================================================
# Component-wise Algebra
# =============================================================================

class TestComponentwiseAlgebra:
    """Arithmetic applies independently to every component."""

    @pytest.fixture
    def a(self):
        return Plucker(torch.tensor([1.0, -2.0, 3.0, -4.0, 5.0, -6.0]))

    @pytest.fixture
    def b(self):
        return Plucker(torch.tensor([2.0, 2.0, 2.0, 2.0, 2.0, 2.0]))

    def test_add_sub(self, a, b):
        assert torch.equal((a + b).coords, a.coords + b.coords)
        assert torch.equal((a - b).coords, a.coords - b.coords)

    def test_scalar_operands(self, a):
        """Python scalars broadcast on either side."""
        assert torch.equal((a * 2).coords, a.coords * 2)
        assert torch.equal((2 * a).coords, a.coords * 2)
        assert torch.equal((a + 1).coords, a.coords + 1)
        assert torch.equal((1 - a).coords, 1 - a.coords)
        assert torch.equal((a / 2).coords, a.coords / 2)

    def test_product_and_division(self, a, b):
        assert torch.equal((a * b).coords, a.coords * b.coords)
        assert torch.equal((a / b).coords, a.coords / b.coords)

    def test_batch_tensor_operand(self):
        """Tensors of the batch shape scale whole coordinates."""
        p = Plucker(torch.ones(2, 6))
        scaled = p * torch.tensor([1.0, 3.0])
        assert torch.equal(scaled.coords[1], torch.full((6,), 3.0))

    def test_component_shaped_tensor_rejected(self, a):
        """Tensors with more dimensions than the batch shape are refused."""
        with pytest.raises(ValueError, match="batch shape"):
            a * torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        with pytest.raises(ValueError, match="batch shape"):
            Plucker(torch.ones(2, 6)) + torch.ones(2, 6)

    def test_zero_dim_tensor_operand(self, a):
        """A 0-d tensor scales like a Python scalar."""
        assert torch.equal((a * torch.tensor(2.0)).coords, a.coords * 2)

    def test_unary(self, a):
        assert torch.equal((-a).coords, -a.coords)
        assert torch.equal(abs(a).coords, a.coords.abs())
        assert torch.equal(a.sign().coords, torch.tensor([1.0, -1.0, 1.0, -1.0, 1.0, -1.0]))
        assert torch.allclose(a.reciprocal().coords, 1.0 / a.coords)

    def test_map(self, a):
        """map applies any tensor function to all six components."""
        assert torch.allclose(abs(a).map(torch.sqrt).coords, a.coords.abs().sqrt())
        assert torch.allclose(a.map(torch.sin).coords, torch.sin(a.coords))

    def test_unsupported_operand(self, a):
        with pytest.raises(TypeError):
            a + "line"

    def test_sum_of_batch(self):
        """sum() works because 0 + Plucker is defined."""
        total = sum([Plucker(torch.ones(6)), Plucker(torch.ones(6))])
        assert torch.equal(total.coords, torch.full((6,), 2.0))


class TestMetric:
    """Euclidean metric on the 6-vector."""

    def test_dot_quadrance_norm(self):
        p = Plucker(torch.tensor([3.0, 0.0, 0.0, 0.0, 4.0, 0.0]))
        assert p.dot(p).item() == 25.0
        assert p.quadrance().item() == 25.0
        assert p.norm().item() == pytest.approx(5.0)

    def test_lerp(self):
        a = Plucker(torch.zeros(6))
        b = Plucker(torch.full((6,), 4.0))
        assert torch.allclose(a.lerp(b, 0.25).coords, torch.full((6,), 1.0))

    def test_equals(self):
        p = Plucker(torch.arange(12.0).reshape(2, 6))
        q = p.clone()
        q.coords[1, 0] = -1.0
        assert p.equals(q).tolist() == [True, False]

    def test_near_zero(self):
        small = Plucker(torch.full((6,), 1e-5, dtype=torch.float64))
        assert small.near_zero(eps=1e-8)
        assert not small.near_zero()
