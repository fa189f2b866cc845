"""
Pytest configuration and fixtures for Plücker line tests.
"""

import pytest
import torch

from plucker.geometry import plucker_3d


@pytest.fixture
def device():
    """Get available device."""
    if torch.cuda.is_available():
        return torch.device('cuda')
    return torch.device('cpu')


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def dtype():
    """Double precision keeps tolerance checks well away from rounding noise."""
    return torch.float64


@pytest.fixture
def generator():
    """Seeded generator for reproducible random geometry."""
    return torch.Generator().manual_seed(0)


@pytest.fixture
def random_points(generator, dtype):
    """Two batches of random points in [-1, 1]^3."""
    p1 = torch.rand(64, 3, generator=generator, dtype=dtype) * 2 - 1
    p2 = torch.rand(64, 3, generator=generator, dtype=dtype) * 2 - 1
    return p1, p2


@pytest.fixture
def random_lines(random_points):
    """Batch of valid lines through pairs of random points."""
    p1, p2 = random_points
    return plucker_3d(p1, p2)


@pytest.fixture
def x_axis(dtype):
    """The x axis, through (0,0,0) and (1,0,0)."""
    return plucker_3d(torch.tensor([0.0, 0.0, 0.0], dtype=dtype),
                      torch.tensor([1.0, 0.0, 0.0], dtype=dtype))


@pytest.fixture
def y_axis(dtype):
    """The y axis, through (0,0,0) and (0,1,0)."""
    return plucker_3d(torch.tensor([0.0, 0.0, 0.0], dtype=dtype),
                      torch.tensor([0.0, 1.0, 0.0], dtype=dtype))


@pytest.fixture
def offset_x_line(dtype):
    """Line parallel to the x axis, offset by one in y."""
    return plucker_3d(torch.tensor([0.0, 1.0, 0.0], dtype=dtype),
                      torch.tensor([1.0, 1.0, 0.0], dtype=dtype))


@pytest.fixture
def skew_y_line(dtype):
    """Line parallel to the y axis, lifted by one in z (skew to the x axis)."""
    return plucker_3d(torch.tensor([0.0, 0.0, 1.0], dtype=dtype),
                      torch.tensor([0.0, 1.0, 1.0], dtype=dtype))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "gpu: marks tests that require GPU"
    )


def pytest_collection_modifyitems(config, items):
    """Skip GPU tests if no GPU available."""
    if not torch.cuda.is_available():
        skip_gpu = pytest.mark.skip(reason="No GPU available")
        for item in items:
            if "gpu" in item.keywords:
                item.add_marker(skip_gpu)
