"""
Configuration management for the Plücker line library.

Holds the near-zero tolerances per dtype together with the dtype and device
new values are created with.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any
from pathlib import Path

import torch

from ..core.constants import (
    DEFAULT_EPS_FLOAT16,
    DEFAULT_EPS_BFLOAT16,
    DEFAULT_EPS_FLOAT32,
    DEFAULT_EPS_FLOAT64,
)
from ..core.epsilon import tolerance_for

logger = logging.getLogger(__name__)


_DTYPE_NAMES = {
    'float16': torch.float16,
    'bfloat16': torch.bfloat16,
    'float32': torch.float32,
    'float64': torch.float64,
}


@dataclass
class Config:
    """
    Configuration for tolerance checks and tensor creation.

    Attributes:
        # Tolerances
        eps_float16: Near-zero threshold for half precision
        eps_bfloat16: Near-zero threshold for bfloat16
        eps_float32: Near-zero threshold for single precision
        eps_float64: Near-zero threshold for double precision

        # Tensors
        dtype: Name of the floating dtype for new values
        device: Device to use ('cuda', 'mps', 'cpu')
    """

    # Tolerances
    eps_float16: float = DEFAULT_EPS_FLOAT16
    eps_bfloat16: float = DEFAULT_EPS_BFLOAT16
    eps_float32: float = DEFAULT_EPS_FLOAT32
    eps_float64: float = DEFAULT_EPS_FLOAT64

    # Tensors
    dtype: str = 'float32'
    device: str = 'cpu'

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.dtype not in _DTYPE_NAMES:
            raise ValueError(
                f"Unknown dtype: {self.dtype}. Supported: {', '.join(_DTYPE_NAMES)}"
            )

    @property
    def torch_dtype(self) -> torch.dtype:
        return _DTYPE_NAMES[self.dtype]

    def tolerance(self, dtype: Optional[torch.dtype] = None) -> float:
        """
        Near-zero threshold for a dtype (defaults to the configured dtype).

        The configured per-dtype values override the library defaults; any
        other dtype gets ``tolerance_for``.
        """
        dtype = dtype or self.torch_dtype
        overrides = {
            torch.float16: self.eps_float16,
            torch.bfloat16: self.eps_bfloat16,
            torch.float32: self.eps_float32,
            torch.float64: self.eps_float64,
        }
        if dtype in overrides:
            return overrides[dtype]
        return tolerance_for(dtype)

    def tensor(self, data) -> torch.Tensor:
        """Create a tensor with the configured dtype and device."""
        return torch.as_tensor(data, dtype=self.torch_dtype, device=self.device)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved config to {filepath}")
