"""
Utility functions for the Plücker line library.

Includes configuration management.
"""

from .config import Config, load_config, save_config

__all__ = [
    "Config",
    "load_config",
    "save_config",
]
