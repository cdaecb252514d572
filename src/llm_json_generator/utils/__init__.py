"""Utility functions for environment-based configuration."""

from .config import create_generator, get_default_config, load_environment

__all__ = [
    "load_environment",
    "create_generator",
    "get_default_config",
]
