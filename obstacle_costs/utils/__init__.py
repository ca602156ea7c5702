"""Utility helpers shared across cost functions and tooling."""

from .config import load_config_any, load_config_dict, load_structured

__all__ = [
    "load_config_any",
    "load_config_dict",
    "load_structured",
]
