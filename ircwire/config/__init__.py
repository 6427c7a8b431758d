"""Configuration package exports."""

from .model import ErrorPolicy, WireSettings

__all__ = ["ErrorPolicy", "WireSettings"]
