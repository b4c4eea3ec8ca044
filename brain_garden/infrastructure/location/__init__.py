"""Реализации BaseLocationProvider."""

from brain_garden.infrastructure.location.memory import MemoryLocation

__all__ = ["MemoryLocation"]
