"""System adapters for time and identity generation."""

from src.infrastructure.system.system_clock import SystemClock
from src.infrastructure.system.uuid7_generator import Uuid7Generator

__all__ = ["SystemClock", "Uuid7Generator"]
