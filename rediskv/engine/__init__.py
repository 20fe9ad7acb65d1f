"""Engine backends."""

from .base import Engine
from .disk import Disk
from .memory import Memory
from .redis import Redis

__all__ = ["Disk", "Engine", "Memory", "Redis"]
