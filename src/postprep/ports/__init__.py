"""Ports - interfaces for external dependencies."""

from .dates import ClockPort, VersionControlPort
from .storage import StoragePort

__all__ = ["ClockPort", "StoragePort", "VersionControlPort"]
