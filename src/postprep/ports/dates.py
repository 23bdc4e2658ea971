"""Date ports - interfaces for fallback date sources."""

from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path


class VersionControlPort(ABC):
    """Interface for version-control file history."""

    @abstractmethod
    def last_modified(self, path: Path) -> date | None:
        """Return the date of the last commit touching path.

        Returns None if the history is unavailable or the lookup fails.
        """
        pass


class ClockPort(ABC):
    """Interface for the local calendar."""

    @abstractmethod
    def today(self) -> date:
        pass
