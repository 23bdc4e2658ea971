"""Storage port - interface for reading posts and writing output."""

from abc import ABC, abstractmethod
from pathlib import Path


class OutputWriteError(Exception):
    """Output could not be written. Aborts the whole batch."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path


class StoragePort(ABC):
    """Interface for post storage."""

    @abstractmethod
    def collect(self, source_dir: Path, patterns: list[str]) -> list[Path]:
        """List matching files directly inside source_dir, sorted by name."""
        pass

    @abstractmethod
    def read_first_line(self, path: Path) -> bytes:
        """Read the first line as raw bytes, including its line ending."""
        pass

    @abstractmethod
    def read(self, path: Path) -> str:
        """Read a post as text."""
        pass

    @abstractmethod
    def write(self, name: str, content: str) -> Path:
        """Write content to the output location under name.

        Returns path to written file.
        """
        pass

    @abstractmethod
    def copy(self, path: Path) -> Path:
        """Copy a file unchanged to the output location.

        Returns path to copied file.
        """
        pass
