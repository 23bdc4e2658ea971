"""Storage adapter using local filesystem."""

import logging
import shutil
from pathlib import Path

from ...ports.storage import OutputWriteError, StoragePort

logger = logging.getLogger(__name__)


class FilesystemAdapter(StoragePort):
    """Storage implementation using local filesystem.

    Existing outputs are overwritten; outputs without a matching input are
    never removed.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def collect(self, source_dir: Path, patterns: list[str]) -> list[Path]:
        if not source_dir.is_dir():
            logger.warning(f"Source directory not found: {source_dir}")
            return []

        found = {
            path
            for pattern in patterns
            for path in source_dir.glob(pattern)
            # Hidden files are skipped, as a shell glob would
            if path.is_file() and not path.name.startswith(".")
        }
        return sorted(found)

    def read_first_line(self, path: Path) -> bytes:
        with open(path, "rb") as f:
            return f.readline()

    def read(self, path: Path) -> str:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    def write(self, name: str, content: str) -> Path:
        dest = self._prepare(name)
        try:
            with open(dest, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise OutputWriteError(dest, e.strerror or str(e)) from e
        logger.info(f"Wrote: {dest}")
        return dest

    def copy(self, path: Path) -> Path:
        dest = self._prepare(path.name)
        try:
            shutil.copyfile(path, dest)
        except OSError as e:
            raise OutputWriteError(dest, e.strerror or str(e)) from e
        logger.info(f"Copied: {dest}")
        return dest

    def _prepare(self, name: str) -> Path:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(self.output_dir, e.strerror or str(e)) from e
        return self.output_dir / name
