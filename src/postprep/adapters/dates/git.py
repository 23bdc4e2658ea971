"""Version-control adapter using the git CLI."""

import logging
import subprocess
from datetime import date
from pathlib import Path

from ...ports.dates import VersionControlPort

logger = logging.getLogger(__name__)


class GitCLIAdapter(VersionControlPort):
    """Look up last commit dates with `git log`."""

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout

    def last_modified(self, path: Path) -> date | None:
        path = path.resolve()
        try:
            result = subprocess.run(
                ["git", "log", "-1", "--format=%cs", "--", path.name],
                cwd=path.parent,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"git log failed for {path.name}: {e}")
            return None

        output = result.stdout.strip()
        if not output:
            logger.debug(f"No git history for {path.name}")
            return None

        try:
            return date.fromisoformat(output)
        except ValueError:
            logger.warning(f"Unexpected git date for {path.name}: {output!r}")
            return None


class NullVersionControlAdapter(VersionControlPort):
    """Used when git lookups are disabled."""

    def last_modified(self, path: Path) -> date | None:
        return None
