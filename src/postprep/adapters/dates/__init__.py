"""Date source adapters."""

from ...config import DatesConfig
from ...ports.dates import VersionControlPort
from .clock import SystemClockAdapter
from .git import GitCLIAdapter, NullVersionControlAdapter

__all__ = [
    "GitCLIAdapter",
    "NullVersionControlAdapter",
    "SystemClockAdapter",
    "create_vcs_adapter",
]


def create_vcs_adapter(config: DatesConfig) -> VersionControlPort:
    """Create version-control adapter based on configuration."""
    if config.use_git:
        return GitCLIAdapter(timeout=config.git_timeout)
    return NullVersionControlAdapter()
