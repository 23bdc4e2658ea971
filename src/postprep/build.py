"""Batch build of all posts in the source directory."""

import logging

from .adapters.dates import SystemClockAdapter, create_vcs_adapter
from .adapters.storage import FilesystemAdapter
from .config import Settings
from .domain.models import ProcessingResult
from .domain.services import FrontmatterSynthesizer, PostService

logger = logging.getLogger(__name__)


def create_post_service(settings: Settings) -> PostService:
    """Create a PostService with configured adapters."""
    return PostService(
        synthesizer=FrontmatterSynthesizer(
            vcs=create_vcs_adapter(settings.dates),
            clock=SystemClockAdapter(),
        ),
        storage=FilesystemAdapter(settings.paths.output),
    )


def run_build(
    settings: Settings, service: PostService | None = None
) -> list[ProcessingResult]:
    """Process every matching post in the source directory.

    Returns one result per post. Raises OutputWriteError on the first
    write failure; outputs written before it are kept.
    """
    service = service or create_post_service(settings)
    source = settings.paths.source

    paths = service.storage.collect(source, settings.scan.patterns)
    logger.info(f"Source: {source}")
    logger.info(f"Output: {settings.paths.output}")
    logger.info(f"Found {len(paths)} posts")

    results = service.process_all(paths)

    failed = sum(1 for r in results if not r.success)
    logger.info(f"Build complete: {len(results) - failed} written, {failed} failed")
    return results
