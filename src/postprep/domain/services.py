"""Domain services - orchestrate business logic."""

import logging
from pathlib import Path

from ..ports.dates import ClockPort, VersionControlPort
from ..ports.storage import StoragePort
from .cleaner import clean_body
from .composer import compose_document
from .detector import detect_first_line, detect_format
from .extractors import ExtractedFields, extract_fields, title_from_name
from .models import Document, DocumentFormat, Metadata, ProcessingResult

logger = logging.getLogger(__name__)


class FrontmatterSynthesizer:
    """Turns a raw post into a document with a Hugo header."""

    def __init__(self, vcs: VersionControlPort, clock: ClockPort) -> None:
        self.vcs = vcs
        self.clock = clock

    def extract(self, document: Document) -> tuple[Metadata, ExtractedFields]:
        """Resolve every header field, applying fallbacks where needed."""
        fields = extract_fields(document.lines)

        if fields.title:
            title = fields.title.value
        else:
            title = title_from_name(document.name)
            logger.debug(f"No title heading in {document.name}, using {title!r}")

        date = fields.date.value if fields.date else self._fallback_date(document)
        tags = list(fields.tags.value) if fields.tags else []

        metadata = Metadata(title=title, date=date, tags=tags)
        return metadata, fields

    def synthesize(self, document: Document) -> str:
        """Return the output text; pass-through documents come back unchanged."""
        if detect_format(document) == DocumentFormat.PASS_THROUGH:
            return document.text

        return self.transform(document)[1]

    def transform(self, document: Document) -> tuple[Metadata, str]:
        """Build the header and cleaned body without checking the format."""
        metadata, fields = self.extract(document)
        body = clean_body(document.lines, fields.consumed)
        return metadata, compose_document(metadata, body)

    def _fallback_date(self, document: Document) -> str:
        if document.source_path is not None:
            vcs_date = self.vcs.last_modified(document.source_path)
            if vcs_date:
                logger.debug(f"Using commit date for {document.name}: {vcs_date}")
                return vcs_date.isoformat()

        today = self.clock.today()
        logger.debug(f"Using current date for {document.name}: {today}")
        return today.isoformat()


class PostService:
    """Processes posts from the source directory into the output directory."""

    def __init__(
        self,
        synthesizer: FrontmatterSynthesizer,
        storage: StoragePort,
    ) -> None:
        self.synthesizer = synthesizer
        self.storage = storage

    def process(self, path: Path) -> ProcessingResult:
        """Process a single post.

        Read and decode failures are recorded on the result. Write failures
        raise OutputWriteError and abort the caller's batch.
        """
        result = ProcessingResult(source_path=path)
        logger.info(f"Processing: {path.name}")

        try:
            result.format = detect_first_line(self.storage.read_first_line(path))
            if result.format == DocumentFormat.PASS_THROUGH:
                text = None
            else:
                text = self.storage.read(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path.name}: {e}")
            result.errors.append(f"Unreadable input: {e}")
            return result

        # Pass-through files are copied as bytes and never decoded
        if text is None:
            result.output_path = self.storage.copy(path)
            return result

        document = Document(name=path.stem, text=text, source_path=path)
        result.metadata, content = self.synthesizer.transform(document)
        result.output_path = self.storage.write(path.name, content)
        return result

    def process_all(self, paths: list[Path]) -> list[ProcessingResult]:
        """Process posts in order. A failed read skips only that post."""
        results = []
        for path in paths:
            result = self.process(path)
            if not result.success:
                logger.warning(f"Skipped {path.name}: {result.errors}")
            results.append(result)
        return results
