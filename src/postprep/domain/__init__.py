"""Domain layer - core business logic."""

from .models import Document, DocumentFormat, FieldMatch, Metadata, ProcessingResult

__all__ = ["Document", "DocumentFormat", "FieldMatch", "Metadata", "ProcessingResult"]
