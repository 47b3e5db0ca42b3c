"""Application services."""

from .readme_service import ReadmeService, ReadmeSyncReport
from .snippet_validation import SnippetReport, SnippetValidationService

__all__ = [
    "ReadmeService",
    "ReadmeSyncReport",
    "SnippetReport",
    "SnippetValidationService",
]
