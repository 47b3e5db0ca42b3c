"""Domain layer - principle and snippet models, exceptions and ports."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    PrincipleNotFoundError,
    ReadmeOutOfSyncError,
    SnippetNotFoundError,
    SnippetValidationError,
    ValidationError,
)
from .principle import Principle, PrincipleId, Snippet, Variant

__all__ = [
    "ConfigurationError",
    "DomainException",
    "Principle",
    "PrincipleId",
    "PrincipleNotFoundError",
    "ReadmeOutOfSyncError",
    "Snippet",
    "SnippetNotFoundError",
    "SnippetValidationError",
    "ValidationError",
    "Variant",
]
