# solid_principles/domain/exceptions.py
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class PrincipleNotFoundError(DomainException):
    """Raised when a principle is not registered in the catalog."""
    def __init__(self, principle_id: str):
        super().__init__(f"Principle {principle_id} not found")
        self.principle_id = principle_id


class SnippetNotFoundError(DomainException):
    """Raised when a snippet module cannot be located."""
    def __init__(self, module: str, reason: Optional[str] = None):
        message = f"Snippet {module} not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.module = module


class SnippetValidationError(ValidationError):
    """Raised when one or more snippets disagree with their prose."""
    def __init__(self, problems: Dict[str, List[str]]):
        count = sum(len(items) for items in problems.values())
        super().__init__(
            f"Snippet validation failed with {count} problem(s) in {len(problems)} snippet(s)",
            problems,
        )
        self.problems = problems


class ReadmeOutOfSyncError(DomainException):
    """Raised when README code blocks differ from the snippet files."""
    def __init__(self, path: str, mismatched: List[str], missing: List[str],
                 unexpected: Optional[List[str]] = None):
        super().__init__(
            f"README {path} is out of sync: "
            f"{len(mismatched)} mismatched, {len(missing)} missing, "
            f"{len(unexpected or [])} unexpected"
        )
        self.path = path
        self.mismatched = mismatched
        self.missing = missing
        self.unexpected = unexpected or []


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
