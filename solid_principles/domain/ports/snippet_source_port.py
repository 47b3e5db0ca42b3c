"""Snippet source port for reading snippet files."""

from abc import ABC, abstractmethod

from solid_principles.domain.principle import Snippet


class SnippetSourcePort(ABC):
    """Port for reading the source text of snippets."""

    @abstractmethod
    def read(self, snippet: Snippet) -> str:
        """Return the full source text of a snippet."""

    @abstractmethod
    def exists(self, snippet: Snippet) -> bool:
        """Check if the snippet file can be located."""
