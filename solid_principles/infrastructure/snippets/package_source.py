"""Snippet source backed by the installed package files."""

from importlib import resources

from solid_principles.domain.exceptions import SnippetNotFoundError
from solid_principles.domain.ports import SnippetSourcePort
from solid_principles.domain.principle import Snippet
from solid_principles.infrastructure.logging.logger import get_logger


class PackageSnippetSource(SnippetSourcePort):
    """Reads snippet modules as package resources.

    The module is never imported here; ``solid_principles.snippets.open_closed.bad``
    resolves to ``bad.py`` inside the ``open_closed`` package directory.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding
        self._logger = get_logger(__name__)

    def _resource(self, snippet: Snippet):
        try:
            package = resources.files(snippet.package)
        except (ModuleNotFoundError, TypeError) as e:
            raise SnippetNotFoundError(snippet.module, f"package {snippet.package} not found") from e
        return package.joinpath(snippet.filename)

    def exists(self, snippet: Snippet) -> bool:
        try:
            return self._resource(snippet).is_file()
        except SnippetNotFoundError:
            return False

    def read(self, snippet: Snippet) -> str:
        resource = self._resource(snippet)
        if not resource.is_file():
            raise SnippetNotFoundError(snippet.module, f"{snippet.filename} missing")
        source = resource.read_text(encoding=self._encoding)
        self._logger.debug("Read snippet source", snippet=snippet.key, size=len(source))
        return source
