from pathlib import Path
from unittest.mock import Mock

import pytest

from solid_principles.application.readme_service import ReadmeService
from solid_principles.application.snippet_validation import SnippetValidationService
from solid_principles.catalog import PrincipleRegistry, register_default_principles
from solid_principles.domain.ports import SnippetSourcePort
from solid_principles.domain.principle import Snippet
from solid_principles.infrastructure.readme import JinjaReadmeRenderer
from solid_principles.infrastructure.snippets import PackageSnippetSource

PROJECT_ROOT = Path(__file__).parent.parent


class InMemorySnippetSource(SnippetSourcePort):
    """Snippet source that serves overridden text and falls back to the package."""

    def __init__(self, overrides=None):
        self.overrides = dict(overrides or {})
        self._fallback = PackageSnippetSource()

    def read(self, snippet: Snippet) -> str:
        if snippet.key in self.overrides:
            return self.overrides[snippet.key]
        return self._fallback.read(snippet)

    def exists(self, snippet: Snippet) -> bool:
        return snippet.key in self.overrides or self._fallback.exists(snippet)


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def readme_path(project_root):
    return project_root / "README.md"


@pytest.fixture
def mock_logger():
    return Mock()


@pytest.fixture
def registry():
    """A fresh registry holding the five default principles."""
    return register_default_principles(PrincipleRegistry())


@pytest.fixture
def snippet_source():
    return PackageSnippetSource()


@pytest.fixture
def memory_source():
    return InMemorySnippetSource()


@pytest.fixture
def validation_service(registry, snippet_source, mock_logger):
    return SnippetValidationService(registry, snippet_source, mock_logger)


@pytest.fixture
def renderer(snippet_source, mock_logger):
    return JinjaReadmeRenderer(snippet_source, mock_logger)


@pytest.fixture
def readme_service(registry, renderer, snippet_source, mock_logger, readme_path):
    return ReadmeService(
        registry=registry,
        renderer=renderer,
        snippet_source=snippet_source,
        logger=mock_logger,
        readme_path=str(readme_path),
    )
