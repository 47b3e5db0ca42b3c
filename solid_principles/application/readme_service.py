"""README application service - render the README and check it against the snippets."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from solid_principles.catalog.registry import PrincipleRegistry
from solid_principles.domain.exceptions import ReadmeOutOfSyncError
from solid_principles.domain.ports import ReadmeRenderingPort, SnippetSourcePort
from solid_principles.domain.principle import PrincipleId, Snippet, Variant
from solid_principles.infrastructure.readme.markdown import (
    CodeBlock,
    extract_code_blocks,
    normalize_block,
)


@dataclass
class ReadmeSyncReport:
    """Differences between README code blocks and snippet files."""
    path: str
    found: bool = True
    matched: List[str] = field(default_factory=list)
    mismatched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    unexpected: List[str] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return self.found and not (self.mismatched or self.missing or self.unexpected)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "found": self.found,
            "in_sync": self.in_sync,
            "matched": self.matched,
            "mismatched": self.mismatched,
            "missing": self.missing,
            "unexpected": self.unexpected,
        }


def _block_key(block: CodeBlock) -> Optional[Tuple[str, str]]:
    """Map a block to (principle id, variant) from its headings."""
    if not block.section or not block.heading:
        return None
    acronym = block.section.split(":", 1)[0].strip().upper()
    if acronym not in PrincipleId.__members__:
        return None
    variant = block.heading.strip().lower()
    if variant not in (Variant.BAD.value, Variant.GOOD.value):
        return None
    return acronym, variant


class ReadmeService:
    """Renders, writes and checks the README."""

    def __init__(self, registry: PrincipleRegistry, renderer: ReadmeRenderingPort,
                 snippet_source: SnippetSourcePort, logger,
                 readme_path: str = "README.md", language: str = "python"):
        self._registry = registry
        self._renderer = renderer
        self._snippet_source = snippet_source
        self._logger = logger
        self.readme_path = readme_path
        self.language = language

    def render(self) -> str:
        """Render the README for every registered principle."""
        return self._renderer.render(self._registry.list_principles())

    def write(self, path: Optional[str] = None) -> str:
        """Render the README and write it to disk; returns the path written."""
        target = Path(path or self.readme_path)
        if target.parent and not target.parent.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.render(), encoding="utf-8")
        self._logger.info("Wrote README", path=str(target))
        return str(target)

    def _expected(self) -> Dict[Tuple[str, str], Snippet]:
        expected: Dict[Tuple[str, str], Snippet] = {}
        for principle in self._registry.list_principles():
            for snippet in principle.snippets():
                expected[(principle.id.value, snippet.variant.value)] = snippet
        return expected

    def check_text(self, markdown: str, path: Optional[str] = None) -> ReadmeSyncReport:
        """Compare README text with the snippet files."""
        report = ReadmeSyncReport(path=path or self.readme_path)
        expected = self._expected()
        seen = set()

        for block in extract_code_blocks(markdown, self.language):
            key = _block_key(block)
            if key is None or key not in expected or key in seen:
                report.unexpected.append(f"line {block.line}")
                continue
            seen.add(key)
            snippet = expected[key]
            source = self._snippet_source.read(snippet)
            if normalize_block(block.text) == normalize_block(source):
                report.matched.append(snippet.key)
            else:
                report.mismatched.append(snippet.key)

        report.missing = [snippet.key for key, snippet in expected.items() if key not in seen]
        return report

    def check(self, path: Optional[str] = None) -> ReadmeSyncReport:
        """Read the README from disk and compare it with the snippet files."""
        target = Path(path or self.readme_path)
        if not target.is_file():
            self._logger.warning("README not found", path=str(target))
            return ReadmeSyncReport(
                path=str(target),
                found=False,
                missing=[snippet.key for snippet in self._expected().values()],
            )

        report = self.check_text(target.read_text(encoding="utf-8"), str(target))
        if report.in_sync:
            self._logger.info("README in sync", path=str(target), blocks=len(report.matched))
        else:
            self._logger.warning(
                "README out of sync",
                path=str(target),
                mismatched=report.mismatched,
                missing=report.missing,
                unexpected=report.unexpected,
            )
        return report

    def ensure_in_sync(self, path: Optional[str] = None) -> ReadmeSyncReport:
        """
        Check the README and raise when it has drifted.

        Raises:
            ReadmeOutOfSyncError: If any block is mismatched, missing or unexpected
        """
        report = self.check(path)
        if not report.in_sync:
            raise ReadmeOutOfSyncError(report.path, report.mismatched, report.missing, report.unexpected)
        return report
