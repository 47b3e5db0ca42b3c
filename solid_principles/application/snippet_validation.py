"""Snippet validation service.

Checks that each snippet parses, imports, starts with its Bad/Good marker and
defines what the prose says it defines.
"""
import ast
import importlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from solid_principles.catalog.registry import PrincipleRegistry
from solid_principles.domain.exceptions import (
    SnippetNotFoundError,
    SnippetValidationError,
)
from solid_principles.domain.ports import SnippetSourcePort
from solid_principles.domain.principle import Principle, Snippet


@dataclass
class SnippetReport:
    """Outcome of validating one snippet."""
    snippet: Snippet
    problems: List[str] = field(default_factory=list)
    classes_found: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems

    def to_dict(self) -> Dict[str, Any]:
        return {
            "snippet": self.snippet.key,
            "module": self.snippet.module,
            "valid": self.is_valid,
            "classes": self.classes_found,
            "problems": self.problems,
        }


def _base_names(node: ast.ClassDef) -> Set[str]:
    names = set()
    for base in node.bases:
        if isinstance(base, ast.Name):
            names.add(base.id)
        elif isinstance(base, ast.Attribute):
            names.add(base.attr)
    for keyword in node.keywords:
        if keyword.arg == "metaclass" and isinstance(keyword.value, (ast.Name, ast.Attribute)):
            value = keyword.value
            names.add(value.id if isinstance(value, ast.Name) else value.attr)
    return names


def _is_abstract_method(node: ast.AST) -> bool:
    if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
        return False
    for decorator in node.decorator_list:
        if isinstance(decorator, ast.Name) and decorator.id == "abstractmethod":
            return True
        if isinstance(decorator, ast.Attribute) and decorator.attr == "abstractmethod":
            return True
    return False


def _raised_names(tree: ast.AST) -> Set[str]:
    names = set()
    for node in ast.walk(tree):
        if not isinstance(node, ast.Raise) or node.exc is None:
            continue
        exc = node.exc.func if isinstance(node.exc, ast.Call) else node.exc
        if isinstance(exc, ast.Name):
            names.add(exc.id)
        elif isinstance(exc, ast.Attribute):
            names.add(exc.attr)
    return names


class SnippetValidationService:
    """Validates snippets against the catalog."""

    def __init__(self, registry: PrincipleRegistry, snippet_source: SnippetSourcePort,
                 logger, import_modules: bool = True):
        self._registry = registry
        self._snippet_source = snippet_source
        self._logger = logger
        self._import_modules = import_modules

    def validate_source(self, snippet: Snippet, source: str) -> SnippetReport:
        """Validate snippet source text without touching the filesystem."""
        report = SnippetReport(snippet=snippet)

        first_line = source.split("\n", 1)[0].strip()
        if first_line != snippet.variant.marker:
            report.problems.append(
                f"first line is {first_line!r}, expected {snippet.variant.marker!r}"
            )

        try:
            tree = ast.parse(source, filename=snippet.filename)
        except SyntaxError as e:
            report.problems.append(f"syntax error at line {e.lineno}: {e.msg}")
            return report

        classes = {node.name: node for node in tree.body if isinstance(node, ast.ClassDef)}
        report.classes_found = list(classes)

        for name in snippet.classes:
            if name not in classes:
                report.problems.append(f"class {name} is not defined")

        for name in snippet.abstractions:
            node = classes.get(name)
            if node is None:
                continue
            if "ABC" not in _base_names(node) and "ABCMeta" not in _base_names(node):
                report.problems.append(f"class {name} does not derive from ABC")
            elif not any(_is_abstract_method(item) for item in node.body):
                report.problems.append(f"class {name} declares no abstract methods")

        raised = _raised_names(tree)
        for name in snippet.raises:
            if name not in raised:
                report.problems.append(f"{name} is never raised")

        return report

    def validate_snippet(self, snippet: Snippet) -> SnippetReport:
        """Validate one snippet file and, optionally, import its module."""
        try:
            source = self._snippet_source.read(snippet)
        except SnippetNotFoundError as e:
            return SnippetReport(snippet=snippet, problems=[str(e)])

        report = self.validate_source(snippet, source)

        if self._import_modules and report.is_valid:
            try:
                importlib.import_module(snippet.module)
            except Exception as e:
                report.problems.append(f"import failed: {type(e).__name__}: {e}")

        if report.is_valid:
            self._logger.debug("Snippet valid", snippet=snippet.key)
        else:
            self._logger.warning("Snippet invalid", snippet=snippet.key, problems=report.problems)
        return report

    def validate_principle(self, principle: Principle) -> List[SnippetReport]:
        return [self.validate_snippet(snippet) for snippet in principle.snippets()]

    def validate_all(self, principle_id: Optional[str] = None) -> List[SnippetReport]:
        """Validate every registered principle, or just one."""
        if principle_id is not None:
            return self.validate_principle(self._registry.get_principle(principle_id))

        reports: List[SnippetReport] = []
        for principle in self._registry.list_principles():
            reports.extend(self.validate_principle(principle))
        self._logger.info(
            "Validated snippets",
            total=len(reports),
            invalid=sum(1 for report in reports if not report.is_valid),
        )
        return reports

    def ensure_valid(self, principle_id: Optional[str] = None) -> List[SnippetReport]:
        """
        Validate and raise on any problem.

        Raises:
            SnippetValidationError: If any snippet has problems
        """
        reports = self.validate_all(principle_id)
        problems = {report.snippet.key: report.problems for report in reports if report.problems}
        if problems:
            raise SnippetValidationError(problems)
        return reports
