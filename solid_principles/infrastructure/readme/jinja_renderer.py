"""Jinja2 README renderer."""

from typing import Any, Dict, List, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateNotFound

from solid_principles.domain.exceptions import ConfigurationError
from solid_principles.domain.ports import ReadmeRenderingPort, SnippetSourcePort
from solid_principles.domain.principle import Principle


class JinjaReadmeRenderer(ReadmeRenderingPort):
    """Renders the README from a packaged Jinja2 template.

    Snippet sources are read through the injected ``SnippetSourcePort`` and
    inserted unchanged, so the rendered code blocks match the files exactly.
    """

    def __init__(self, snippet_source: SnippetSourcePort, logger, template_name: str = "README.md.j2"):
        self._snippet_source = snippet_source
        self._logger = logger
        self._template_name = template_name
        self._env = Environment(
            loader=PackageLoader("solid_principles", "templates"),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def _context(self, principles: Sequence[Principle]) -> Dict[str, Any]:
        items: List[Dict[str, Any]] = []
        for principle in principles:
            items.append({
                "principle": principle,
                "bad_source": self._snippet_source.read(principle.bad),
                "good_source": self._snippet_source.read(principle.good),
            })
        return {"items": items}

    def render(self, principles: Sequence[Principle]) -> str:
        try:
            template = self._env.get_template(self._template_name)
        except TemplateNotFound as e:
            raise ConfigurationError(f"README template not found: {self._template_name}") from e

        rendered = template.render(**self._context(principles))
        self._logger.debug(
            "Rendered README",
            template=self._template_name,
            principles=len(principles),
        )
        return rendered
