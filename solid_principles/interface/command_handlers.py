"""CLI command handlers.

Each handler turns parsed arguments into a call on an application service and
returns data for the formatter. Handlers report failed checks through a
``status`` of ``failed`` so the CLI can exit non-zero after printing the report.
"""
import argparse
from abc import ABC, abstractmethod
from typing import Any, Dict, Union

from solid_principles.bootstrap import Application
from solid_principles.domain.principle import Variant
from solid_principles.infrastructure.logging.logger import get_logger

STATUS_OK = "ok"
STATUS_FAILED = "failed"

HandlerResult = Union[Dict[str, Any], str]


class CLICommandHandler(ABC):
    """Base class for CLI command handlers."""

    def __init__(self, app: Application, logger=None):
        self.app = app
        self.logger = logger or get_logger(self.__class__.__module__)

    @abstractmethod
    def handle(self, args: argparse.Namespace) -> HandlerResult:
        """Handle the command and return data to output."""


class ListPrinciplesCLIHandler(CLICommandHandler):
    """principles list"""

    def handle(self, args: argparse.Namespace) -> HandlerResult:
        principles = self.app.get_registry().list_principles()
        return {"principles": [principle.to_dict() for principle in principles]}


class ShowPrincipleCLIHandler(CLICommandHandler):
    """principles show ID [--variant bad|good]"""

    def handle(self, args: argparse.Namespace) -> HandlerResult:
        principle = self.app.get_registry().get_principle(args.principle_id)
        variant = getattr(args, "variant", None)

        if variant:
            snippet = principle.snippet(Variant(variant))
            return self.app.get_snippet_source().read(snippet)

        source = self.app.get_snippet_source()
        return {
            **principle.to_dict(),
            "bad_prose": principle.bad_prose,
            "good_prose": principle.good_prose,
            "bad_source": source.read(principle.bad),
            "good_source": source.read(principle.good),
        }


class ValidateSnippetsCLIHandler(CLICommandHandler):
    """snippets validate [ID]"""

    def handle(self, args: argparse.Namespace) -> HandlerResult:
        reports = self.app.get_validation_service().validate_all(getattr(args, "principle_id", None))
        valid = all(report.is_valid for report in reports)
        return {
            "status": STATUS_OK if valid else STATUS_FAILED,
            "snippets": [report.to_dict() for report in reports],
        }


class RenderReadmeCLIHandler(CLICommandHandler):
    """readme render [--output PATH]"""

    def handle(self, args: argparse.Namespace) -> HandlerResult:
        readme_service = self.app.get_readme_service()
        output = getattr(args, "output", None)
        if output:
            written = readme_service.write(output)
            return {"status": STATUS_OK, "written": written}
        return readme_service.render()


class CheckReadmeCLIHandler(CLICommandHandler):
    """readme check [--readme PATH]"""

    def handle(self, args: argparse.Namespace) -> HandlerResult:
        report = self.app.get_readme_service().check(getattr(args, "readme", None))
        return {
            "status": STATUS_OK if report.in_sync else STATUS_FAILED,
            "readme": report.to_dict(),
        }


COMMAND_HANDLERS = {
    ("principles", "list"): ListPrinciplesCLIHandler,
    ("principles", "show"): ShowPrincipleCLIHandler,
    ("snippets", "validate"): ValidateSnippetsCLIHandler,
    ("readme", "render"): RenderReadmeCLIHandler,
    ("readme", "check"): CheckReadmeCLIHandler,
}
