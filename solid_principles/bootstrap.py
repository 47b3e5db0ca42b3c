"""Application bootstrap - wires configuration, logging, catalog and services."""

from __future__ import annotations

from typing import Optional

from solid_principles.application.readme_service import ReadmeService
from solid_principles.application.snippet_validation import SnippetValidationService
from solid_principles.catalog import PrincipleRegistry, register_default_principles
from solid_principles.config import AppConfig
from solid_principles.config.manager import get_config_manager
from solid_principles.domain.ports import SnippetSourcePort
from solid_principles.infrastructure.logging.logger import get_logger, setup_logging
from solid_principles.infrastructure.readme import JinjaReadmeRenderer
from solid_principles.infrastructure.snippets import PackageSnippetSource


class Application:
    """Application context holding the configured services."""

    def __init__(self, config_path: Optional[str] = None,
                 registry: Optional[PrincipleRegistry] = None,
                 snippet_source: Optional[SnippetSourcePort] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._initialized = False
        self._config: Optional[AppConfig] = None
        self._registry = registry
        self._snippet_source = snippet_source
        self._validation_service: Optional[SnippetValidationService] = None
        self._readme_service: Optional[ReadmeService] = None

        self.logger = get_logger(__name__)

    def initialize(self, log_level: Optional[str] = None) -> bool:
        """Load configuration, configure logging and build the services."""
        if self._initialized:
            return True

        config = get_config_manager(self.config_path).get_config()
        if log_level:
            config = config.model_copy(
                update={"logging": config.logging.model_copy(update={"level": log_level.upper()})}
            )
        self._config = config
        setup_logging(config.logging)

        if self._registry is None:
            self._registry = PrincipleRegistry.get_instance()
        register_default_principles(self._registry)

        if self._snippet_source is None:
            self._snippet_source = PackageSnippetSource()

        self._validation_service = SnippetValidationService(
            registry=self._registry,
            snippet_source=self._snippet_source,
            logger=get_logger("solid_principles.application.snippet_validation"),
        )
        renderer = JinjaReadmeRenderer(
            snippet_source=self._snippet_source,
            logger=get_logger("solid_principles.infrastructure.readme"),
            template_name=config.readme.template,
        )
        self._readme_service = ReadmeService(
            registry=self._registry,
            renderer=renderer,
            snippet_source=self._snippet_source,
            logger=get_logger("solid_principles.application.readme_service"),
            readme_path=config.readme.path,
            language=config.readme.language,
        )

        self._initialized = True
        self.logger.info(
            "Application initialized",
            principles=self._registry.get_registered_ids(),
            readme=config.readme.path,
        )
        return True

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    @property
    def config(self) -> AppConfig:
        self._ensure_initialized()
        return self._config

    def get_registry(self) -> PrincipleRegistry:
        self._ensure_initialized()
        return self._registry

    def get_snippet_source(self) -> SnippetSourcePort:
        self._ensure_initialized()
        return self._snippet_source

    def get_validation_service(self) -> SnippetValidationService:
        self._ensure_initialized()
        return self._validation_service

    def get_readme_service(self) -> ReadmeService:
        self._ensure_initialized()
        return self._readme_service


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    app = Application(config_path)
    app.initialize(log_level=log_level)
    return app
