"""Port for README rendering services."""

from abc import ABC, abstractmethod
from typing import Sequence

from solid_principles.domain.principle import Principle


class ReadmeRenderingPort(ABC):
    """Port for README rendering services."""

    @abstractmethod
    def render(self, principles: Sequence[Principle]) -> str:
        """Render the README markdown for the given principles."""
