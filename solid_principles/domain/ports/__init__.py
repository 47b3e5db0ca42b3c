"""Domain ports for infrastructure concerns."""

from .readme_rendering_port import ReadmeRenderingPort
from .snippet_source_port import SnippetSourcePort

__all__ = [
    "ReadmeRenderingPort",
    "SnippetSourcePort",
]
