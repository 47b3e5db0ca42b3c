"""README rendering and parsing."""

from .jinja_renderer import JinjaReadmeRenderer
from .markdown import CodeBlock, extract_code_blocks, normalize_block

__all__ = [
    "CodeBlock",
    "JinjaReadmeRenderer",
    "extract_code_blocks",
    "normalize_block",
]
