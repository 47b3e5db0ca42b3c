"""Fenced code block extraction from markdown."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

FENCE_CHARS = ("`", "~")
MIN_FENCE = 3


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block and the headings it sits under."""
    language: str
    text: str
    line: int
    section: Optional[str] = None
    heading: Optional[str] = None

    @property
    def first_line(self) -> str:
        return self.text.split("\n", 1)[0].strip()


def normalize_block(text: str) -> str:
    """Drop trailing newlines; everything else must match exactly."""
    return text.rstrip("\n")


def _heading(line: str) -> Optional[tuple]:
    stripped = line.lstrip()
    if not stripped.startswith("#"):
        return None
    level = len(stripped) - len(stripped.lstrip("#"))
    title = stripped[level:].strip()
    if level > 6 or not title or not stripped[level:level + 1].isspace():
        return None
    return level, title


def _fence(stripped: str) -> Optional[Tuple[str, int, str]]:
    """Return (fence char, run length, info string) for an opening fence line."""
    char = stripped[:1]
    if char not in FENCE_CHARS:
        return None
    length = len(stripped) - len(stripped.lstrip(char))
    if length < MIN_FENCE:
        return None
    info = stripped[length:].strip()
    if char == "`" and "`" in info:
        return None
    return char, length, info


def _closes(stripped: str, char: str, length: int) -> bool:
    return len(stripped) >= length and stripped == char * len(stripped)


def extract_code_blocks(markdown: str, language: Optional[str] = None) -> List[CodeBlock]:
    """
    Extract fenced code blocks in document order.

    Args:
        markdown: Markdown document text
        language: Only return blocks with this info string; None returns all

    Returns:
        Code blocks with their 1-based opening line, the nearest level-2
        heading (``section``) and the nearest heading of any level (``heading``).
        An unterminated block runs to the end of the document.
    """
    blocks: List[CodeBlock] = []
    section: Optional[str] = None
    heading: Optional[str] = None

    lines = markdown.splitlines()
    index = 0
    while index < len(lines):
        line = lines[index]
        stripped = line.strip()

        fence = _fence(stripped)
        if fence is not None:
            char, length, info = fence
            block_language = info.split()[0] if info else ""
            start = index + 1
            body: List[str] = []
            index += 1
            while index < len(lines) and not _closes(lines[index].strip(), char, length):
                body.append(lines[index])
                index += 1
            if language is None or block_language == language:
                blocks.append(CodeBlock(
                    language=block_language,
                    text="\n".join(body),
                    line=start,
                    section=section,
                    heading=heading,
                ))
            index += 1
            continue

        parsed = _heading(line)
        if parsed is not None:
            level, title = parsed
            heading = title
            if level <= 2:
                section = title
        index += 1

    return blocks
