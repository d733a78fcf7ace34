"""
Read-only document view handed to the completion engine for one request.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

KEY_PATTERN = re.compile(r"^\s*([^:\s]+)\s*:")
INDENT_PATTERN = re.compile(r"^(\s*)")


@dataclass(frozen=True)
class Position:
    """Cursor position (0-indexed line and character)."""

    line: int
    character: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "character": self.character}

    @classmethod
    def from_dict(cls, data: Dict) -> "Position":
        return cls(line=int(data.get("line", 0)), character=int(data.get("character", 0)))


class DocumentSnapshot:
    """
    Immutable line view of the text being edited.

    Reads outside the document return an empty line instead of raising,
    so heuristics can look at neighbouring lines without bounds checks.
    """

    def __init__(self, text: str):
        self.text = text
        self._lines: List[str] = text.replace("\r\n", "\n").split("\n")

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def line_at(self, line: int) -> str:
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return ""

    def clamp(self, position: Position) -> Position:
        """Move a position inside the document."""
        line = min(max(position.line, 0), len(self._lines) - 1)
        character = min(max(position.character, 0), len(self._lines[line]))
        return Position(line=line, character=character)

    def text_before(self, position: Position) -> str:
        return self.line_at(position.line)[:max(position.character, 0)]


def indent_level(line: str) -> int:
    """Number of leading whitespace characters."""
    return len(INDENT_PATTERN.match(line).group(1))


def key_token(line: str) -> Optional[str]:
    """Key declared on a line (`  Name: x` -> `Name`); None for `- Api:` or free text."""
    match = KEY_PATTERN.match(line)
    return match.group(1) if match else None
