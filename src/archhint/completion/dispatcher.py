"""
Trigger dispatch: decides where synthesis runs for an edit event.
"""

import string
from typing import FrozenSet, Optional

from archhint.completion.document import DocumentSnapshot, Position, indent_level, key_token
from archhint.completion.position import leaf_property_above
from archhint.schema.tree import SchemaNode
from archhint.utils.logger import logger

NEWLINE = "\n"

CHARACTER_TRIGGERS: FrozenSet[str] = frozenset(string.ascii_letters + ": ")


class TriggerDispatcher:
    """Maps a trigger character to the cursor synthesis should run at."""

    def __init__(self, triggers: FrozenSet[str] = CHARACTER_TRIGGERS):
        self.triggers = triggers

    def accepts(self, trigger_character: Optional[str]) -> bool:
        """Manual invocations (no character) and configured characters run synthesis."""
        return trigger_character is None or trigger_character == NEWLINE or trigger_character in self.triggers

    def target_position(
        self,
        document: DocumentSnapshot,
        position: Position,
        trigger_character: Optional[str],
        schema: Optional[SchemaNode],
    ) -> Position:
        if trigger_character == NEWLINE:
            return self.newline_position(document, position, schema)
        return position

    def newline_position(
        self,
        document: DocumentSnapshot,
        position: Position,
        schema: Optional[SchemaNode],
    ) -> Position:
        """
        After a newline, suggest siblings rather than children of a leaf.

        If the line above declares a property that cannot have children the
        cursor column moves to that line's indentation.
        """
        if position.line <= 0:
            return position

        previous = document.line_at(position.line - 1)
        if key_token(previous) is None:
            logger.dispatch("newline", "previous line declares no property")
            return position

        if leaf_property_above(document, position.line, schema):
            column = indent_level(previous)
            logger.dispatch("newline", f"leaf {key_token(previous)!r}, column -> {column}")
            return Position(line=position.line, character=column)

        return position
