"""
prompt_toolkit adapter for the completion engine.

Used by `archhint edit` to offer schema-aware completion while a document
is edited in the terminal.
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from archhint.completion.document import Position
from archhint.completion.engine import CompletionEngine
from archhint.completion.suggestion import SuggestionKind


class SchemaCompleter(Completer):
    """
    Autocompletes keys, enum values and node references in the buffer.

    A blank current line is treated as a fresh newline, so suggestions
    follow the line above.
    """

    def __init__(self, engine: CompletionEngine):
        """
        Initialize the schema completer.

        Args:
            engine: Completion engine shared with the session
        """
        self.engine = engine

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Generate completions for the cursor position.

        Args:
            document: Current prompt document
            complete_event: Completion event

        Yields:
            Completion objects for the engine's suggestions
        """
        line_prefix = document.current_line_before_cursor
        position = Position(line=document.cursor_position_row, character=document.cursor_position_col)

        if not line_prefix.strip() and position.line > 0:
            suggestions = self.engine.provide_completions_on_newline(document.text, position)
        else:
            trigger = line_prefix[-1] if line_prefix else None
            if complete_event.completion_requested:
                trigger = None
            suggestions = self.engine.provide_completions(document.text, position, trigger)

        typed = line_prefix.strip()
        for suggestion in suggestions:
            start_position = -len(typed) if suggestion.kind is SuggestionKind.FIELD else 0
            yield Completion(
                text=suggestion.insert_text,
                start_position=start_position,
                display=suggestion.label,
                display_meta=suggestion.detail or "",
            )
