"""
Completion engine: the session-scoped entry point used by every host.

The schema is the only state kept between requests. It is loaded on the
first request; a failed load disables suggestions for the rest of the
session until reset() is called.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from archhint.completion.dispatcher import NEWLINE, TriggerDispatcher
from archhint.completion.document import DocumentSnapshot, Position
from archhint.completion.position import resolve
from archhint.completion.references import collect_node_identifiers, collect_root_usage
from archhint.completion.suggestion import Suggestion
from archhint.completion.synthesizer import synthesize
from archhint.errors import SchemaLoadError
from archhint.schema.loader import BUNDLED_SCHEMA, load_schema
from archhint.schema.tree import ObjectNode
from archhint.utils.logger import logger

ACKNOWLEDGEMENT = "Architecture as code smart-hint support!"


class CompletionEngine:
    """
    Completion session for architecture documents.

    Hosts (the stdio service, the interactive editor) hold one engine and
    call provide_completions() per keystroke.
    """

    def __init__(
        self,
        schema_path: Union[str, Path, None] = None,
        dispatcher: Optional[TriggerDispatcher] = None,
    ):
        """
        Initialize the engine.

        Args:
            schema_path: Schema file to load lazily (default: bundled schema)
            dispatcher: Trigger dispatcher (default: letters, ':' and space)
        """
        self.schema_path = Path(schema_path) if schema_path else BUNDLED_SCHEMA
        self.dispatcher = dispatcher or TriggerDispatcher()
        self.requests = 0
        self._schema: Optional[ObjectNode] = None
        self._load_failed = False

    @classmethod
    def from_schema(cls, schema: ObjectNode) -> "CompletionEngine":
        """Engine over an already built schema tree."""
        engine = cls()
        engine._schema = schema
        return engine

    @property
    def schema(self) -> Optional[ObjectNode]:
        if self._schema is None and not self._load_failed:
            try:
                self._schema = load_schema(self.schema_path)
            except SchemaLoadError as e:
                self._load_failed = True
                logger.schema_failed(str(self.schema_path), str(e))
        return self._schema

    def reset(self):
        """Drop the loaded schema so the next request loads it again."""
        self._schema = None
        self._load_failed = False

    def provide_completions(
        self,
        text: str,
        position: Position,
        trigger_character: Optional[str] = None,
    ) -> List[Suggestion]:
        """
        Suggestions for a cursor position.

        Args:
            text: Full document text
            position: Cursor position
            trigger_character: Character that triggered the request, None for
                manual invocation; a newline routes to the newline variant

        Returns:
            Ordered suggestions, empty when nothing applies or anything fails
        """
        self.requests += 1
        logger.completion_request(position.line, position.character, trigger_character)

        try:
            if not self.dispatcher.accepts(trigger_character):
                return []

            schema = self.schema
            if schema is None:
                return []

            document = DocumentSnapshot(text)
            target = self.dispatcher.target_position(
                document, document.clamp(position), trigger_character, schema
            )
            return self._synthesize(document, document.clamp(target), schema)
        except Exception as e:
            logger.error("ENGINE", "Completion failed", e)
            return []

    def provide_completions_on_newline(self, text: str, position: Position) -> List[Suggestion]:
        return self.provide_completions(text, position, trigger_character=NEWLINE)

    def _synthesize(self, document: DocumentSnapshot, position: Position, schema: ObjectNode) -> List[Suggestion]:
        structural = resolve(document, position, schema)
        logger.structural_position(structural.indent_level, structural.parent_path, structural.used_keys)

        identifiers = collect_node_identifiers(document)
        logger.node_identifiers(identifiers)

        root_usage = collect_root_usage(document, schema.children)
        suggestions = synthesize(document, position, schema, structural, identifiers, root_usage)
        logger.suggestions(".".join(structural.parent_path or ("<root>",)), len(suggestions))
        return suggestions

    def acknowledge(self) -> str:
        """The discoverable no-op command."""
        logger.dispatch("command", "acknowledgement requested")
        return ACKNOWLEDGEMENT

    def stats(self) -> Dict[str, Any]:
        return {
            'schema_path': str(self.schema_path),
            'schema_loaded': self._schema is not None,
            'schema_failed': self._load_failed,
            'requests': self.requests,
        }
