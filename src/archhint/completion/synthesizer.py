"""
Suggestion synthesis: combines schema, structural position and document
scans into an ordered list of candidates.

synthesize() is pure; all inputs are computed per request by the engine.
"""

from typing import Dict, List, Optional, Sequence

from archhint.completion.document import DocumentSnapshot, Position, key_token
from archhint.completion.position import StructuralPosition
from archhint.completion.suggestion import Suggestion, SuggestionKind
from archhint.schema.tree import (
    ArrayOfObjectNode,
    EnumNode,
    ObjectNode,
    SchemaNode,
    lookup,
)

RELATIONSHIPS_KEY = "Relationships"
REFERENCE_FIELDS = ("Start", "End")
SEQUENCE_MARKER = "- "


def synthesize(
    document: DocumentSnapshot,
    position: Position,
    schema: SchemaNode,
    structural: StructuralPosition,
    identifiers: Sequence[str],
    root_usage: Dict[str, bool],
) -> List[Suggestion]:
    """
    Build the candidates for one completion request.

    Args:
        document: Snapshot of the text being edited
        position: Cursor position (clamped to the document)
        schema: Schema root
        structural: Resolved structural position of the cursor
        identifiers: Node identifiers declared in the Nodes block
        root_usage: Which root properties already occur in the document

    Returns:
        Suggestions in schema declaration order
    """
    line_prefix = document.text_before(position)

    if line_prefix.rstrip().endswith(":"):
        property_name = strip_marker(line_prefix.rstrip()[:-1].strip())
        return value_suggestions(schema, structural, property_name, identifiers)

    partial = line_prefix.strip()

    if structural.is_root:
        return root_suggestions(schema, structural, root_usage, partial)

    scope = lookup(schema, structural.parent_path)
    if isinstance(scope, ArrayOfObjectNode):
        return sequence_suggestions(document, position, scope, structural, partial)
    if isinstance(scope, ObjectNode):
        return property_suggestions(scope, structural.used_keys, partial)
    return []


def value_suggestions(
    schema: SchemaNode,
    structural: StructuralPosition,
    property_name: str,
    identifiers: Sequence[str],
) -> List[Suggestion]:
    """Enum members, or node identifiers for relationship endpoints."""
    if structural.block == RELATIONSHIPS_KEY and property_name in REFERENCE_FIELDS:
        values: Sequence[str] = identifiers
    else:
        node = lookup(schema, (structural.parent_path or ()) + (property_name,))
        if not isinstance(node, EnumNode):
            return []
        values = node.enum_values

    return [
        Suggestion(label=value, kind=SuggestionKind.ENUM_MEMBER, insert_text=f" {value}")
        for value in values
    ]


def root_suggestions(
    schema: SchemaNode,
    structural: StructuralPosition,
    root_usage: Dict[str, bool],
    partial: str,
) -> List[Suggestion]:
    suggestions = []
    for name, node in schema.children.items():
        if root_usage.get(name) or name in structural.used_keys:
            continue
        if matches_prefix(name, partial):
            suggestions.append(field_suggestion(node))
    return suggestions


def property_suggestions(scope: SchemaNode, used: Sequence[str], partial: str) -> List[Suggestion]:
    """Children of an object or sequence element not yet declared at this level."""
    return [
        field_suggestion(node)
        for name, node in scope.children.items()
        if name not in used and matches_prefix(name, partial)
    ]


def sequence_suggestions(
    document: DocumentSnapshot,
    position: Position,
    scope: ArrayOfObjectNode,
    structural: StructuralPosition,
    partial: str,
) -> List[Suggestion]:
    """
    Inside Nodes or Relationships.

    Right below the block key, the only sensible next token is the marker
    that opens the first element.
    """
    current = document.line_at(position.line)
    previous_key = key_token(document.line_at(position.line - 1)) if position.line > 0 else None

    if not current.strip().startswith("-") and previous_key == structural.block:
        return [Suggestion(label=SEQUENCE_MARKER, kind=SuggestionKind.OPERATOR, insert_text=SEQUENCE_MARKER)]

    return property_suggestions(scope, structural.used_keys, partial)


def field_suggestion(node: SchemaNode) -> Suggestion:
    return Suggestion(
        label=node.name,
        kind=SuggestionKind.FIELD,
        insert_text=f"{node.name}:",
        detail=node.type_name,
        documentation=node.description,
        trigger_followup_suggest=isinstance(node, EnumNode),
    )


def matches_prefix(name: str, partial: Optional[str]) -> bool:
    """Case-insensitive starts-with; an empty partial matches everything."""
    return not partial or name.lower().startswith(partial.lower())


def strip_marker(text: str) -> str:
    """Drop a leading sequence marker (`- Start` -> `Start`)."""
    if text.startswith("-"):
        return text[1:].lstrip()
    return text
