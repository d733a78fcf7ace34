"""
Structural position inference over partial, possibly invalid documents.

A real YAML parser rejects most in-progress edits, so the structure around
the cursor is inferred from indentation alone. Everything that needs to know
"where the cursor is" goes through resolve(), which keeps the heuristics in
one place.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from archhint.completion.document import DocumentSnapshot, Position, indent_level, key_token
from archhint.schema.tree import SchemaNode, can_have_children, lookup


@dataclass(frozen=True)
class StructuralPosition:
    """Where the cursor sits in the implicit schema hierarchy."""

    indent_level: int
    parent_path: Optional[Tuple[str, ...]]
    used_keys: FrozenSet[str]

    @property
    def is_root(self) -> bool:
        return self.parent_path is None

    @property
    def block(self) -> Optional[str]:
        """Innermost enclosing key, e.g. `Relationships`."""
        return self.parent_path[-1] if self.parent_path else None


def resolve(
    document: DocumentSnapshot,
    position: Position,
    schema: Optional[SchemaNode] = None,
) -> StructuralPosition:
    """
    Infer indentation, enclosing path and sibling keys for a cursor.

    Args:
        document: Snapshot of the text being edited
        position: Cursor position; the line is used, not the column
        schema: Schema root, consulted to decide whether the line above can
            contain children

    Returns:
        StructuralPosition for the cursor line
    """
    indent = effective_indent(document, position.line, schema)
    return StructuralPosition(
        indent_level=indent,
        parent_path=find_parent_path(document, position.line, indent),
        used_keys=used_keys_at_level(document, position.line, indent),
    )


def effective_indent(document: DocumentSnapshot, line: int, schema: Optional[SchemaNode]) -> int:
    """
    Indentation of the cursor line, snapped back after a leaf property.

    When the line above declares a property that cannot hold children and
    the cursor line is deeper, the editor auto-indented past a scalar; the
    cursor really belongs at that property's level.
    """
    current = indent_level(document.line_at(line))
    if line <= 0:
        return current

    previous = document.line_at(line - 1)
    previous_indent = indent_level(previous)
    if current > previous_indent and leaf_property_above(document, line, schema):
        return previous_indent
    return current


def leaf_property_above(document: DocumentSnapshot, line: int, schema: Optional[SchemaNode]) -> bool:
    """
    True if the previous line declares a key whose schema node has no children.

    Keys missing from the schema count as leaves; without a schema nothing does.
    """
    if line <= 0 or schema is None:
        return False
    previous = document.line_at(line - 1)
    key = key_token(previous)
    if key is None:
        return False
    return not can_have_children(property_node(document, line - 1, key, schema))


def property_node(
    document: DocumentSnapshot,
    line: int,
    key: str,
    schema: Optional[SchemaNode],
) -> Optional[SchemaNode]:
    """Schema node for the key declared on `line`, resolved in its own scope."""
    parent = find_parent_path(document, line, indent_level(document.line_at(line)))
    return lookup(schema, (parent or ()) + (key,))


def find_parent_path(document: DocumentSnapshot, line: int, indent: int) -> Optional[Tuple[str, ...]]:
    """
    Walk upward collecting the keys of enclosing lines, outermost first.

    A line encloses the cursor when its indentation is strictly smaller than
    the current bound; the bound then shrinks to that line's indentation.
    The walk ends after a zero-indentation line; a root line without a key
    means the cursor is at the root. Blank lines and lines without a key
    token (sequence markers) are passed over.
    """
    if indent <= 0:
        return None

    ancestors: List[str] = []
    bound = indent
    for number in range(min(line, document.line_count) - 1, -1, -1):
        text = document.line_at(number)
        line_indent = indent_level(text)
        key = key_token(text)

        if not text.strip():
            continue

        if line_indent == 0:
            if key is not None:
                ancestors.append(key)
            break

        if line_indent < bound and key is not None:
            ancestors.append(key)
            bound = line_indent

    if not ancestors:
        return None
    return tuple(reversed(ancestors))


def used_keys_at_level(document: DocumentSnapshot, line: int, indent: int) -> FrozenSet[str]:
    """
    Keys already declared next to the cursor at exactly `indent`.

    The block extends up and down while lines are indented at least as deep
    as the cursor; any shallower non-blank line is a boundary. The cursor
    line itself is excluded.
    """
    start = line
    while start > 0 and _within_block(document.line_at(start - 1), indent):
        start -= 1

    end = line
    while end < document.line_count - 1 and _within_block(document.line_at(end + 1), indent):
        end += 1

    used = set()
    for number in range(start, end + 1):
        if number == line:
            continue
        text = document.line_at(number)
        if indent_level(text) == indent:
            key = key_token(text)
            if key is not None:
                used.add(key)
    return frozenset(used)


def _within_block(text: str, indent: int) -> bool:
    return not text.strip() or indent_level(text) >= indent
