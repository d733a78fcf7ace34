"""
In-memory schema tree for architecture documents.

Every property in the schema becomes one node variant:
- ScalarNode: a plain value (string, number, array of scalars)
- EnumNode: a value restricted to an ordered set
- ObjectNode: a mapping with named child properties
- ArrayOfObjectNode: a sequence whose elements share the child properties

Nodes are frozen after construction and navigated top-down by path.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class SchemaNode:
    """Common fields of every schema property."""

    name: str
    type_name: str = ""
    description: str = ""

    kind = "scalar"

    @property
    def children(self) -> Dict[str, "SchemaNode"]:
        return {}


@dataclass(frozen=True)
class ScalarNode(SchemaNode):
    kind = "scalar"


@dataclass(frozen=True)
class EnumNode(SchemaNode):
    enum_values: Tuple[str, ...] = ()

    kind = "enum"


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    properties: Dict[str, SchemaNode] = field(default_factory=dict)

    kind = "object"

    @property
    def children(self) -> Dict[str, SchemaNode]:
        return self.properties


@dataclass(frozen=True)
class ArrayOfObjectNode(SchemaNode):
    """Sequence of elements; `properties` describe each element."""

    properties: Dict[str, SchemaNode] = field(default_factory=dict)

    kind = "array-of-object"

    @property
    def children(self) -> Dict[str, SchemaNode]:
        return self.properties


SchemaPath = Union[str, Sequence[str], None]


def can_have_children(node: Optional[SchemaNode]) -> bool:
    """Whether a property may contain nested keys. Unknown properties cannot."""
    return isinstance(node, (ObjectNode, ArrayOfObjectNode))


def split_path(path: SchemaPath) -> Tuple[str, ...]:
    if not path:
        return ()
    if isinstance(path, str):
        return tuple(part for part in path.split(".") if part)
    return tuple(path)


def lookup(root: Optional[SchemaNode], path: SchemaPath) -> Optional[SchemaNode]:
    """
    Resolve a property by descending through children.

    Args:
        root: Schema root (usually the ObjectNode returned by load_schema)
        path: Dotted string ("Relationships.Start") or sequence of segments

    Returns:
        The node at the path, the root for an empty path, or None when any
        segment is missing
    """
    current = root
    for segment in split_path(path):
        if current is None:
            return None
        current = current.children.get(segment)
    return current
