"""
Schema tree and loader for architecture-as-code documents.
"""

from archhint.schema.loader import BUNDLED_SCHEMA, build_schema, load_schema
from archhint.schema.tree import (
    ArrayOfObjectNode,
    EnumNode,
    ObjectNode,
    ScalarNode,
    SchemaNode,
    can_have_children,
    lookup,
)

__all__ = [
    "ArrayOfObjectNode",
    "BUNDLED_SCHEMA",
    "EnumNode",
    "ObjectNode",
    "ScalarNode",
    "SchemaNode",
    "build_schema",
    "can_have_children",
    "load_schema",
    "lookup",
]
