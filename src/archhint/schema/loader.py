"""
Schema loading from the declarative YAML metadata file.

The file has a root `spec.properties` mapping. Each entry carries `type`,
`description`, and optionally `enum`, `properties` (objects) or
`items.properties` (arrays of objects).
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from archhint.errors import SchemaLoadError
from archhint.schema.tree import (
    ArrayOfObjectNode,
    EnumNode,
    ObjectNode,
    ScalarNode,
    SchemaNode,
)
from archhint.utils.logger import logger

ROOT_NAME = "spec"

BUNDLED_SCHEMA = Path(__file__).resolve().parent.parent / "data" / "metadata.yaml"


class SchemaLoader(yaml.SafeLoader):
    """Safe loader that keeps every plain scalar as its source text (`Yes` stays `Yes`)."""


SchemaLoader.yaml_implicit_resolvers = {}


def load_schema(source: Union[str, Path]) -> ObjectNode:
    """
    Read and parse a schema file.

    Args:
        source: Path to the YAML metadata file

    Returns:
        Root ObjectNode whose children are the top-level document properties

    Raises:
        SchemaLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(source)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=SchemaLoader)
    except FileNotFoundError as e:
        raise SchemaLoadError(f"Schema file not found: {path}") from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SchemaLoadError(f"Schema file {path} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in schema file {path}: {e}") from e

    root = build_schema(data)
    logger.schema_loaded(str(path), len(root.children))
    return root


def build_schema(data: Any) -> ObjectNode:
    """Convert a deserialized metadata document into the schema tree."""
    if not isinstance(data, Mapping):
        raise SchemaLoadError("Schema document must be a mapping")

    spec = data.get("spec")
    if not isinstance(spec, Mapping) or not isinstance(spec.get("properties"), Mapping):
        raise SchemaLoadError("Schema document has no 'spec.properties' mapping")

    return ObjectNode(
        name=ROOT_NAME,
        type_name="object",
        description=str(spec.get("description", "")),
        properties=_build_properties(spec["properties"], ROOT_NAME),
    )


def _build_properties(properties: Mapping, parent: str) -> Dict[str, SchemaNode]:
    nodes: Dict[str, SchemaNode] = {}
    for name, definition in properties.items():
        name = str(name)
        if not isinstance(definition, Mapping):
            logger.warning("SCHEMA", f"Skipping malformed property {parent}.{name}")
            continue
        nodes[name] = _build_node(name, definition, f"{parent}.{name}")
    return nodes


def _build_node(name: str, definition: Mapping, dotted: str) -> SchemaNode:
    type_name = str(definition.get("type", ""))
    description = str(definition.get("description", ""))

    enum = definition.get("enum")
    if isinstance(enum, list):
        return EnumNode(
            name=name,
            type_name=type_name,
            description=description,
            enum_values=tuple(str(value) for value in enum),
        )

    nested = definition.get("properties")
    if type_name == "object" or isinstance(nested, Mapping):
        return ObjectNode(
            name=name,
            type_name=type_name or "object",
            description=description,
            properties=_build_properties(nested, dotted) if isinstance(nested, Mapping) else {},
        )

    items = definition.get("items")
    if isinstance(items, Mapping) and isinstance(items.get("properties"), Mapping):
        return ArrayOfObjectNode(
            name=name,
            type_name=type_name or "array",
            description=description,
            properties=_build_properties(items["properties"], dotted),
        )

    return ScalarNode(name=name, type_name=type_name, description=description)
