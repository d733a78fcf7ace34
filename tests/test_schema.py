"""
Tests for schema loading and lookup.
"""

import pytest

from archhint.errors import SchemaLoadError
from archhint.schema import (
    ArrayOfObjectNode,
    EnumNode,
    ObjectNode,
    ScalarNode,
    build_schema,
    can_have_children,
    load_schema,
    lookup,
)

SAMPLE = {
    "spec": {
        "properties": {
            "A": {"type": "string", "description": "plain"},
            "B": {"type": "string", "enum": ["x", "y"]},
            "C": {"type": "object", "properties": {"D": {"type": "string"}}},
            "E": {"type": "array", "items": {"properties": {"F": {"type": "string"}}}},
            "G": {"type": "array", "items": {"type": "string"}},
            "H": "not a mapping",
        }
    }
}


class TestBuildSchema:
    def test_kinds(self):
        root = build_schema(SAMPLE)

        assert isinstance(root, ObjectNode)
        assert isinstance(root.children["A"], ScalarNode)
        assert isinstance(root.children["B"], EnumNode)
        assert isinstance(root.children["C"], ObjectNode)
        assert isinstance(root.children["E"], ArrayOfObjectNode)
        assert isinstance(root.children["G"], ScalarNode)

    def test_malformed_entry_skipped(self):
        root = build_schema(SAMPLE)
        assert "H" not in root.children
        assert list(root.children) == ["A", "B", "C", "E", "G"]

    def test_enum_values_keep_order(self):
        root = build_schema(SAMPLE)
        assert root.children["B"].enum_values == ("x", "y")
        assert root.children["B"].kind == "enum"

    def test_description_and_type(self):
        node = build_schema(SAMPLE).children["A"]
        assert node.description == "plain"
        assert node.type_name == "string"

    @pytest.mark.parametrize("data", [None, [], {"spec": {}}, {"spec": {"properties": []}}])
    def test_rejects_documents_without_properties(self, data):
        with pytest.raises(SchemaLoadError):
            build_schema(data)


class TestLookup:
    def test_dotted_and_segmented_paths(self):
        root = build_schema(SAMPLE)
        assert lookup(root, "C.D").name == "D"
        assert lookup(root, ["E", "F"]).name == "F"

    def test_empty_path_is_root(self):
        root = build_schema(SAMPLE)
        assert lookup(root, None) is root
        assert lookup(root, "") is root

    def test_missing_segments(self):
        root = build_schema(SAMPLE)
        assert lookup(root, "Z") is None
        assert lookup(root, "A.X") is None
        assert lookup(root, "C.D.E") is None
        assert lookup(None, "A") is None

    def test_can_have_children(self):
        root = build_schema(SAMPLE)
        assert can_have_children(root.children["C"])
        assert can_have_children(root.children["E"])
        assert not can_have_children(root.children["A"])
        assert not can_have_children(root.children["B"])
        assert not can_have_children(None)


class TestLoadSchema:
    def test_bundled_schema(self, schema):
        assert list(schema.children) == ["Company", "Domain", "Nodes", "Relationships"]
        assert isinstance(lookup(schema, "Nodes"), ArrayOfObjectNode)
        assert lookup(schema, "Relationships.Type").enum_values == ("Sync", "Async")

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="not found"):
            load_schema(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "metadata.yaml"
        path.write_text("spec: [unclosed", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="Invalid YAML"):
            load_schema(path)

    def test_from_file(self, tmp_path):
        path = tmp_path / "metadata.yaml"
        path.write_text(
            "spec:\n"
            "  properties:\n"
            "    Company:\n"
            "      type: string\n"
            "      description: Owner\n",
            encoding="utf-8",
        )
        root = load_schema(path)
        assert root.children["Company"].description == "Owner"

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "metadata.yaml"
        path.write_bytes(b"\xff\xfespec:\n")
        with pytest.raises(SchemaLoadError, match="UTF-8"):
            load_schema(path)

    def test_enum_members_keep_source_text(self, tmp_path):
        path = tmp_path / "metadata.yaml"
        path.write_text(
            "spec:\n"
            "  properties:\n"
            "    Public:\n"
            "      type: string\n"
            "      enum: [Yes, No, On, off, y, 010, 1.0, null]\n",
            encoding="utf-8",
        )
        root = load_schema(path)
        assert root.children["Public"].enum_values == ("Yes", "No", "On", "off", "y", "010", "1.0", "null")
