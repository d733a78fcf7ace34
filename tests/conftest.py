"""
Shared fixtures for archhint tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from archhint.completion.document import Position
from archhint.completion.engine import CompletionEngine
from archhint.schema.loader import BUNDLED_SCHEMA, load_schema

CURSOR = "|"


def split_cursor(marked: str):
    """Turn 'Company: x\\nDo|' into the text and the Position of the bar."""
    offset = marked.index(CURSOR)
    text = marked[:offset] + marked[offset + 1:]
    before = marked[:offset].split("\n")
    return text, Position(line=len(before) - 1, character=len(before[-1]))


@pytest.fixture(scope="session")
def schema():
    return load_schema(BUNDLED_SCHEMA)


@pytest.fixture
def engine(schema):
    return CompletionEngine.from_schema(schema)


@pytest.fixture
def complete(engine):
    """complete('...|...', trigger=None) -> list of labels."""

    def _complete(marked: str, trigger=None, newline=False):
        text, position = split_cursor(marked)
        if newline:
            suggestions = engine.provide_completions_on_newline(text, position)
        else:
            suggestions = engine.provide_completions(text, position, trigger)
        return suggestions

    return _complete
