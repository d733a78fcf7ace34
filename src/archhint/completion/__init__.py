"""
Completion engine for architecture-as-code YAML documents.
"""

from archhint.completion.dispatcher import TriggerDispatcher
from archhint.completion.document import DocumentSnapshot, Position
from archhint.completion.engine import CompletionEngine
from archhint.completion.position import StructuralPosition, resolve
from archhint.completion.references import collect_node_identifiers, collect_root_usage
from archhint.completion.suggestion import Suggestion, SuggestionKind
from archhint.completion.synthesizer import synthesize

__all__ = [
    "CompletionEngine",
    "DocumentSnapshot",
    "Position",
    "StructuralPosition",
    "Suggestion",
    "SuggestionKind",
    "TriggerDispatcher",
    "collect_node_identifiers",
    "collect_root_usage",
    "resolve",
    "synthesize",
]
