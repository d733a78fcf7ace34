"""
archhint - schema-aware completion for architecture-as-code YAML documents.
"""

__version__ = "0.1.0"

from archhint.completion.engine import CompletionEngine
from archhint.completion.document import Position

__all__ = ["CompletionEngine", "Position", "__version__"]
