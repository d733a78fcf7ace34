"""
Completion candidates returned to the host.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

TRIGGER_SUGGEST_COMMAND = "editor.action.triggerSuggest"


class SuggestionKind(Enum):
    """Candidate kinds, valued with their LSP CompletionItemKind numbers."""

    FIELD = 5
    ENUM_MEMBER = 20
    OPERATOR = 24


@dataclass(frozen=True)
class Suggestion:
    """One completion candidate."""

    label: str
    kind: SuggestionKind
    insert_text: str
    detail: Optional[str] = None
    documentation: Optional[str] = None
    trigger_followup_suggest: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """LSP-style completion item."""
        item: Dict[str, Any] = {
            'label': self.label,
            'kind': self.kind.value,
            'insertText': self.insert_text,
        }
        if self.detail is not None:
            item['detail'] = self.detail
        if self.documentation is not None:
            item['documentation'] = self.documentation
        if self.trigger_followup_suggest:
            item['command'] = {'command': TRIGGER_SUGGEST_COMMAND, 'title': 'Suggest'}
        return item
