"""
Protocol definitions for editor <-> archhint communication.

Uses newline-delimited JSON-RPC 2.0 over stdio.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import json

from archhint.completion.document import Position

PARSE_ERROR = -32700
INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class InvalidParams(ValueError):
    """Request parameters are missing or have the wrong shape."""


@dataclass
class CompletionRequest:
    """Request for completion suggestions."""
    content: str
    position: Position
    trigger_character: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompletionRequest':
        """Create request from JSON-RPC params."""
        if not isinstance(data, dict):
            raise InvalidParams("params must be an object")

        content = data.get('content')
        if not isinstance(content, str):
            raise InvalidParams("'content' must be a string")

        position = data.get('position', {})
        if not isinstance(position, dict):
            raise InvalidParams("'position' must be an object")

        trigger = data.get('triggerCharacter')
        if trigger is not None and not isinstance(trigger, str):
            raise InvalidParams("'triggerCharacter' must be a string")

        try:
            return cls(
                content=content,
                position=Position.from_dict(position),
                trigger_character=trigger,
            )
        except (TypeError, ValueError) as e:
            raise InvalidParams(f"invalid position: {e}") from e


class JSONRPCMessage:
    """JSON-RPC 2.0 message format."""

    @staticmethod
    def request(method: str, params: Dict[str, Any], id: int) -> str:
        """Create a JSON-RPC request."""
        return json.dumps({
            'jsonrpc': '2.0',
            'method': method,
            'params': params,
            'id': id
        })

    @staticmethod
    def response(result: Any, id: Any) -> Dict[str, Any]:
        """Create a JSON-RPC response."""
        return {
            'jsonrpc': '2.0',
            'result': result,
            'id': id
        }

    @staticmethod
    def error(code: int, message: str, id: Any) -> Dict[str, Any]:
        """Create a JSON-RPC error response."""
        return {
            'jsonrpc': '2.0',
            'error': {
                'code': code,
                'message': message
            },
            'id': id
        }

    @staticmethod
    def parse(message: str) -> Dict[str, Any]:
        """Parse a JSON-RPC message."""
        return json.loads(message)
