"""
Completion service that communicates with the editor via stdio.

Runs as a background process; each stdin line is one JSON-RPC request and
each stdout line one response.
"""

import json
import sys
from typing import Any, Dict, Optional, TextIO

from archhint.completion.engine import CompletionEngine
from archhint.server.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    CompletionRequest,
    InvalidParams,
    JSONRPCMessage,
)
from archhint.utils.logger import logger


class CompletionService:
    """
    Completion service that handles requests via JSON-RPC over stdio.
    """

    def __init__(self, engine: CompletionEngine):
        """
        Initialize completion service.

        Args:
            engine: Completion engine holding the session schema
        """
        self.engine = engine
        self._handlers = {
            'provideCompletions': self._handle_provide_completions,
            'provideCompletionsOnNewline': self._handle_provide_completions_on_newline,
            'architectureAsCode': self._handle_acknowledge,
            'reloadSchema': self._handle_reload_schema,
            'getStats': self._handle_get_stats,
            'ping': lambda params: {'status': 'ok'},
        }

    def handle_request(self, request_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle a JSON-RPC request.

        Args:
            request_data: Parsed JSON-RPC request

        Returns:
            Response dictionary
        """
        if not isinstance(request_data, dict):
            return JSONRPCMessage.error(INVALID_PARAMS, "Request must be an object", None)

        method = request_data.get('method')
        params = request_data.get('params') or {}
        request_id = request_data.get('id')

        handler = self._handlers.get(method)
        if handler is None:
            return JSONRPCMessage.error(METHOD_NOT_FOUND, f"Method not found: {method}", request_id)

        try:
            return JSONRPCMessage.response(handler(params), request_id)
        except InvalidParams as e:
            return JSONRPCMessage.error(INVALID_PARAMS, str(e), request_id)
        except Exception as e:
            logger.error("SERVICE", f"Error handling {method}", e)
            return JSONRPCMessage.error(INTERNAL_ERROR, str(e), request_id)

    def _handle_provide_completions(self, params: Dict[str, Any]) -> Dict[str, Any]:
        request = CompletionRequest.from_dict(params)
        suggestions = self.engine.provide_completions(
            request.content, request.position, request.trigger_character
        )
        return {'items': [s.to_dict() for s in suggestions]}

    def _handle_provide_completions_on_newline(self, params: Dict[str, Any]) -> Dict[str, Any]:
        request = CompletionRequest.from_dict(params)
        suggestions = self.engine.provide_completions_on_newline(request.content, request.position)
        return {'items': [s.to_dict() for s in suggestions]}

    def _handle_acknowledge(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {'message': self.engine.acknowledge()}

    def _handle_reload_schema(self, params: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.reset()
        return {'status': 'ok', 'schema_loaded': self.engine.schema is not None}

    def _handle_get_stats(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self.engine.stats()

    def handle_line(self, line: str) -> Optional[Dict[str, Any]]:
        """Decode one input line and produce its response; blank lines are ignored."""
        line = line.strip()
        if not line:
            return None

        try:
            request_data = JSONRPCMessage.parse(line)
        except json.JSONDecodeError as e:
            logger.warning("SERVICE", f"Invalid JSON: {e}")
            return JSONRPCMessage.error(PARSE_ERROR, "Parse error", None)

        return self.handle_request(request_data)

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """
        Run the service loop, reading from stdin and writing to stdout.
        """
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        logger.dispatch("service", "starting stdio loop")

        try:
            for line in stdin:
                response = self.handle_line(line)
                if response is not None:
                    stdout.write(json.dumps(response) + "\n")
                    stdout.flush()
        except KeyboardInterrupt:
            logger.dispatch("service", "interrupted")
        finally:
            logger.dispatch("service", "shutting down")
