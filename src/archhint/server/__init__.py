"""
JSON-RPC stdio host for the completion engine.
"""

from archhint.server.service import CompletionService

__all__ = ['CompletionService']
