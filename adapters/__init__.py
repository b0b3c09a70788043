"""
Adapters package - External service connections.
MongoDB document store and the AI generation gateway.
"""

from adapters import ai_gateway, mongo_adapter

__all__ = [
    "ai_gateway",
    "mongo_adapter",
]
