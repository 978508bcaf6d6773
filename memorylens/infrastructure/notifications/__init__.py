"""Live dashboard notifications"""

from .websocket_manager import (
    MEMORIES_CHANGED,
    STATUS_CHANGED,
    WebSocketManager,
    get_websocket_manager,
)

__all__ = [
    "MEMORIES_CHANGED",
    "STATUS_CHANGED",
    "WebSocketManager",
    "get_websocket_manager",
]
