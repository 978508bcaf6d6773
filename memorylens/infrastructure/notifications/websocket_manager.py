"""Dashboard WebSocket connections and live-update fan-out"""

import json
import logging
from threading import Lock
from typing import Any, Dict, List, Set

from fastapi import WebSocket

from ...domain.models.capture_status import CaptureStatus

logger = logging.getLogger(__name__)

STATUS_CHANGED = "status_changed"
MEMORIES_CHANGED = "memories_changed"


class WebSocketManager:
    """
    Tracks open dashboard sockets per signed-in user and pushes realtime
    database changes to them.
    """

    def __init__(self) -> None:
        self._connections: Dict[str, Set[WebSocket]] = {}
        self._lock = Lock()

    async def add_connection(self, user_id: str, websocket: WebSocket) -> None:
        with self._lock:
            self._connections.setdefault(user_id, set()).add(websocket)
        logger.info("Dashboard socket opened for user %s (%d open)", user_id, self.get_total_connections())

    async def remove_connection(self, user_id: str, websocket: WebSocket) -> None:
        with self._lock:
            sockets = self._connections.get(user_id)
            if sockets is not None:
                sockets.discard(websocket)
                if not sockets:
                    del self._connections[user_id]
        logger.info("Dashboard socket closed for user %s (%d open)", user_id, self.get_total_connections())

    async def send_to_user(self, user_id: str, message: Dict[str, Any]) -> int:
        """
        Send a JSON message to every socket a user has open.

        Sockets that fail to receive are dropped.

        Returns:
            Number of sockets the message reached
        """
        with self._lock:
            sockets = set(self._connections.get(user_id, set()))
        if not sockets:
            return 0

        try:
            payload = json.dumps(message)
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize dashboard message: %s", e)
            return 0

        delivered = 0
        stale: List[WebSocket] = []
        for websocket in sockets:
            try:
                await websocket.send_text(payload)
                delivered += 1
            except Exception as e:
                logger.warning("Dropping dashboard socket for user %s: %s", user_id, e)
                stale.append(websocket)

        if stale:
            with self._lock:
                remaining = self._connections.get(user_id)
                if remaining is not None:
                    remaining.difference_update(stale)
                    if not remaining:
                        del self._connections[user_id]
        return delivered

    async def broadcast_to_all(self, message: Dict[str, Any]) -> int:
        with self._lock:
            user_ids = list(self._connections.keys())
        delivered = 0
        for user_id in user_ids:
            delivered += await self.send_to_user(user_id, message)
        logger.debug("Broadcast %s to %d sockets", message.get("type"), delivered)
        return delivered

    async def notify_status_changed(self, status: CaptureStatus) -> int:
        return await self.broadcast_to_all({"type": STATUS_CHANGED, "status": status.value})

    async def notify_memories_changed(self) -> int:
        return await self.broadcast_to_all({"type": MEMORIES_CHANGED})

    def get_connected_users(self) -> List[str]:
        with self._lock:
            return list(self._connections.keys())

    def get_total_connections(self) -> int:
        with self._lock:
            return sum(len(sockets) for sockets in self._connections.values())


# Process-wide manager shared by the WebSocket route and realtime listeners
_websocket_manager: "WebSocketManager | None" = None


def get_websocket_manager() -> WebSocketManager:
    global _websocket_manager
    if _websocket_manager is None:
        _websocket_manager = WebSocketManager()
    return _websocket_manager
