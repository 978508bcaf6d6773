"""Dashboard live updates over WebSocket"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from ...application.dto.user_dto import UserResponse
from ...core.config import get_settings
from ...di.container import get_container
from ...infrastructure.notifications.websocket_manager import WebSocketManager
from .dependencies import resolve_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])

POLICY_VIOLATION = 1008


@router.websocket("/ws")
async def dashboard_updates(
    websocket: WebSocket,
    token: Optional[str] = Query(None, description="Session token"),
):
    """
    Push capture status and memory changes to an open dashboard.

    Messages:
        {"type": "status_changed", "status": "0" | "1"}
        {"type": "memories_changed"}

    The session token is taken from ``?token=`` or the session cookie.
    """
    session_token = token or websocket.cookies.get(get_settings().session_cookie_name)
    if not session_token:
        await websocket.close(code=POLICY_VIOLATION, reason="Authentication token required")
        return

    try:
        user: UserResponse = await resolve_user(session_token)
    except (ValueError, RuntimeError) as e:
        logger.warning("Rejected dashboard socket: %s", e)
        await websocket.close(code=POLICY_VIOLATION, reason="Invalid or expired token")
        return

    manager: WebSocketManager = get_container().get(WebSocketManager)
    await websocket.accept()
    await manager.add_connection(user.id, websocket)

    try:
        await websocket.send_json({"type": "connection_established", "user_id": user.id})
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_text("pong")
    except WebSocketDisconnect:
        logger.debug("Dashboard socket for user %s disconnected", user.id)
    finally:
        await manager.remove_connection(user.id, websocket)
