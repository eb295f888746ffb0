"""Real-time channel: echo-broadcast over a single WebSocket endpoint."""

import uuid

import structlog
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from friend.ws.manager import manager

logger = structlog.get_logger()

router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Rebroadcast every text frame to all other connected peers."""
    conn_id = str(uuid.uuid4())
    await manager.connect(websocket, conn_id)

    try:
        while True:
            data = await websocket.receive_text()
            await manager.broadcast(conn_id, data)
    except WebSocketDisconnect:
        await manager.disconnect(conn_id)
    except Exception:
        logger.exception("ws_error", conn_id=conn_id)
        await manager.disconnect(conn_id)
