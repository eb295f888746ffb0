"""WebSocket connection manager.

Tracks active connections and rebroadcasts each received frame to every
other peer. No authentication, ordering or persistence.
"""

import time
from dataclasses import dataclass, field

import structlog
from fastapi import WebSocket

logger = structlog.get_logger()


@dataclass
class ClientConnection:
    """Represents a single WebSocket client."""

    websocket: WebSocket
    connected_at: float = field(default_factory=time.time)
    messages_sent: int = 0


class ConnectionManager:
    """Manages all active WebSocket connections.

    Safe for asyncio via single-threaded event loop.
    """

    def __init__(self) -> None:
        self._connections: dict[str, ClientConnection] = {}  # conn_id -> client

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def get_stats(self) -> dict[str, object]:
        """Connection count, frames fanned out and age of the oldest connection."""
        now = time.time()
        clients = list(self._connections.values())
        return {
            "total_connections": len(clients),
            "messages_sent": sum(c.messages_sent for c in clients),
            "oldest_connection_seconds": round(max((now - c.connected_at for c in clients), default=0.0), 3),
        }

    async def connect(self, websocket: WebSocket, conn_id: str) -> None:
        """Accept a new WebSocket connection."""
        await websocket.accept()
        self._connections[conn_id] = ClientConnection(websocket=websocket)
        logger.info("ws_connected", conn_id=conn_id, connections=self.connection_count)

    async def disconnect(self, conn_id: str) -> None:
        if self._connections.pop(conn_id, None) is not None:
            logger.info("ws_disconnected", conn_id=conn_id, connections=self.connection_count)

    async def broadcast(self, sender_id: str, data: str) -> int:
        """Send ``data`` to every connection except the sender. Returns the fan-out count."""
        delivered = 0
        dead: list[str] = []
        for conn_id, client in list(self._connections.items()):
            if conn_id == sender_id:
                continue
            try:
                await client.websocket.send_text(data)
            except Exception:  # noqa: BLE001
                dead.append(conn_id)
                continue
            client.messages_sent += 1
            delivered += 1

        for conn_id in dead:
            await self.disconnect(conn_id)
        return delivered


manager = ConnectionManager()
