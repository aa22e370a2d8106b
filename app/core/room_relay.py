"""In-memory room membership and broadcast for the room socket."""

import uuid
from datetime import datetime
from typing import Any, Awaitable, Dict, Optional, Protocol, Set
import logging

logger = logging.getLogger(__name__)

NEW_MESSAGE_EVENT = "new_message"


class MessageSink(Protocol):
    """Anything that can receive a JSON frame, e.g. a Starlette WebSocket."""

    def send_json(self, data: Any) -> Awaitable[None]: ...


class RoomConnection:
    """A live connection known to the relay"""

    def __init__(self, connection_id: str, sink: MessageSink):
        self.connection_id = connection_id
        self.sink = sink
        self.connected_at = datetime.now()
        self.rooms: Set[str] = set()


class RoomRelay:
    """
    Tracks which connections joined which rooms and fans messages out.

    Callers only ever hold connection ids. Rooms exist while they have at
    least one member. All bookkeeping runs in synchronous segments on the
    event loop, so no lock is taken.
    """

    _instance: Optional["RoomRelay"] = None

    def __new__(cls):
        """Implements the singleton pattern for the RoomRelay."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initializes the relay's state."""
        if not hasattr(self, "_initialized"):
            self._initialized = True
            self._connections: Dict[str, RoomConnection] = {}
            # room name -> {connection id: alias}, in join order
            self._rooms: Dict[str, Dict[str, str]] = {}

    def connect(self, sink: MessageSink) -> str:
        """Registers a live connection and returns its id"""
        connection_id = str(uuid.uuid4())
        self._connections[connection_id] = RoomConnection(connection_id, sink)
        logger.info(f"Connection {connection_id} registered")
        return connection_id

    def join(self, connection_id: str, room_name: str, alias: str = "") -> bool:
        """
        Adds the connection to a room. Joining twice is a no-op.

        Returns False when the connection id is unknown (already disconnected).
        """
        connection = self._connections.get(connection_id)
        if connection is None:
            logger.warning(f"Join from unknown connection {connection_id} ignored")
            return False

        members = self._rooms.setdefault(room_name, {})
        if connection_id not in members:
            members[connection_id] = alias
            connection.rooms.add(room_name)
            logger.info(f"{alias or connection_id} joined room '{room_name}'")
        return True

    async def relay(
        self, connection_id: str, room_name: str, payload: Dict[str, Any]
    ) -> int:
        """
        Sends the payload to every other member of the room.

        Best effort: a peer that fails to receive is logged and skipped. Returns
        the number of successful deliveries.
        """
        recipients = [
            self._connections[member_id]
            for member_id in self._rooms.get(room_name, {})
            if member_id != connection_id and member_id in self._connections
        ]

        delivered = 0
        frame = {"event": NEW_MESSAGE_EVENT, "data": payload}
        for recipient in recipients:
            try:
                await recipient.sink.send_json(frame)
                delivered += 1
            except Exception as e:
                logger.warning(
                    f"Could not deliver to {recipient.connection_id} in '{room_name}': {e}"
                )
        return delivered

    def disconnect(self, connection_id: str):
        """Removes the connection from every room it joined"""
        connection = self._connections.pop(connection_id, None)
        if connection is None:
            return

        for room_name in connection.rooms:
            members = self._rooms.get(room_name)
            if members is None:
                continue
            members.pop(connection_id, None)
            if not members:
                del self._rooms[room_name]
                logger.info(f"Room '{room_name}' is empty and was removed")
        logger.info(f"Connection {connection_id} disconnected")

    def clear(self):
        """Forgets every connection and room"""
        self._connections.clear()
        self._rooms.clear()

    def members(self, room_name: str) -> int:
        """Number of members in a room"""
        return len(self._rooms.get(room_name, {}))

    @property
    def active_connections(self) -> int:
        return len(self._connections)

    @property
    def active_rooms(self) -> int:
        return len(self._rooms)

    def get_room_info(self) -> Dict[str, Any]:
        """Get information about all rooms"""
        return {
            "active_connections": self.active_connections,
            "active_rooms": self.active_rooms,
            "rooms": [
                {"room": name, "members": len(members)}
                for name, members in self._rooms.items()
            ],
        }


# Global instance
room_relay = RoomRelay()
