"""WebSocket endpoint for peer-to-peer room messaging."""

import json
import logging
from typing import Any, Dict
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from app.core.room_relay import room_relay
from app.models.rooms import JoinRoomPayload, SendMessagePayload, SocketFrame

router = APIRouter(tags=["rooms"])
logger = logging.getLogger(__name__)

JOIN_ROOM_EVENT = "join_room"
SEND_MESSAGE_EVENT = "send_message"
ERROR_EVENT = "error"
ROOM_JOINED_EVENT = "room_joined"


@router.websocket("/ws")
async def room_socket(websocket: WebSocket):
    """Accepts a connection and dispatches its events until it disconnects."""
    await websocket.accept()
    connection_id = room_relay.connect(websocket)

    try:
        while True:
            text = await websocket.receive_text()
            try:
                raw = json.loads(text)
            except ValueError:
                await send_error(websocket, "Frames must be JSON")
                continue
            await handle_frame(websocket, connection_id, raw)
    except WebSocketDisconnect:
        pass
    finally:
        room_relay.disconnect(connection_id)


async def handle_frame(websocket: WebSocket, connection_id: str, raw: Any):
    """Validates one inbound frame and routes it to the relay."""
    try:
        frame = SocketFrame.model_validate(raw)
        if frame.event == JOIN_ROOM_EVENT:
            payload = JoinRoomPayload.model_validate(frame.data)
            if room_relay.join(connection_id, payload.roomName, payload.alias):
                await websocket.send_json(
                    {
                        "event": ROOM_JOINED_EVENT,
                        "data": {
                            "roomName": payload.roomName,
                            "members": room_relay.members(payload.roomName),
                        },
                    }
                )
        elif frame.event == SEND_MESSAGE_EVENT:
            message = SendMessagePayload.model_validate(frame.data)
            await room_relay.relay(connection_id, message.room, frame.data)
        else:
            await send_error(websocket, f"Unknown event '{frame.event}'")
    except ValidationError as e:
        logger.warning(f"Malformed frame from {connection_id}: {e}")
        await send_error(websocket, "Malformed frame")


async def send_error(websocket: WebSocket, message: str):
    frame: Dict[str, Any] = {"event": ERROR_EVENT, "data": {"message": message}}
    await websocket.send_json(frame)
