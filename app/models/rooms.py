"""Pydantic models for the room WebSocket channel."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict


class SocketFrame(BaseModel):
    """Envelope for every frame on the room socket."""

    event: str
    data: Dict[str, Any] = Field(default_factory=dict)


class JoinRoomPayload(BaseModel):
    """Payload of a ``join_room`` event."""

    roomName: str
    alias: str = ""


class SendMessagePayload(BaseModel):
    """Payload of a ``send_message`` event.

    Only ``room`` is required; every other field is relayed verbatim.
    """

    model_config = ConfigDict(extra="allow")

    room: str
