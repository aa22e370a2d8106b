"""Pydantic models for chat-related API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Dict, Any, Union


class ChatTurn(BaseModel):
    """A single turn of the client-held transcript."""

    sender: str  # "user" or "bot"
    text: str


class ModelTurn(BaseModel):
    """A turn in the shape the model collaborator expects."""

    role: Literal["user", "model"]
    content: str


class ChatRequest(BaseModel):
    """Request model for the chat endpoint.

    ``message`` is optional for older clients that only send ``history``; in
    that case the last history entry is the in-flight message.
    """

    message: Optional[str] = None
    history: List[ChatTurn] = Field(default_factory=list)


class PlanTask(BaseModel):
    """One task inside a plan day. Ids follow the ``d{day}_t{index}`` convention."""

    id: str
    title: str
    completed: bool = False


class PlanDay(BaseModel):
    day: int
    tasks: List[PlanTask] = Field(default_factory=list)


class Plan(BaseModel):
    """Structured multi-day self-help plan produced by the model."""

    planName: str
    startDate: str
    days: List[PlanDay]


class ChatReply(BaseModel):
    """Response model when the model answered in prose."""

    chatMessage: str


class ErrorResponse(BaseModel):
    """Body of a 500 response when the model call fails."""

    error: str
    details: Optional[str] = None


class PlanResult(BaseModel):
    """Classifier outcome: the reply parsed as a JSON object."""

    kind: Literal["plan"] = "plan"
    plan: Dict[str, Any]


class ChatResult(BaseModel):
    """Classifier outcome: the reply is free-form chat."""

    kind: Literal["chat"] = "chat"
    text: str

    def to_reply(self) -> ChatReply:
        return ChatReply(chatMessage=self.text)


Classified = Union[PlanResult, ChatResult]
