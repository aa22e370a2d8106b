"""Simple tests for Pydantic models."""

import pytest
from pydantic import ValidationError
from app.models.chat import ChatRequest, ChatResult, ChatTurn, Plan, PlanResult
from app.models.rooms import JoinRoomPayload, SendMessagePayload, SocketFrame


def test_chat_request_history_only():
    """Test a request that only carries history."""
    request = ChatRequest(history=[{"sender": "user", "text": "hi"}])
    assert request.message is None
    assert request.history == [ChatTurn(sender="user", text="hi")]


def test_chat_request_defaults_to_empty_history():
    """Test that history is optional."""
    request = ChatRequest(message="hello")
    assert request.history == []


def test_chat_turn_requires_text():
    """Test that a turn without text is rejected."""
    with pytest.raises(ValidationError):
        ChatTurn(sender="user")


def test_plan_creation():
    """Test creating a typed plan."""
    plan = Plan(
        planName="Your 10-Day Plan for Stress",
        startDate="2024-01-01",
        days=[{"day": 1, "tasks": [{"id": "d1_t1", "title": "Breathe"}]}],
    )
    assert plan.days[0].tasks[0].id == "d1_t1"
    assert plan.days[0].tasks[0].completed is False


def test_classified_kinds():
    """Test the tag carried by each classifier result."""
    assert PlanResult(plan={}).kind == "plan"
    chat = ChatResult(text="hello")
    assert chat.kind == "chat"
    assert chat.to_reply().chatMessage == "hello"


def test_send_message_keeps_extra_fields():
    """Test that message payloads keep unknown fields."""
    payload = SendMessagePayload.model_validate({"room": "r1", "text": "hi", "alias": "ana"})
    assert payload.room == "r1"
    assert payload.model_dump() == {"room": "r1", "text": "hi", "alias": "ana"}


@pytest.mark.parametrize("data", [{}, {"alias": "ana"}, {"roomName": 5}])
def test_join_room_payload_rejects_bad_data(data):
    """Test join payloads without a string room name."""
    with pytest.raises(ValidationError):
        JoinRoomPayload.model_validate(data)


def test_socket_frame_data_defaults():
    """Test a frame without data."""
    frame = SocketFrame.model_validate({"event": "join_room"})
    assert frame.data == {}
