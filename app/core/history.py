"""Converts the client transcript into model-ready turns."""

from typing import List, Sequence
from app.models.chat import ChatTurn, ModelTurn


def to_model_turn(turn: ChatTurn) -> ModelTurn:
    """Maps a client turn to a model turn. Anything not sent by the user is the model."""
    role = "user" if turn.sender == "user" else "model"
    return ModelTurn(role=role, content=turn.text)


def format_history(history: Sequence[ChatTurn]) -> List[ModelTurn]:
    """
    Maps the transcript to model turns and drops the last one.

    The last turn is the in-flight message, which is sent on its own and must
    not appear twice. A new list is built; the caller's sequence is untouched.
    """
    formatted = [to_model_turn(turn) for turn in history]
    if formatted:
        formatted.pop()
    return formatted
