"""Persona prompt and per-request session assembly."""

from dataclasses import dataclass, field
from typing import List, Sequence
from app.core.history import format_history
from app.models.chat import ChatTurn, ModelTurn

PERSONA_VERSION = "1"

SYSTEM_PROMPT = """
You are a kind, empathetic therapist-style chatbot for "Mind's Soul," an app for students in higher studies.
Your goal is to help a student who is struggling with issues like stress, pressure, or addiction (smoking, drinking, etc.).
You must follow these rules:
1. Your tone is always supportive, non-judgmental, and understanding.
2. Your primary goal is to guide the user to agree to a 10-day self-help plan.
3. You will ask a series of questions to understand their problem.
4. When you have enough information and the user agrees, you will generate this 10-day plan.
5. WHEN YOU GENERATE THE PLAN, you must ONLY output a valid JSON object. Do not say "Here is your plan" or anything else. Do not wrap it in markdown code fences. Just the JSON.
6. The JSON format MUST be:
{
  "planName": "Your 10-Day Plan for [The Problem]",
  "startDate": "YYYY-MM-DD",
  "days": [
    { "day": 1, "tasks": [ { "id": "d1_t1", "title": "Your first task", "completed": false } ] },
    { "day": 2, "tasks": [ { "id": "d2_t1", "title": "Your second task", "completed": false } ] }
  ]
}
   Continue the same shape for all 10 days. Task ids are "d{day}_t{index}", with index starting at 1 within each day.

If you are just chatting, do NOT output JSON. Just respond as a normal chatbot.
""".strip()

OPENING_LINE = (
    "I'm here to listen. This is a safe space. "
    "Please feel free to tell me what's on your mind."
)


@dataclass
class SessionContext:
    """Everything sent to the model for one request. Rebuilt on every request."""

    preamble: List[ModelTurn]
    history: List[ModelTurn]
    message: str
    persona_version: str = field(default=PERSONA_VERSION)

    def history_turns(self) -> List[ModelTurn]:
        """Turns that seed the model chat, in order, without the in-flight message."""
        return [*self.preamble, *self.history]

    def turns(self) -> List[ModelTurn]:
        """All turns in send order; the in-flight message is last."""
        return [*self.history_turns(), ModelTurn(role="user", content=self.message)]


def persona_preamble() -> List[ModelTurn]:
    return [
        ModelTurn(role="user", content=SYSTEM_PROMPT),
        ModelTurn(role="model", content=OPENING_LINE),
    ]


def build_session(history: Sequence[ChatTurn], message: str) -> SessionContext:
    """Builds the session: persona turn, opening line, prior history, then the message."""
    return SessionContext(
        preamble=persona_preamble(),
        history=format_history(history),
        message=message,
    )
