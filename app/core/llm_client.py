"""Client for interacting with the Google Gemini LLM."""

import google.generativeai as genai
from app.config import settings
from app.core.persona import SessionContext
from app.models.chat import ModelTurn
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class LLMConfigurationError(RuntimeError):
    """Raised when the model is called without a configured API key."""


def to_gemini_content(turn: ModelTurn) -> Dict[str, Any]:
    """Converts a model turn into Gemini's content dict."""
    return {"role": turn.role, "parts": [turn.content]}


class GeminiClient:
    """A client to handle interactions with the Google Gemini API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        max_output_tokens: Optional[int] = None,
    ):
        """Configures the API key when one is available; a missing key fails on first use."""
        self.api_key = api_key if api_key is not None else settings.google_api_key
        self.model_name = model_name or settings.gemini_model
        self.max_output_tokens = max_output_tokens or settings.max_output_tokens
        self._model: Optional[genai.GenerativeModel] = None

        if self.api_key:
            genai.configure(api_key=self.api_key)
        else:
            logger.error("GOOGLE_API_KEY is not set; chat requests will fail")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def model(self) -> genai.GenerativeModel:
        """Lazily builds the generative model."""
        if not self.is_configured:
            raise LLMConfigurationError("GOOGLE_API_KEY is not set.")
        if self._model is None:
            self._model = genai.GenerativeModel(
                self.model_name,
                generation_config=genai.GenerationConfig(
                    max_output_tokens=self.max_output_tokens
                ),
            )
        return self._model

    async def send_session(self, session: SessionContext) -> str:
        """Starts a chat seeded with the session history and sends the in-flight message."""
        *seed, final = session.turns()
        history: List[Dict[str, Any]] = [to_gemini_content(turn) for turn in seed]
        chat = self.model.start_chat(history=history)
        logger.info(
            f"Sending message to {self.model_name} with {len(history)} history turns "
            f"(persona v{session.persona_version})"
        )
        response = await chat.send_message_async(final.content)
        return response.text
