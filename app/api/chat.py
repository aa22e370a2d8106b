"""Chat endpoint: relays the conversation to the model and shapes its reply."""

import logging
from typing import Any, Dict, Optional, Union
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.models.chat import ChatReply, ChatRequest, ChatResult, ErrorResponse, Plan
from app.core.llm_client import GeminiClient
from app.core.persona import build_session
from app.core.response_classifier import classify_response
from app.core.plan_normalizer import stamp_start_date, plan_shape_problems

# --- Setup ---
router = APIRouter(tags=["chat"])
llm_client = GeminiClient()
logger = logging.getLogger(__name__)
MODEL_FAILURE_MESSAGE = "Failed to get response from AI"


def resolve_message(chat_request: ChatRequest) -> Optional[str]:
    """Returns the in-flight message, falling back to the last history entry when it is blank."""
    if chat_request.message and chat_request.message.strip():
        return chat_request.message
    if chat_request.history:
        return chat_request.history[-1].text
    return None


# --- Main Chat Endpoint ---


CHAT_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    200: {
        "description": "A dated plan, or a chat reply when the model answered in prose",
        "model": Union[Plan, ChatReply],
    },
    400: {"description": "No message could be derived from the request"},
    500: {"description": "The model call failed", "model": ErrorResponse},
}


@router.post("/chat", responses=CHAT_RESPONSES)
@router.post("/api/chat", responses=CHAT_RESPONSES)
async def chat(chat_request: ChatRequest):
    """Sends the user's message to the model and returns either a plan or a chat reply."""
    message = resolve_message(chat_request)
    if not message or not message.strip():
        raise HTTPException(
            status_code=400,
            detail="A message is required, either as 'message' or as the last 'history' entry.",
        )

    session = build_session(chat_request.history, message)
    logger.info(
        f"Chat request with {len(session.history)} prior turns, message length {len(message)}"
    )

    try:
        bot_text = await llm_client.send_session(session)
    except Exception as e:
        logger.error(f"Model call failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=MODEL_FAILURE_MESSAGE, details=str(e)).model_dump(),
        )

    return shape_reply(bot_text)


def shape_reply(bot_text: str) -> Dict[str, Any]:
    """Turns raw model text into the response body."""
    result = classify_response(bot_text)
    if isinstance(result, ChatResult):
        return result.to_reply().model_dump()

    problems = plan_shape_problems(result.plan)
    if problems:
        # Still returned as a plan; the client decides what to do with it.
        logger.warning(f"Model returned a JSON object that is not a full plan: {problems}")
    else:
        logger.info(f"Plan generated with {len(result.plan['days'])} days")
    return stamp_start_date(result.plan)
