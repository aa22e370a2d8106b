"""Classifies raw model output as a structured plan or free-form chat."""

import json
import re
import logging
from app.models.chat import Classified, ChatResult, PlanResult

logger = logging.getLogger(__name__)

# Exactly the fence the model tends to add despite being told not to.
_LEADING_FENCE = re.compile(r"^```json\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


def _reject_constant(name: str):
    """Rejects NaN and Infinity, which are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def strip_code_fence(text: str) -> str:
    """
    Removes a leading "```json" marker and a trailing "```".

    Only these two patterns are handled. Text between them is left as is, and
    no attempt is made to pull JSON out of surrounding prose.
    """
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned


def classify_response(text: str) -> Classified:
    """
    Decides whether the model replied with a plan or with chat.

    A reply that parses as a JSON object is a plan. Anything else, including
    JSON arrays and scalars, is chat and keeps the original, uncleaned text.
    """
    cleaned = strip_code_fence(text or "")
    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return ChatResult(text=text or "")

    if not isinstance(parsed, dict):
        logger.info(
            f"Model reply parsed as JSON {type(parsed).__name__}, treating as chat"
        )
        return ChatResult(text=text)

    return PlanResult(plan=parsed)
