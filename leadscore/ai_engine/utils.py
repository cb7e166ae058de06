"""
leadscore/ai_engine/utils.py — Shared AI helper utilities.

Provides:
  - build_openrouter_llm()  : factory for the LangChain-compatible OpenRouter LLM
  - parse_json_object()     : the JSON object in a model reply, fenced or not
  - truncate_for_context()  : cap long free text before it goes into a prompt
"""

import json
import logging
import re
from typing import Any, Optional

from langchain_openai import ChatOpenAI

from leadscore.config import settings

logger = logging.getLogger(__name__)


def build_openrouter_llm(temperature: Optional[float] = None) -> ChatOpenAI:
    """
    Build a LangChain ChatOpenAI client pointed at OpenRouter.

    Args:
        temperature: Overrides settings.llm_temperature when given.
                     Keep it low for schema-constrained classification.

    Returns:
        A LangChain-compatible LLM instance. Retries are the client's own
        (settings.llm_max_retries); nothing above it retries.
    """
    return ChatOpenAI(
        model=settings.openrouter_model,
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        temperature=settings.llm_temperature if temperature is None else temperature,
        max_retries=settings.llm_max_retries,
        # Pass required OpenRouter headers
        default_headers={
            "X-Title": "Lead Scoring Service",
        },
    )


_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")
_OBJECT = re.compile(r"\{[\s\S]*\}")


def parse_json_object(text: Optional[str]) -> Optional[dict[str, Any]]:
    """
    Pull a single JSON object out of model output.

    Accepts bare JSON, JSON inside a ```json fence, or an object embedded in
    surrounding prose. Anything that is not a JSON object (arrays, scalars,
    broken JSON) yields None.
    """
    if not text:
        return None

    body = _FENCE.sub(r"\1", text.strip()).strip()
    try:
        value = json.loads(body)
    except json.JSONDecodeError:
        # prose around the object: try the outermost {...} span instead
        match = _OBJECT.search(body)
        value = None
        if match:
            try:
                value = json.loads(match.group())
            except json.JSONDecodeError:
                pass

    if isinstance(value, dict):
        return value

    logger.warning("No JSON object in LLM output: %s", text[:200])
    return None


def truncate_for_context(text: Optional[str], max_chars: int = 2000) -> str:
    """Cap free text (e.g. a LinkedIn bio) at max_chars, marking the cut with '...'."""
    text = text or ""
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text
