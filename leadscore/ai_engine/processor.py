"""
leadscore/ai_engine/processor.py — Buying-intent classification via the LLM.

Public API:
  IntentClassifier                 → protocol the scoring service depends on
  LLMIntentClassifier              → LangChain/OpenRouter implementation
  classify_intent(offer, lead)     → IntentResult, using the default classifier
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Optional, Protocol

import openai
from langchain_core.runnables import Runnable

from leadscore.ai_engine.prompt_templates import (
    INTENT_CLASSIFICATION_PROMPT,
    INTENT_RESPONSE_FORMAT,
)
from leadscore.ai_engine.utils import build_openrouter_llm, parse_json_object, truncate_for_context
from leadscore.db.models import Intent, Lead, Offer
from leadscore.errors import AIProviderError, AIProviderOverloaded, AIResponseError

logger = logging.getLogger(__name__)

INTENT_SCORES = MappingProxyType({
    Intent.HIGH: 50,
    Intent.MEDIUM: 30,
    Intent.LOW: 10,
})

# Unknown labels fall back to the lowest band instead of failing the lead
FALLBACK_INTENT = Intent.LOW

# Provider statuses meaning "overloaded / rate limited / unavailable, try later"
OVERLOAD_STATUS_CODES = frozenset({429, 502, 503, 504, 529})


# ── Output dataclass ──────────────────────────────────────────────────────────

@dataclass
class IntentResult:
    intent: Intent
    reasoning: str
    score: int                      # 10 / 30 / 50
    raw_response: str = ""          # original LLM text (for debugging)


class IntentClassifier(Protocol):
    """Anything that can classify a lead's buying intent for an offer."""

    def classify(self, offer: Offer, lead: Lead) -> IntentResult:
        ...


# ── Helpers ──────────────────────────────────────────────────────────────────

def offer_context(offer: Offer) -> str:
    """Serialize the offer fields the model needs as a JSON string."""
    return json.dumps(
        {
            "name": offer.name,
            "value_props": list(offer.value_props or []),
            "ideal_use_cases": list(offer.ideal_use_cases or []),
        },
        ensure_ascii=False,
    )


def lead_context(lead: Lead) -> str:
    """Serialize the lead's profile as a JSON string (bio trimmed for context)."""
    return json.dumps(
        {
            "name": lead.name,
            "role": lead.role,
            "company": lead.company,
            "industry": lead.industry,
            "location": lead.location,
            "linkedin_bio": truncate_for_context(lead.linkedin_bio, max_chars=2000),
        },
        ensure_ascii=False,
    )


def intent_from_label(label: Any) -> tuple[Intent, int]:
    """Map an intent label to (Intent, score). Case-insensitive; unknown → LOW/10."""
    try:
        intent = Intent(str(label).strip().upper())
    except ValueError:
        logger.warning("Unrecognized intent label %r; defaulting to %s.", label, FALLBACK_INTENT.value)
        intent = FALLBACK_INTENT
    return intent, INTENT_SCORES[intent]


# ── Classifier ────────────────────────────────────────────────────────────────

class LLMIntentClassifier:
    """
    Classifies intent with one schema-constrained chat completion per call.

    The chain is built lazily so constructing the classifier never touches the
    network; tests pass a ready-made chain instead.
    """

    def __init__(self, chain: Optional[Runnable] = None):
        self._chain = chain

    @property
    def chain(self) -> Runnable:
        if self._chain is None:
            llm = build_openrouter_llm().bind(response_format=INTENT_RESPONSE_FORMAT)
            self._chain = INTENT_CLASSIFICATION_PROMPT | llm
        return self._chain

    def classify(self, offer: Offer, lead: Lead) -> IntentResult:
        """
        Ask the LLM for the lead's buying intent against the offer.

        Raises:
            AIProviderOverloaded: Provider reported overload / unavailability.
            AIProviderError:      Any other provider API failure.
            AIResponseError:      Payload missing or not a JSON object.
        """
        logger.info("Classifying intent: %s @ %s for offer %r", lead.name, lead.company, offer.name)

        try:
            response = self.chain.invoke({
                "offer_json": offer_context(offer),
                "lead_json": lead_context(lead),
            })
        except openai.APIStatusError as exc:
            if exc.status_code in OVERLOAD_STATUS_CODES:
                raise AIProviderOverloaded(
                    f"AI provider unavailable (HTTP {exc.status_code})",
                    status_code=exc.status_code,
                ) from exc
            raise AIProviderError(f"AI provider error (HTTP {exc.status_code}): {exc}") from exc
        except openai.APIError as exc:
            raise AIProviderError(f"AI provider error: {exc}") from exc

        raw_text = response.content if hasattr(response, "content") else str(response)
        if not isinstance(raw_text, str):
            raw_text = str(raw_text)

        parsed = parse_json_object(raw_text)
        if parsed is None:
            logger.error("Intent classification returned non-object for %s: %s", lead.name, raw_text[:200])
            raise AIResponseError(f"AI response for lead {lead.id} is missing or malformed.")

        intent, score = intent_from_label(parsed.get("intent"))
        result = IntentResult(
            intent=intent,
            reasoning=str(parsed.get("reasoning") or "").strip(),
            score=score,
            raw_response=raw_text,
        )

        logger.info("Intent result: %s (ai_score=%d) for %s", result.intent.value, result.score, lead.name)
        return result


@lru_cache(maxsize=1)
def get_default_classifier() -> LLMIntentClassifier:
    """Process-wide classifier, built on first use."""
    return LLMIntentClassifier()


def classify_intent(offer: Offer, lead: Lead) -> IntentResult:
    """Classify a lead's intent for an offer using the default LLM classifier."""
    return get_default_classifier().classify(offer, lead)
