"""
leadscore/ai_engine/prompt_templates.py — LangChain prompt and response schema
for buying-intent classification.

  INTENT_CLASSIFICATION_PROMPT — offer JSON + lead JSON → {"intent", "reasoning"}
  INTENT_RESPONSE_FORMAT       — strict json_schema passed as response_format
"""

from langchain_core.prompts import ChatPromptTemplate


INTENT_CLASSIFICATION_PROMPT = ChatPromptTemplate.from_messages([
    (
        "system",
        (
            "You are a sales intelligence assistant. "
            "You read a product offer and a prospect profile and judge how likely "
            "the prospect is to buy. Be concise and realistic."
        ),
    ),
    (
        "human",
        """Given the offer and the lead info, classify the lead's buying intent.

OFFER:
{offer_json}

LEAD:
{lead_json}

INSTRUCTIONS:
- Classify buying intent as exactly one of: HIGH, MEDIUM, LOW
- Explain why in 1-2 sentences
- Return ONLY a valid JSON object with exactly these fields:
{{
  "intent": "HIGH" | "MEDIUM" | "LOW",
  "reasoning": "<1-2 sentence justification>"
}}
""",
    ),
])


INTENT_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "intent_classification",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "intent": {"type": "string", "enum": ["HIGH", "MEDIUM", "LOW"]},
                "reasoning": {"type": "string"},
            },
            "required": ["intent", "reasoning"],
            "additionalProperties": False,
        },
    },
}
