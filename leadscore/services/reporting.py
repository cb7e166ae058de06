"""
leadscore/services/reporting.py — Read-side projection of scores for an offer.

Rows carry {name, role, company, intent, score, reasoning}, where score is
rule_score + ai_score computed at read time.
"""

import logging

import pandas as pd
from pydantic import BaseModel
from sqlalchemy.orm import Session

from leadscore.db import repository
from leadscore.services.offer_service import get_offer

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["name", "role", "company", "intent", "score", "reasoning"]


class ResultRow(BaseModel):
    name: str
    role: str
    company: str
    intent: str
    score: int
    reasoning: str


def get_offer_results(db: Session, offer_id: str) -> list[ResultRow]:
    """
    Return one row per scored lead for the offer.

    Raises:
        NotFoundError: If the offer does not exist.
    """
    get_offer(db, offer_id)
    scores = repository.get_scores_for_offer(db, offer_id)
    rows = [
        ResultRow(
            name=s.lead.name,
            role=s.lead.role,
            company=s.lead.company,
            intent=s.intent.value,
            score=s.total_score,
            reasoning=s.reasoning,
        )
        for s in scores
    ]
    logger.debug("Loaded %d result rows for offer %s.", len(rows), offer_id)
    return rows


def results_to_csv(rows: list[ResultRow]) -> str:
    """Render result rows as CSV text with a fixed column order."""
    df = pd.DataFrame([r.model_dump() for r in rows], columns=RESULT_COLUMNS)
    return df.to_csv(index=False)


def export_filename(offer_id: str) -> str:
    return f"offer_{offer_id}_results.csv"
