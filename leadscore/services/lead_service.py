"""
leadscore/services/lead_service.py — Business logic orchestrating
CSV ingestion and the rule + AI scoring pipeline.

This is the "glue" layer that coordinates:
  - Parsing and storing uploaded leads (skipping duplicates)
  - Running the rule scorer and the intent classifier on each unscored lead
  - Persisting one Score per (lead, offer) pair
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Optional

from sqlalchemy.orm import Session

from leadscore.ai_engine.processor import IntentClassifier, get_default_classifier
from leadscore.db import repository
from leadscore.errors import AIClassificationError, NotFoundError
from leadscore.ingestion.csv_reader import read_leads_csv
from leadscore.ingestion.normalizer import normalize_leads
from leadscore.services.offer_service import get_offer
from leadscore.services.scoring import rule_score

logger = logging.getLogger(__name__)


# ── Reports ───────────────────────────────────────────────────────────────────

@dataclass
class IngestionReport:
    received: int
    created: int
    skipped: int


@dataclass
class LeadFailure:
    lead_id: int
    error: str


@dataclass
class ScoringReport:
    created: int = 0
    skipped: int = 0
    failed: list[LeadFailure] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


# ── Ingestion ─────────────────────────────────────────────────────────────────

def import_leads_csv(db: Session, content: bytes) -> IngestionReport:
    """
    Parse an uploaded CSV and store its leads, skipping duplicates.

    Raises:
        ValidationError: If the file cannot be parsed.
    """
    rows = read_leads_csv(content)
    leads = normalize_leads(rows)
    created, skipped = repository.add_leads_skip_duplicates(db, leads)
    # rows dropped by normalization (no name) count as skipped too
    skipped += len(rows) - len(leads)
    return IngestionReport(received=len(rows), created=created, skipped=skipped)


# ── Scoring ───────────────────────────────────────────────────────────────────

def score_leads_for_offer(
    db: Session,
    offer_id: str,
    classifier: Optional[IntentClassifier] = None,
) -> ScoringReport:
    """
    Score every lead not yet scored against the offer.

    Leads are processed one at a time in ID order. The existence check runs
    before the AI call, so re-running for the same offer makes no AI calls
    for leads that already have a Score. Each new Score is committed on its
    own, so progress survives a later failure.

    Args:
        db:         Active SQLAlchemy session.
        offer_id:   Offer to score against.
        classifier: Intent classifier; defaults to the LLM-backed one.

    Returns:
        ScoringReport with created / skipped counts and per-lead failures.

    Raises:
        NotFoundError:        Unknown offer, or no leads in the system.
        AIProviderOverloaded: Aborts the remaining batch.
    """
    offer = get_offer(db, offer_id)
    leads = repository.list_leads(db)
    if not leads:
        raise NotFoundError("No leads found. Upload leads before scoring.")

    if classifier is None:
        classifier = get_default_classifier()
    report = ScoringReport()

    logger.info("Scoring %d leads against offer %r (%s)...", len(leads), offer.name, offer.id)

    for lead in leads:
        if repository.score_exists(db, lead.id, offer.id):
            logger.debug("Skipping already-scored lead %d (%s).", lead.id, lead.name)
            report.skipped += 1
            continue

        rules = rule_score(lead, offer)

        try:
            ai = classifier.classify(offer, lead)
        except AIClassificationError as exc:
            logger.error("Intent classification failed for lead %d (%s): %s", lead.id, lead.name, exc)
            report.failed.append(LeadFailure(lead_id=lead.id, error=str(exc)))
            continue

        score = repository.create_score_if_absent(
            db,
            lead_id=lead.id,
            offer_id=offer.id,
            role_score=rules.role_score,
            industry_score=rules.industry_score,
            data_completeness_score=rules.data_completeness_score,
            ai_score=ai.score,
            intent=ai.intent,
            reasoning=ai.reasoning,
        )
        if score is None:
            # another run stored this pair between our check and insert
            report.skipped += 1
            continue

        db.commit()
        report.created += 1
        logger.info(
            "Scored %s @ %s: rule=%d ai=%d (%s)",
            lead.name, lead.company, rules.total, ai.score, ai.intent.value,
        )

    logger.info(
        "Scoring done for offer %s: created=%d skipped=%d failed=%d",
        offer.id, report.created, report.skipped, len(report.failed),
    )
    return report
