"""
leadscore/db/repository.py — All database read/write operations.

Services call these functions instead of building ORM queries themselves,
so the score uniqueness rule and lead dedup live in one place.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from leadscore.db.models import Intent, Lead, Offer, Score
from leadscore.ingestion.normalizer import NormalizedLead

logger = logging.getLogger(__name__)


# ── Offer ─────────────────────────────────────────────────────────────────────

def create_offer(
    db: Session,
    name: str,
    value_props: list[str],
    ideal_use_cases: list[str],
) -> Offer:
    """Persist a new Offer. Input is assumed to be validated already."""
    offer = Offer(name=name, value_props=value_props, ideal_use_cases=ideal_use_cases)
    db.add(offer)
    db.flush()  # get the ID without committing
    logger.info("Offer created: %s (%s)", offer.name, offer.id)
    return offer


def get_offer(db: Session, offer_id: str) -> Optional[Offer]:
    """Return the Offer with this ID, or None."""
    return db.get(Offer, offer_id)


# ── Lead ─────────────────────────────────────────────────────────────────────

def list_leads(db: Session, limit: Optional[int] = None) -> list[Lead]:
    """Return leads in primary-key order (the scoring enumeration order)."""
    query = db.query(Lead).order_by(Lead.id.asc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def count_leads(db: Session) -> int:
    return db.query(Lead).count()


def existing_lead_keys(db: Session) -> set[tuple[str, str]]:
    """Dedup keys (name, company) of every stored lead."""
    return {(name, company) for name, company in db.query(Lead.name, Lead.company).all()}


def add_leads_skip_duplicates(db: Session, leads: list[NormalizedLead]) -> tuple[int, int]:
    """
    Insert leads, skipping rows whose dedup key already exists in the DB
    or appeared earlier in the same batch.

    Each row goes in under its own SAVEPOINT, so a row stored by a concurrent
    upload after the key snapshot was taken is skipped rather than failing
    the whole batch.

    Returns:
        (created, skipped)
    """
    seen = existing_lead_keys(db)
    created = skipped = 0

    for item in leads:
        if item.dedup_key in seen:
            skipped += 1
            continue
        seen.add(item.dedup_key)
        try:
            with db.begin_nested():
                db.add(Lead(**item.model_dump()))
                db.flush()
        except IntegrityError:
            logger.info("Lead %s @ %s stored concurrently; skipped.", item.name, item.company)
            skipped += 1
            continue
        created += 1

    logger.info("Leads stored: %d created, %d skipped as duplicates.", created, skipped)
    return created, skipped


# ── Score ─────────────────────────────────────────────────────────────────────

def score_exists(db: Session, lead_id: int, offer_id: str) -> bool:
    """Check if a Score for this (lead, offer) pair already exists."""
    return (
        db.query(Score.id)
        .filter(Score.lead_id == lead_id, Score.offer_id == offer_id)
        .first()
        is not None
    )


def create_score_if_absent(
    db: Session,
    lead_id: int,
    offer_id: str,
    role_score: int,
    industry_score: int,
    data_completeness_score: int,
    ai_score: int,
    intent: Intent,
    reasoning: str,
) -> Optional[Score]:
    """
    Insert a Score unless one already exists for (lead_id, offer_id).

    The insert runs inside a SAVEPOINT; the unique constraint on the pair is
    the arbiter, so a concurrent writer that got there first only rolls back
    this savepoint and the caller receives None.
    """
    score = Score(
        lead_id=lead_id,
        offer_id=offer_id,
        role_score=role_score,
        industry_score=industry_score,
        data_completeness_score=data_completeness_score,
        rule_score=role_score + industry_score + data_completeness_score,
        ai_score=ai_score,
        intent=intent,
        reasoning=reasoning,
    )
    try:
        with db.begin_nested():
            db.add(score)
            db.flush()
    except IntegrityError:
        logger.info("Score for lead %d / offer %s already exists; not inserted.", lead_id, offer_id)
        return None

    logger.debug("Score created: lead %d / offer %s (rule=%d ai=%d)",
                 lead_id, offer_id, score.rule_score, ai_score)
    return score


def get_scores_for_offer(db: Session, offer_id: str) -> list[Score]:
    """Return all Scores for an offer with their Lead eagerly joined."""
    return (
        db.query(Score)
        .options(joinedload(Score.lead))
        .filter(Score.offer_id == offer_id)
        .order_by(Score.id.asc())
        .all()
    )
