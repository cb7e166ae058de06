"""
leadscore/services/offer_service.py — Offer creation and lookup.
"""

import logging

from sqlalchemy.orm import Session

from leadscore.db import repository
from leadscore.db.models import Offer
from leadscore.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _clean_list(values: list[str] | None) -> list[str]:
    """Trim entries and drop blanks, keeping order."""
    return [v.strip() for v in (values or []) if v and v.strip()]


def create_offer(
    db: Session,
    name: str,
    value_props: list[str],
    ideal_use_cases: list[str],
) -> Offer:
    """
    Validate and persist a new Offer.

    Raises:
        ValidationError: If the name is blank or either list has no non-blank entry.
    """
    clean_name = (name or "").strip()
    clean_props = _clean_list(value_props)
    clean_use_cases = _clean_list(ideal_use_cases)

    problems = []
    if not clean_name:
        problems.append("name must not be empty")
    if not clean_props:
        problems.append("value_props must contain at least one entry")
    if not clean_use_cases:
        problems.append("ideal_use_cases must contain at least one entry")
    if problems:
        raise ValidationError("; ".join(problems))

    return repository.create_offer(db, clean_name, clean_props, clean_use_cases)


def get_offer(db: Session, offer_id: str) -> Offer:
    """Fetch an Offer or raise NotFoundError."""
    offer = repository.get_offer(db, offer_id)
    if offer is None:
        raise NotFoundError(f"Offer {offer_id} not found.")
    return offer
