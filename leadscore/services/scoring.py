"""
leadscore/services/scoring.py — Deterministic rule-based lead scoring.

Three independent checks, each a pure function of its inputs:
  role_score               → 20 decision-maker / 10 influencer / 0
  industry_score           → 20 direct match / 10 adjacent (synonym) / 0
  data_completeness_score  → 10 if all six lead fields are filled, else 0

rule_score() adds them up (0 – 50).
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Protocol

from leadscore.services.text import normalize
from leadscore.services.vocabulary import (
    DECISION_MAKER_TERMS,
    INDUSTRY_SYNONYMS,
    INFLUENCER_TERMS,
)

logger = logging.getLogger(__name__)

DECISION_MAKER_POINTS = 20
INFLUENCER_POINTS = 10
DIRECT_INDUSTRY_POINTS = 20
ADJACENT_INDUSTRY_POINTS = 10
COMPLETENESS_POINTS = 10


class LeadLike(Protocol):
    name: str
    role: str
    company: str
    industry: str
    location: str
    linkedin_bio: str


class OfferLike(Protocol):
    ideal_use_cases: list[str]


@dataclass(frozen=True)
class RuleBreakdown:
    role_score: int
    industry_score: int
    data_completeness_score: int

    @property
    def total(self) -> int:
        return self.role_score + self.industry_score + self.data_completeness_score


def _contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)


def role_score(role: str) -> int:
    """Score a job title by seniority; decision-maker terms win over influencer terms."""
    normalized = normalize(role)
    if _contains_any(normalized, DECISION_MAKER_TERMS):
        return DECISION_MAKER_POINTS
    if _contains_any(normalized, INFLUENCER_TERMS):
        return INFLUENCER_POINTS
    return 0


def industry_score(lead_industry: str, offer_target_industries: Iterable[str]) -> int:
    """
    Score how well a lead's industry fits the offer's targets.

    A direct match is either a target contained in the lead industry, or the
    lead industry appearing as whole words inside a target ("saas" in
    "b2b saas mid-market", but not "it" in "digital"). Every offer entry is
    tried before the synonym table is consulted, so a direct match always
    takes priority.
    """
    normalized = normalize(lead_industry)
    if not normalized:
        return 0

    targets = [t for t in (normalize(t) for t in offer_target_industries) if t]
    as_words = re.compile(rf"\b{re.escape(normalized)}\b")
    if any(t in normalized or as_words.search(t) for t in targets):
        return DIRECT_INDUSTRY_POINTS

    for key, synonyms in INDUSTRY_SYNONYMS.items():
        if key in normalized or _contains_any(normalized, synonyms):
            return ADJACENT_INDUSTRY_POINTS

    return 0


def data_completeness_score(lead: LeadLike) -> int:
    """10 if all six text fields are non-blank after trimming. No partial credit."""
    fields = (lead.name, lead.role, lead.company, lead.industry, lead.location, lead.linkedin_bio)
    if all(field and field.strip() for field in fields):
        return COMPLETENESS_POINTS
    return 0


def rule_score(lead: LeadLike, offer: OfferLike) -> RuleBreakdown:
    """Run all three rule checks for a lead against an offer."""
    breakdown = RuleBreakdown(
        role_score=role_score(lead.role),
        industry_score=industry_score(lead.industry, offer.ideal_use_cases or []),
        data_completeness_score=data_completeness_score(lead),
    )
    logger.debug(
        "Rule score for %r: role=%d industry=%d completeness=%d total=%d",
        lead.name, breakdown.role_score, breakdown.industry_score,
        breakdown.data_completeness_score, breakdown.total,
    )
    return breakdown
