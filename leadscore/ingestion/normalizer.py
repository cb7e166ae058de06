"""
leadscore/ingestion/normalizer.py — Cleans and standardizes raw lead rows.

Takes row dicts produced by csv_reader.py and returns clean, typed Pydantic
models ready for storage and scoring.
"""

import logging
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

LEAD_FIELDS = ("name", "role", "company", "industry", "location", "linkedin_bio")


# ── Output schema ────────────────────────────────────────────────────────────

class NormalizedLead(BaseModel):
    """Clean lead record; every text field is a trimmed string, possibly empty."""

    name: str
    role: str = ""
    company: str = ""
    industry: str = ""
    location: str = ""
    linkedin_bio: str = ""

    @property
    def dedup_key(self) -> tuple[str, str]:
        return (self.name, self.company)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _clean(value: Any) -> str:
    """Coerce a cell value to a trimmed string; None becomes ''."""
    if value is None:
        return ""
    return str(value).strip()


# ── Main function ────────────────────────────────────────────────────────────

def normalize_lead(raw: dict[str, Any]) -> NormalizedLead | None:
    """
    Normalize a single raw row into a NormalizedLead.

    Returns None if the row has no name, since a nameless lead cannot be
    reported on or deduplicated.
    """
    fields = {field: _clean(raw.get(field)) for field in LEAD_FIELDS}
    if not fields["name"]:
        logger.debug("Skipping lead row without a name: %s", raw)
        return None
    return NormalizedLead(**fields)


def normalize_leads(raw_rows: list[dict[str, Any]]) -> list[NormalizedLead]:
    """Normalize a batch of raw rows. Skips invalid entries."""
    results = []
    for raw in raw_rows:
        lead = normalize_lead(raw)
        if lead:
            results.append(lead)

    logger.info("Normalized %d / %d lead rows successfully.", len(results), len(raw_rows))
    return results
