"""
leadscore/ingestion/csv_reader.py — Parses uploaded lead CSV files.

Expected header columns (matched case-insensitively, spaces treated as '_'):
    name, role, company, industry, location, linkedIn_bio

Columns missing from the file are filled with empty strings so every row
carries all six lead fields.
"""

import io
import logging
from typing import Any

import pandas as pd

from leadscore.errors import ValidationError
from leadscore.ingestion.normalizer import LEAD_FIELDS

logger = logging.getLogger(__name__)


def _canonical_column(column: str) -> str:
    """'linkedIn_bio' / 'LinkedIn Bio' → 'linkedin_bio'."""
    return "_".join(str(column).strip().lower().split())


def read_leads_csv(content: bytes) -> list[dict[str, Any]]:
    """
    Parse raw CSV bytes into a list of row dicts keyed by lead field name.

    Raises:
        ValidationError: If the content is empty or cannot be parsed as CSV.
    """
    try:
        df = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Could not parse CSV: {exc}") from exc

    df.columns = [_canonical_column(c) for c in df.columns]

    missing = [c for c in LEAD_FIELDS if c not in df.columns]
    if missing:
        logger.warning("CSV is missing columns %s; filling with empty strings.", missing)
    for column in missing:
        df[column] = ""

    rows = df[list(LEAD_FIELDS)].to_dict(orient="records")
    logger.info("Read %d rows from uploaded CSV.", len(rows))
    return rows
