"""
leadscore/services/text.py — Text normalization for case-insensitive matching.
"""

from typing import Optional


def normalize(text: Optional[str]) -> str:
    """Lower-case and trim. None or empty in → empty string out."""
    if not text:
        return ""
    return text.strip().lower()
