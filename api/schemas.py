"""
api/schemas.py — Pydantic request/response models for all API endpoints.

Kept apart from the ORM models so the HTTP contract only exposes the
fields a client needs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from leadscore.services.reporting import ResultRow


# ── Offer ─────────────────────────────────────────────────────────────────────

class OfferCreate(BaseModel):
    name: str = Field(..., description="Offer name", examples=["AI Outreach Automation"])
    value_props: list[str] = Field(
        ...,
        description="Value propositions, in display order",
        examples=[["24/7 outreach", "6x more meetings"]],
    )
    ideal_use_cases: list[str] = Field(
        ...,
        description="Target industries / use cases matched against lead industry",
        examples=[["B2B SaaS mid-market"]],
    )


class OfferOut(BaseModel):
    id: str
    name: str
    value_props: list[str]
    ideal_use_cases: list[str]
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class OfferCreated(BaseModel):
    message: str
    offer: OfferOut


# ── Lead ─────────────────────────────────────────────────────────────────────

class LeadOut(BaseModel):
    id: int
    name: str
    role: str
    company: str
    industry: str
    location: str
    linkedin_bio: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class IngestionResult(BaseModel):
    received: int
    created: int
    skipped: int
    message: str


# ── Scoring ───────────────────────────────────────────────────────────────────

class LeadFailureOut(BaseModel):
    lead_id: int
    error: str


class ScoringResult(BaseModel):
    created: int
    skipped: int
    failed: list[LeadFailureOut] = Field(default_factory=list)
    message: str


class OfferResults(BaseModel):
    offer_id: str
    results: list[ResultRow]
