"""
tests/conftest.py — Shared pytest configuration and fixtures.

Sets dummy environment variables BEFORE any leadscore module is imported,
so that pydantic-settings doesn't fail on missing required fields.
"""

import os
import pytest

# ── Set dummy env vars before any leadscore module is imported ───────────────
# This runs at collection time, before tests execute.
os.environ.setdefault("OPENROUTER_API_KEY", "test-key")
os.environ.setdefault("OPENROUTER_MODEL", "test-model")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from sqlalchemy.orm import sessionmaker  # noqa: E402

from leadscore.ai_engine.processor import INTENT_SCORES, IntentResult  # noqa: E402
from leadscore.db.models import Base, Intent, Lead, Offer  # noqa: E402
from leadscore.db.session import build_engine  # noqa: E402


# ── In-memory DB ──────────────────────────────────────────────────────────────

@pytest.fixture
def engine():
    """A fresh in-memory SQLite engine with all tables created."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db(engine):
    """Provide a session bound to the in-memory engine for each test."""
    Session = sessionmaker(bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


# ── Factories ────────────────────────────────────────────────────────────────

@pytest.fixture
def make_offer(db):
    def _make(
        name="AI Outreach Automation",
        value_props=("24/7 outreach", "6x more meetings"),
        ideal_use_cases=("B2B SaaS mid-market",),
    ) -> Offer:
        offer = Offer(name=name, value_props=list(value_props), ideal_use_cases=list(ideal_use_cases))
        db.add(offer)
        db.flush()
        return offer
    return _make


@pytest.fixture
def make_lead(db):
    def _make(
        name="Ava Patel",
        role="Head of Growth",
        company="FlowMetrics",
        industry="SaaS",
        location="India",
        linkedin_bio="B2B SaaS growth expert with 10+ years in marketing",
    ) -> Lead:
        lead = Lead(
            name=name, role=role, company=company, industry=industry,
            location=location, linkedin_bio=linkedin_bio,
        )
        db.add(lead)
        db.flush()
        return lead
    return _make


# ── Deterministic classifier ─────────────────────────────────────────────────

class StubClassifier:
    """
    IntentClassifier stand-in. Returns `intent` for every lead unless the
    lead's name is in `errors`, in which case that exception is raised.
    """

    def __init__(self, intent: Intent = Intent.HIGH, errors: dict | None = None):
        self.intent = intent
        self.errors = errors or {}
        self.calls: list[tuple[str, int]] = []

    def classify(self, offer, lead) -> IntentResult:
        self.calls.append((offer.id, lead.id))
        if lead.name in self.errors:
            raise self.errors[lead.name]
        return IntentResult(
            intent=self.intent,
            reasoning=f"{lead.name} looks like a {self.intent.value} intent buyer.",
            score=INTENT_SCORES[self.intent],
        )


@pytest.fixture
def stub_classifier():
    return StubClassifier()


@pytest.fixture
def stub_cls():
    """The StubClassifier class, for tests that need a custom intent or errors."""
    return StubClassifier
