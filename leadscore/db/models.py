"""
leadscore/db/models.py — SQLAlchemy ORM models for the lead scoring system.

Tables:
  - Offer  → a marketing proposition leads are scored against
  - Lead   → a prospective contact, created in bulk from CSV uploads
  - Score  → one rule + AI score for a (lead, offer) pair
"""

import enum
import uuid

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, relationship


# ── Base ─────────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


# ── Enums ────────────────────────────────────────────────────────────────────

class Intent(str, enum.Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


# ── Models ───────────────────────────────────────────────────────────────────

def _new_offer_id() -> str:
    return str(uuid.uuid4())


class Offer(Base):
    __tablename__ = "offers"

    id = Column(String(36), primary_key=True, default=_new_offer_id)
    name = Column(String(255), nullable=False)
    value_props = Column(JSON, nullable=False)        # list[str], order preserved
    ideal_use_cases = Column(JSON, nullable=False)    # list[str], order preserved
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    scores = relationship("Score", back_populates="offer", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Offer id={self.id} name={self.name!r}>"


class Lead(Base):
    __tablename__ = "leads"
    __table_args__ = (
        # Ingestion dedup key: a re-uploaded row for the same person is skipped
        UniqueConstraint("name", "company", name="uq_leads_name_company"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    role = Column(String(255), nullable=False, default="")
    company = Column(String(255), nullable=False, default="")
    industry = Column(String(255), nullable=False, default="")
    location = Column(String(255), nullable=False, default="")
    linkedin_bio = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    scores = relationship("Score", back_populates="lead", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Lead id={self.id} name={self.name!r} company={self.company!r}>"


class Score(Base):
    __tablename__ = "scores"
    __table_args__ = (
        UniqueConstraint("lead_id", "offer_id", name="uq_scores_lead_offer"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    lead_id = Column(Integer, ForeignKey("leads.id", ondelete="CASCADE"), nullable=False)
    offer_id = Column(String(36), ForeignKey("offers.id", ondelete="CASCADE"), nullable=False)

    role_score = Column(Integer, nullable=False)
    industry_score = Column(Integer, nullable=False)
    data_completeness_score = Column(Integer, nullable=False)
    rule_score = Column(Integer, nullable=False)          # sum of the three above, 0 – 50
    ai_score = Column(Integer, nullable=False)            # 10 / 30 / 50
    intent = Column(Enum(Intent), nullable=False)
    reasoning = Column(Text, nullable=False, default="")

    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    lead = relationship("Lead", back_populates="scores")
    offer = relationship("Offer", back_populates="scores")

    @property
    def total_score(self) -> int:
        """Rule + AI score (0 – 100), computed at read time."""
        return self.rule_score + self.ai_score

    def __repr__(self) -> str:
        return (
            f"<Score lead_id={self.lead_id} offer_id={self.offer_id} "
            f"rule={self.rule_score} ai={self.ai_score} intent={self.intent}>"
        )
