"""
api/main.py — FastAPI application entry point.

Run with:
    uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leadscore.config import settings
from leadscore.db.models import Base
from leadscore.db.session import engine
from api.endpoints.lead_routes import router as lead_router
from api.endpoints.offer_routes import router as offer_router
from api.endpoints.scoring_routes import router as scoring_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ─────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown logic."""
    # Create missing tables; verifies the DB is reachable at the same time
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready.")
    yield
    logger.info("Application shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Lead Scoring Service",
    description=(
        "Scores sales leads against a marketing offer by combining deterministic "
        "rules (role, industry, data completeness) with an AI buying-intent classification."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(offer_router, prefix="/v1/offer", tags=["Offers"])
app.include_router(lead_router, prefix="/v1/leads", tags=["Leads"])
app.include_router(scoring_router, prefix="/v1", tags=["Scoring"])


# ── Health check ─────────────────────────────────────────────────────────────

@app.get("/health", tags=["System"])
def health_check():
    """Returns service liveness status."""
    return {"status": "ok", "service": "lead-scoring-service"}


@app.get("/", tags=["System"])
def root():
    return {
        "message": "Lead Scoring Service is running.",
        "docs": "/docs",
    }
