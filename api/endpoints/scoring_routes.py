"""
api/endpoints/scoring_routes.py — Routes for running scoring and reading results.

POST /v1/score/{offer_id}        — Score all unscored leads against an offer
GET  /v1/results/{offer_id}      — Scored leads for an offer (JSON)
GET  /v1/results/{offer_id}/csv  — Same results as a CSV download
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from leadscore.ai_engine.processor import IntentClassifier, get_default_classifier
from leadscore.db.session import get_db
from leadscore.errors import AIProviderOverloaded, NotFoundError
from leadscore.services.lead_service import score_leads_for_offer
from leadscore.services.reporting import export_filename, get_offer_results, results_to_csv
from api.schemas import OfferResults, ScoringResult

logger = logging.getLogger(__name__)
router = APIRouter()


def get_classifier() -> IntentClassifier:
    """Dependency hook so tests can swap in a deterministic classifier."""
    return get_default_classifier()


@router.post(
    "/score/{offer_id}",
    response_model=ScoringResult,
    status_code=status.HTTP_201_CREATED,
    summary="Score leads for an offer",
    responses={503: {"description": "AI model overloaded"}},
)
def run_scoring(
    offer_id: str,
    db: Session = Depends(get_db),
    classifier: IntentClassifier = Depends(get_classifier),
):
    """
    Compute rule and AI scores for every lead not yet scored against the offer.
    Safe to call repeatedly: already-scored leads are skipped without an AI call.
    """
    try:
        report = score_leads_for_offer(db, offer_id, classifier=classifier)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except AIProviderOverloaded as exc:
        logger.warning("Scoring for offer %s aborted: %s", offer_id, exc)
        raise HTTPException(
            status_code=503,
            detail={
                "message": "AI model overloaded. Please try again later.",
                "provider": "OpenRouter",
                "status": exc.status_code,
            },
        )
    except Exception:
        logger.exception("Scoring failed for offer %s", offer_id)
        raise HTTPException(status_code=500, detail="Something went wrong while scoring.")

    return ScoringResult(
        **report.to_dict(),
        message=(
            f"Scoring complete. {report.created} created, {report.skipped} skipped, "
            f"{len(report.failed)} failed."
        ),
    )


@router.get("/results/{offer_id}", response_model=OfferResults, summary="Get results for an offer")
def read_results(offer_id: str, db: Session = Depends(get_db)):
    """Return name, role, company, intent, total score and reasoning per scored lead."""
    try:
        rows = get_offer_results(db, offer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return OfferResults(offer_id=offer_id, results=rows)


@router.get(
    "/results/{offer_id}/csv",
    summary="Download results as CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
def download_results_csv(offer_id: str, db: Session = Depends(get_db)):
    """Return the offer's results as a downloadable CSV file."""
    try:
        rows = get_offer_results(db, offer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    return Response(
        content=results_to_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(offer_id)}"'},
    )
