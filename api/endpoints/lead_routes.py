"""
api/endpoints/lead_routes.py — Routes for leads.

POST /v1/leads/upload  — Upload a CSV of leads (duplicates skipped)
GET  /v1/leads         — List stored leads
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from leadscore.db.repository import list_leads
from leadscore.db.session import get_db
from leadscore.errors import ValidationError
from leadscore.services.lead_service import import_leads_csv
from api.schemas import IngestionResult, LeadOut

logger = logging.getLogger(__name__)
router = APIRouter()

ALLOWED_EXTENSIONS = (".csv", ".txt")


@router.post(
    "/upload",
    response_model=IngestionResult,
    status_code=status.HTTP_201_CREATED,
    summary="Upload leads CSV",
)
def upload_leads(file: UploadFile = File(...), db: Session = Depends(get_db)):
    """
    Upload a CSV with columns name, role, company, industry, location, linkedIn_bio.
    Rows matching an existing lead (same name and company) are skipped.
    """
    if not file.filename or not file.filename.lower().endswith(ALLOWED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only CSV files supported.")

    content = file.file.read()
    try:
        report = import_leads_csv(db, content)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    db.commit()

    logger.info("CSV %s uploaded: %s", file.filename, report)
    return IngestionResult(
        received=report.received,
        created=report.created,
        skipped=report.skipped,
        message=f"CSV uploaded successfully. {report.created} new leads stored.",
    )


@router.get("", response_model=list[LeadOut], summary="List leads")
def get_leads(
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """Return stored leads in ID order."""
    return list_leads(db, limit=limit)
