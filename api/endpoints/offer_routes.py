"""
api/endpoints/offer_routes.py — Routes for offers.

POST /v1/offer             — Create an offer
GET  /v1/offer/{offer_id}  — Get an offer by ID
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from leadscore.db.session import get_db
from leadscore.errors import NotFoundError, ValidationError
from leadscore.services.offer_service import create_offer, get_offer
from api.schemas import OfferCreate, OfferCreated, OfferOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=OfferCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create an offer",
)
def post_offer(payload: OfferCreate, db: Session = Depends(get_db)):
    """Create an offer with a name, value propositions, and ideal use cases."""
    try:
        offer = create_offer(
            db,
            name=payload.name,
            value_props=payload.value_props,
            ideal_use_cases=payload.ideal_use_cases,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    db.commit()
    return OfferCreated(message="Offer created successfully.", offer=OfferOut.model_validate(offer))


@router.get("/{offer_id}", response_model=OfferOut, summary="Get offer by ID")
def read_offer(offer_id: str, db: Session = Depends(get_db)):
    """Fetch a single offer by its ID."""
    try:
        return get_offer(db, offer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
