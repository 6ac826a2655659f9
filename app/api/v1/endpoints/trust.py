import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.models.participant import Participant, Quote
from app.schemas.trust import (
    KycStats,
    TrustInput,
    TrustRecalculation,
    TrustScoreResponse,
    TrustStats,
)
from app.services.trust_score import (
    GST_EXAMPLE,
    GST_PATTERN,
    UDYAM_EXAMPLE,
    UDYAM_PATTERN,
    calculate_trust_score_with_breakdown,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/score", response_model=TrustScoreResponse)
async def preview_trust_score(data: TrustInput):
    """
    Computes a trust score for the given verification fields without saving it.
    """
    score, signals = calculate_trust_score_with_breakdown(**data.model_dump())
    return TrustScoreResponse(trust_score=score, signals=signals)


@router.post("/{participant_id}/recalculate", response_model=TrustRecalculation)
async def recalculate_trust_score(participant_id: int, db: Session = Depends(get_db)):
    """
    Re-derives a participant's trust score from its current fields and stores it.
    """
    try:
        participant = db.query(Participant).filter(Participant.id == participant_id).first()
        if not participant:
            raise HTTPException(status_code=404, detail=f"Participant {participant_id} not found")

        accepted = (
            db.query(func.count(Quote.id))
            .filter(Quote.supplier_id == participant.id, Quote.status == "ACCEPTED")
            .scalar()
        )
        score, signals = calculate_trust_score_with_breakdown(
            email=participant.email,
            phone=participant.phone,
            is_verified=participant.is_verified,
            gst_number=participant.gst_number,
            udyam_number=participant.udyam_number,
            company=participant.company,
            accepted_quotes_count=accepted or 0,
        )

        previous = participant.trust_score or 0
        participant.trust_score = score
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error recalculating trust score for {participant_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to recalculate trust score")

    if previous != score:
        logger.info(f"Trust score for participant {participant_id}: {previous} -> {score}")

    return TrustRecalculation(
        participant_id=participant_id,
        previous_score=previous,
        trust_score=score,
        signals=signals,
    )


@router.get("/stats", response_model=TrustStats)
async def get_trust_stats(db: Session = Depends(get_db)):
    """
    Trust score distribution and KYC completion across all participants.
    """
    def bucket(condition):
        return func.sum(case((condition, 1), else_=0))

    def provided(column):
        return column.isnot(None) & (column != "")

    try:
        stats = db.query(
            bucket(Participant.trust_score <= 30).label("low"),
            bucket((Participant.trust_score > 30) & (Participant.trust_score <= 60)).label("mid"),
            bucket((Participant.trust_score > 60) & (Participant.trust_score <= 80)).label("good"),
            bucket(Participant.trust_score > 80).label("high"),
            bucket(
                (Participant.role == "SUPPLIER")
                & (Participant.trust_score >= settings.HIGH_TRUST_THRESHOLD)
            ).label("high_trust_suppliers"),
            bucket(provided(Participant.gst_number)).label("gst"),
            bucket(provided(Participant.udyam_number)).label("udyam"),
            bucket(provided(Participant.gst_number) & provided(Participant.udyam_number)).label("both"),
            bucket(Participant.is_verified.is_(True)).label("verified"),
        ).first()
    except SQLAlchemyError as e:
        logger.error(f"Error loading trust stats: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load trust stats")

    return TrustStats(
        trust_distribution={
            "0-30": stats.low or 0,
            "31-60": stats.mid or 0,
            "61-80": stats.good or 0,
            "81-100": stats.high or 0,
        },
        high_trust_suppliers=stats.high_trust_suppliers or 0,
        kyc=KycStats(
            gst_provided=stats.gst or 0,
            udyam_provided=stats.udyam or 0,
            both_provided=stats.both or 0,
            verified=stats.verified or 0,
        ),
        validators={
            "gstExample": GST_EXAMPLE,
            "udyamExample": UDYAM_EXAMPLE,
            "gstPattern": GST_PATTERN.pattern,
            "udyamPattern": UDYAM_PATTERN.pattern,
        },
    )
