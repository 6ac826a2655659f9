import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.rfq import RFQ, RFQStatus, can_transition
from app.schemas.rfq import RFQOut, RFQStatusUpdate
from app.services.workflow_webhook import notify_rfq_status_changed

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_rfq_or_404(db: Session, rfq_id: int) -> RFQ:
    rfq = db.query(RFQ).filter(RFQ.id == rfq_id).first()
    if not rfq:
        raise HTTPException(status_code=404, detail=f"RFQ {rfq_id} not found")
    return rfq


@router.get("/{rfq_id}", response_model=RFQOut)
async def get_rfq(rfq_id: int, db: Session = Depends(get_db)):
    return _get_rfq_or_404(db, rfq_id)


@router.patch("/{rfq_id}/status", response_model=RFQOut)
async def update_rfq_status(
    rfq_id: int,
    update: RFQStatusUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """
    Moves an RFQ along its lifecycle:
    ACTIVE -> QUOTED -> ACCEPTED -> IN_PROGRESS -> COMPLETED,
    or CANCELLED from any non-terminal status.
    """
    rfq = _get_rfq_or_404(db, rfq_id)
    previous = RFQStatus(rfq.status)

    if not can_transition(previous, update.status):
        raise HTTPException(
            status_code=400,
            detail=f"Cannot move RFQ from {previous.value} to {update.status.value}",
        )

    try:
        rfq.status = update.status.value
        db.commit()
        db.refresh(rfq)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating RFQ {rfq_id} status: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update RFQ status")

    logger.info(f"RFQ {rfq_id} status {previous.value} -> {rfq.status}")
    background_tasks.add_task(notify_rfq_status_changed, rfq.id, previous.value, rfq.status)
    return rfq
