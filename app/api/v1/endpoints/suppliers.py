import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.participant import Participant
from app.schemas.supplier import Pagination, SupplierDirectory, SupplierRow
from app.services.repository import location_filter, quote_count_columns

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=SupplierDirectory)
async def list_suppliers(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = None,
    location: Optional[str] = None,
    verified: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    """
    Supplier directory, highest trust score first.
    """
    filters = [Participant.role == "SUPPLIER", Participant.is_active.is_(True)]
    if search:
        term = search.strip()
        filters.append(
            or_(
                Participant.name.icontains(term, autoescape=True),
                Participant.company.icontains(term, autoescape=True),
            )
        )
    if location and location.strip():
        filters.append(location_filter(location.strip()))
    if verified:
        filters.append(Participant.is_verified.is_(True))

    total_quotes, _ = quote_count_columns()
    try:
        total = db.query(func.count(Participant.id)).filter(*filters).scalar() or 0
        rows = (
            db.query(Participant, total_quotes)
            .filter(*filters)
            .order_by(Participant.trust_score.desc(), Participant.id.asc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error listing suppliers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list suppliers")

    total_pages = math.ceil(total / limit)

    return SupplierDirectory(
        suppliers=[
            SupplierRow(
                id=supplier.id,
                name=supplier.name,
                company=supplier.company,
                location=supplier.location,
                trust_score=supplier.trust_score,
                is_verified=supplier.is_verified,
                gst_number=supplier.gst_number,
                udyam_number=supplier.udyam_number,
                total_quotes=quotes or 0,
                created_at=supplier.created_at,
            )
            for supplier, quotes in rows
        ],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )
