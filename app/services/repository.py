"""
Read-only data access for supplier matching.

The matcher only depends on the MatchRepository protocol, so it can be driven
by the SQLAlchemy implementation below or by an in-memory fake in tests.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DataAccessFailure
from app.models.participant import Participant, Quote
from app.models.rfq import RFQ, RFQStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RFQSummary:
    id: int
    title: str
    category: Optional[str] = None
    location: Optional[str] = None
    min_budget: Optional[float] = None
    max_budget: Optional[float] = None
    urgency: Optional[str] = None
    status: str = RFQStatus.ACTIVE.value
    is_public: bool = True

    @property
    def is_open_for_matching(self) -> bool:
        return self.status == RFQStatus.ACTIVE.value and bool(self.is_public)


@dataclass(frozen=True)
class SupplierCandidate:
    id: int
    name: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    is_verified: bool = False
    trust_score: int = 0
    total_quotes: int = 0
    won_quotes: int = 0


class MatchRepository(Protocol):
    def get_rfq(self, rfq_id: int) -> Optional[RFQSummary]:
        ...

    def find_active_suppliers(
        self, location: Optional[str], limit: int
    ) -> List[SupplierCandidate]:
        """
        Active suppliers ordered by trust score (highest first).
        location=None means no location filter.
        """
        ...


def quote_count_columns():
    """Correlated (total, won) quote counts for each Participant row."""
    total = (
        select(func.count(Quote.id))
        .where(Quote.supplier_id == Participant.id)
        .correlate(Participant)
        .scalar_subquery()
    )
    won = (
        select(func.count(Quote.id))
        .where(Quote.supplier_id == Participant.id, Quote.status == "ACCEPTED")
        .correlate(Participant)
        .scalar_subquery()
    )
    return total.label("total_quotes"), won.label("won_quotes")


def location_filter(location: str):
    """Case-insensitive substring match on Participant.location."""
    return Participant.location.icontains(location, autoescape=True)


class SqlMatchRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_rfq(self, rfq_id: int) -> Optional[RFQSummary]:
        try:
            rfq = self.db.query(RFQ).filter(RFQ.id == rfq_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error loading RFQ {rfq_id}: {e}", exc_info=True)
            raise DataAccessFailure(f"Failed to load RFQ {rfq_id}") from e

        if rfq is None:
            return None

        return RFQSummary(
            id=rfq.id,
            title=rfq.title,
            category=rfq.category,
            location=rfq.location,
            min_budget=rfq.min_budget,
            max_budget=rfq.max_budget,
            urgency=rfq.urgency,
            status=rfq.status,
            is_public=rfq.is_public,
        )

    def find_active_suppliers(
        self, location: Optional[str], limit: int
    ) -> List[SupplierCandidate]:
        total_quotes, won_quotes = quote_count_columns()
        query = self.db.query(Participant, total_quotes, won_quotes).filter(
            Participant.role == "SUPPLIER",
            Participant.is_active.is_(True),
        )
        if location:
            query = query.filter(location_filter(location))

        try:
            rows = (
                query.order_by(Participant.trust_score.desc(), Participant.id.asc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error loading supplier pool: {e}", exc_info=True)
            raise DataAccessFailure("Failed to load supplier pool") from e

        return [
            SupplierCandidate(
                id=supplier.id,
                name=supplier.name,
                company=supplier.company,
                phone=supplier.phone,
                location=supplier.location,
                is_verified=bool(supplier.is_verified),
                trust_score=supplier.trust_score or 0,
                total_quotes=total or 0,
                won_quotes=won or 0,
            )
            for supplier, total, won in rows
        ]
