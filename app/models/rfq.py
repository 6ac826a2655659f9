import enum

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class RFQStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    QUOTED = "QUOTED"
    ACCEPTED = "ACCEPTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = {RFQStatus.COMPLETED, RFQStatus.CANCELLED}

# Forward path; CANCELLED is reachable from every non-terminal status.
RFQ_TRANSITIONS = {
    RFQStatus.ACTIVE: {RFQStatus.QUOTED},
    RFQStatus.QUOTED: {RFQStatus.ACCEPTED},
    RFQStatus.ACCEPTED: {RFQStatus.IN_PROGRESS},
    RFQStatus.IN_PROGRESS: {RFQStatus.COMPLETED},
    RFQStatus.COMPLETED: set(),
    RFQStatus.CANCELLED: set(),
}


def can_transition(current: RFQStatus, target: RFQStatus) -> bool:
    if current in TERMINAL_STATUSES:
        return False
    if target == RFQStatus.CANCELLED:
        return True
    return target in RFQ_TRANSITIONS[current]


class RFQ(Base):
    """Request for quote posted by a buyer."""
    __tablename__ = "rfqs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    category = Column(String, index=True)
    location = Column(String, nullable=True)

    min_budget = Column(Float, nullable=True)
    max_budget = Column(Float, nullable=True)
    urgency = Column(String, default="NORMAL")  # LOW, NORMAL, HIGH, URGENT

    status = Column(String, default=RFQStatus.ACTIVE.value, index=True)
    is_public = Column(Boolean, default=True, nullable=False)

    buyer_id = Column(Integer, ForeignKey("participants.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    quotes = relationship("Quote", back_populates="rfq")
