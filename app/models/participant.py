from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Participant(Base):
    """
    A marketplace participant, either a supplier or a buyer.
    trust_score is derived from the verification fields and written back
    whenever it is recalculated.
    """
    __tablename__ = "participants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    company = Column(String, nullable=True)
    location = Column(String, nullable=True)
    role = Column(String, default="SUPPLIER", index=True)  # 'SUPPLIER' or 'BUYER'

    is_active = Column(Boolean, default=True, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)  # KYC approved

    gst_number = Column(String, nullable=True)
    udyam_number = Column(String, nullable=True)

    trust_score = Column(Integer, default=0, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    quotes = relationship("Quote", back_populates="supplier")


class Quote(Base):
    """
    A supplier's quote against an RFQ.
    Accepted quotes count as "won" for the supplier.
    """
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, index=True)
    rfq_id = Column(Integer, ForeignKey("rfqs.id"), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("participants.id"), nullable=False, index=True)

    price = Column(Float, nullable=True)
    status = Column(String, default="PENDING", index=True)  # PENDING, ACCEPTED, REJECTED, WITHDRAWN
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    supplier = relationship("Participant", back_populates="quotes")
    rfq = relationship("RFQ", back_populates="quotes")
