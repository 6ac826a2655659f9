import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import engine, Base, SessionLocal
from app.models.participant import Participant, Quote
from app.models.rfq import RFQ
from app.services.trust_score import calculate_trust_score


def refresh_trust_scores(db):
    for participant in db.query(Participant).all():
        accepted = sum(1 for q in participant.quotes if q.status == "ACCEPTED")
        participant.trust_score = calculate_trust_score(
            email=participant.email,
            phone=participant.phone,
            is_verified=participant.is_verified,
            gst_number=participant.gst_number,
            udyam_number=participant.udyam_number,
            company=participant.company,
            accepted_quotes_count=accepted,
        )
    db.commit()


def init_db():
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    # 1. Seed Participants
    if not db.query(Participant).first():
        print("Seeding participants...")
        participants = [
            Participant(
                name="Rajesh Kumar",
                email="rajesh@mumbaisteel.in",
                phone="9820012345",
                company="Mumbai Steel Traders",
                location="Andheri, Mumbai",
                role="SUPPLIER",
                is_verified=True,
                gst_number="27AAPFU0939F1ZV",
                udyam_number="UDYAM-MH-03-0123456",
            ),
            Participant(
                name="Priya Shah",
                phone="9898012345",
                company="Shah Packaging",
                location="Ahmedabad",
                role="SUPPLIER",
                gst_number="24AAACS1234K1Z2",
            ),
            Participant(
                name="Anil Mehta",
                email="anil@punefab.in",
                location="Pune",
                role="SUPPLIER",
            ),
            Participant(
                name="Global Buyer Pvt Ltd",
                email="procurement@globalbuyer.in",
                phone="9811112222",
                company="Global Buyer Pvt Ltd",
                location="Delhi",
                role="BUYER",
                is_verified=True,
            ),
        ]
        db.add_all(participants)
        db.commit()  # Commit here so we can get IDs for the RFQs below

    # 2. Seed RFQs and Quotes
    if not db.query(RFQ).first():
        print("Seeding RFQs and quotes...")

        buyer = db.query(Participant).filter_by(role="BUYER").first()
        steel = db.query(Participant).filter_by(company="Mumbai Steel Traders").first()
        packaging = db.query(Participant).filter_by(company="Shah Packaging").first()

        rfqs = [
            RFQ(
                title="MS Steel Sheets 2mm - 5 tonnes",
                category="Steel",
                location="Mumbai",
                min_budget=250000,
                max_budget=320000,
                urgency="HIGH",
                buyer_id=buyer.id,
            ),
            RFQ(
                title="Corrugated boxes 10k units",
                category="Packaging",
                location="",
                max_budget=90000,
                buyer_id=buyer.id,
            ),
        ]
        db.add_all(rfqs)
        db.commit()

        db.add_all([
            Quote(rfq_id=rfqs[0].id, supplier_id=steel.id, price=300000, status="ACCEPTED"),
            Quote(rfq_id=rfqs[1].id, supplier_id=steel.id, price=85000, status="REJECTED"),
            Quote(rfq_id=rfqs[1].id, supplier_id=packaging.id, price=80000, status="PENDING"),
        ])
        db.commit()

    refresh_trust_scores(db)

    print("Success! Database initialized.")
    db.close()

if __name__ == "__main__":
    init_db()
