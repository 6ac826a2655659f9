
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.database import Base, get_db
from app.models.participant import Participant, Quote
from app.models.rfq import RFQ

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

FILLER_SUPPLIERS = 12


def seed(session):
    participants = [
        # Verified, high-trust Mumbai supplier with a strong win record.
        # Stored trust score is stale (80); its fields are worth 90.
        Participant(
            name="Rajesh Kumar", email="rajesh@mumbaisteel.in", phone="9820012345",
            company="Mumbai Steel Traders", location="Andheri, Mumbai", role="SUPPLIER",
            is_verified=True, gst_number="27AAPFU0939F1ZV", trust_score=80,
        ),
        # Unverified supplier in a location containing "Mumbai", no quotes
        Participant(
            name="Navi Metals", phone="9833300000", company="Navi Metals",
            location="NAVI MUMBAI", role="SUPPLIER", trust_score=40,
        ),
        # Verified supplier outside Mumbai with a 50% win rate
        Participant(
            name="Pune Fabricators", email="sales@punefab.in", phone="9822200000",
            company="Pune Fabricators", location="Pune", role="SUPPLIER",
            is_verified=True, gst_number="27AAACP1234L1Z5",
            udyam_number="UDYAM-MH-26-0001234", trust_score=90,
        ),
        # Inactive supplier: never a candidate
        Participant(
            name="Dormant Mumbai Co", company="Dormant Mumbai Co", location="Mumbai",
            role="SUPPLIER", is_active=False, is_verified=True, trust_score=100,
        ),
        # Buyer in Mumbai: never a candidate
        Participant(
            name="Global Buyer", email="buy@globalbuyer.in", phone="9811112222",
            company="Global Buyer Pvt Ltd", location="Mumbai", role="BUYER",
            is_verified=True, trust_score=75,
        ),
    ]
    participants += [
        Participant(name=f"Chennai Supplier {i}", location="Chennai", role="SUPPLIER", trust_score=0)
        for i in range(FILLER_SUPPLIERS)
    ]
    session.add_all(participants)
    session.commit()

    buyer = participants[4]
    rfqs = [
        RFQ(title="MS Steel Sheets", category="Steel", location="Mumbai",
            min_budget=250000, max_budget=320000, urgency="HIGH", buyer_id=buyer.id),
        RFQ(title="Corrugated Boxes", category="Packaging", location="",
            max_budget=90000, buyer_id=buyer.id),
        RFQ(title="Cancelled Pipes", category="Steel", location="Mumbai",
            status="CANCELLED", buyer_id=buyer.id),
        RFQ(title="Past Order", category="Steel", location="Mumbai",
            status="COMPLETED", buyer_id=buyer.id),
        RFQ(title="Private Castings", category="Steel", location="Mumbai",
            is_public=False, buyer_id=buyer.id),
    ]
    session.add_all(rfqs)
    session.commit()

    history = rfqs[3]
    mumbai_steel, pune = participants[0], participants[2]
    quotes = [
        Quote(rfq_id=history.id, supplier_id=mumbai_steel.id, price=100.0,
              status="ACCEPTED" if i < 8 else "REJECTED")
        for i in range(10)
    ]
    quotes += [
        Quote(rfq_id=history.id, supplier_id=pune.id, price=120.0, status="ACCEPTED"),
        Quote(rfq_id=history.id, supplier_id=pune.id, price=130.0, status="PENDING"),
    ]
    session.add_all(quotes)
    session.commit()


@pytest.fixture(scope="module")
def db():
    # Create tables
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()

    # SEED DATA
    seed(session)

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="module")
def client(db):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="module")
def participant_id(db):
    def lookup(name):
        return db.query(Participant).filter_by(name=name).one().id
    return lookup


@pytest.fixture(scope="module")
def rfq_id(db):
    def lookup(title):
        return db.query(RFQ).filter_by(title=title).one().id
    return lookup
