from app.models.participant import Participant


def test_trust_preview(client):
    """
    Scenario: Preview a score for a payload without saving anything.
    Expected: 20 (email) + 15 (GST) + 10 (company) = 45; invalid Udyam ignored.
    """
    payload = {
        "email": "owner@example.in",
        "gstNumber": "27aapfu0939f1zv",
        "udyamNumber": "UDYAM-M-03-0123456",
        "company": "Example Industries",
    }
    response = client.post("/api/v1/trust/score", json=payload)
    assert response.status_code == 200
    data = response.json()

    assert data["trustScore"] == 45
    assert data["signals"] == ["email", "gst_number", "company"]


def test_trust_preview_empty_payload(client):
    response = client.post("/api/v1/trust/score", json={})
    assert response.status_code == 200
    assert response.json() == {"trustScore": 0, "signals": []}


def test_trust_stats(client):
    """
    Scenario: Seeded participants (before any recalculation).
    Expected: 12 zero-trust fillers fall in the lowest bucket.
    """
    response = client.get("/api/v1/trust/stats")
    assert response.status_code == 200
    data = response.json()

    assert data["trustDistribution"] == {"0-30": 12, "31-60": 1, "61-80": 2, "81-100": 2}
    # Pune (90), Rajesh (80) and the inactive supplier (100); the buyer is excluded
    assert data["highTrustSuppliers"] == 3
    assert data["kyc"] == {
        "gstProvided": 2,
        "udyamProvided": 1,
        "bothProvided": 1,
        "verified": 4,
    }
    assert data["validators"]["gstExample"] == "27AAPFU0939F1ZV"
    assert data["validators"]["udyamExample"] == "UDYAM-MH-03-0123456"


def test_recalculate_trust_score(client, participant_id):
    """
    Scenario: Rajesh Kumar is stored with a stale score of 80.
    Expected: email, phone, KYC, GST, accepted quotes and company -> 90, persisted.
    """
    pid = participant_id("Rajesh Kumar")

    response = client.post(f"/api/v1/trust/{pid}/recalculate")
    assert response.status_code == 200
    data = response.json()

    assert data["participantId"] == pid
    assert data["previousScore"] == 80
    assert data["trustScore"] == 90
    assert "accepted_quotes" in data["signals"]
    assert "udyam_number" not in data["signals"]

    # Second run is a no-op
    again = client.post(f"/api/v1/trust/{pid}/recalculate").json()
    assert again["previousScore"] == 90
    assert again["trustScore"] == 90


def test_recalculated_score_feeds_matching(client, rfq_id):
    """
    Scenario: after recalculation Rajesh Kumar has trust 90.
    Expected: trust bonus rises from 16 to 18 -> 85.
    """
    response = client.post("/api/v1/matching/", json={"rfqId": rfq_id("MS Steel Sheets")})
    top = response.json()["matches"][0]

    assert top["name"] == "Rajesh Kumar"
    assert top["trustScore"] == 90
    assert top["matchScore"] == 85


def test_blank_registration_numbers_are_not_counted(client, db):
    """
    Scenario: A participant saved with empty-string GST and Udyam numbers.
    Expected: KYC provided counts are unchanged.
    """
    before = client.get("/api/v1/trust/stats").json()["kyc"]

    db.add(Participant(name="Blank Docs", role="SUPPLIER", gst_number="", udyam_number=""))
    db.commit()

    after = client.get("/api/v1/trust/stats").json()["kyc"]
    assert after["gstProvided"] == before["gstProvided"] == 2
    assert after["udyamProvided"] == before["udyamProvided"] == 1
    assert after["bothProvided"] == before["bothProvided"] == 1


def test_recalculate_unknown_participant(client):
    response = client.post("/api/v1/trust/999999/recalculate")
    assert response.status_code == 404
