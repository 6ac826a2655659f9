import logging
import math
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import InvalidInput, NotFound
from app.services.candidate_pool import CandidatePoolBuilder
from app.services.repository import MatchRepository, SupplierCandidate

logger = logging.getLogger(__name__)

BASE_SCORE = 10
KYC_BONUS = 20
LOCATION_BONUS = 25
WIN_RATE_WEIGHT = 15
TRUST_DIVISOR = 5
MAX_MATCH_SCORE = 100

HIGH_TRUST_REASON_THRESHOLD = 70
TRUST_REASON_THRESHOLD = 30


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def location_matches(candidate_location: Optional[str], rfq_location: Optional[str]) -> bool:
    rfq_loc = (rfq_location or "").lower()
    if not rfq_loc.strip():
        return False
    return rfq_loc in (candidate_location or "").lower()


def score_candidate(candidate: SupplierCandidate, rfq_location: Optional[str]) -> dict:
    """
    Scores one supplier against an RFQ location.

    Base 10, + trust_score/5 (0-20), + 20 KYC verified, + 25 location match,
    + win rate * 15. Capped at 100.
    """
    score = BASE_SCORE
    reasons = []

    # 1. Trust score bonus
    trust = candidate.trust_score or 0
    score += round_half_up(trust / TRUST_DIVISOR)
    if trust >= HIGH_TRUST_REASON_THRESHOLD:
        reasons.append(f"Trust {trust}/100 (GST/Udyam verified)")
    elif trust >= TRUST_REASON_THRESHOLD:
        reasons.append(f"Trust {trust}/100")

    # 2. KYC
    if candidate.is_verified:
        score += KYC_BONUS
        reasons.append("KYC verified")

    # 3. Location
    if location_matches(candidate.location, rfq_location):
        score += LOCATION_BONUS
        reasons.append("Location match")

    # 4. Quote win rate
    total = candidate.total_quotes or 0
    won = candidate.won_quotes or 0
    if total > 0:
        win_rate = won / total
        score += round_half_up(win_rate * WIN_RATE_WEIGHT)
        reasons.append(f"{round_half_up(win_rate * 100)}% quote win rate")

    return {
        "id": candidate.id,
        "name": candidate.name or candidate.company or "Supplier",
        "company": candidate.company or "",
        "phone": candidate.phone or "",
        "location": candidate.location or "",
        "is_verified": bool(candidate.is_verified),
        "trust_score": trust,
        "total_quotes": total,
        "won_quotes": won,
        "match_score": max(0, min(MAX_MATCH_SCORE, score)),
        "reasons": reasons,
    }


def rank_candidates(
    candidates: List[SupplierCandidate],
    rfq_location: Optional[str],
    limit: Optional[int] = None,
) -> List[dict]:
    """Scores, sorts (stable, highest first) and truncates the candidates."""
    limit = settings.MATCH_RESULT_LIMIT if limit is None else limit
    scored = [score_candidate(c, rfq_location) for c in candidates]
    scored.sort(key=lambda m: m["match_score"], reverse=True)
    return scored[:limit]


class SupplierMatcher:
    """
    Ranks suppliers for an open RFQ.
    Read-only: repeated calls over unchanged data return the same result.
    """

    def __init__(
        self,
        repository: MatchRepository,
        pool_builder: Optional[CandidatePoolBuilder] = None,
        result_limit: Optional[int] = None,
    ):
        self.repository = repository
        self.pool_builder = pool_builder or CandidatePoolBuilder(repository)
        self.result_limit = settings.MATCH_RESULT_LIMIT if result_limit is None else result_limit

    def match(self, rfq_id: Optional[int]) -> dict:
        if rfq_id is None:
            raise InvalidInput("rfqId is required")

        rfq = self.repository.get_rfq(rfq_id)
        if rfq is None:
            raise NotFound(f"RFQ {rfq_id} not found")
        if not rfq.is_open_for_matching:
            raise InvalidInput(f"RFQ {rfq_id} is not open for matching (status {rfq.status})")

        candidates = self.pool_builder.build(rfq.location)
        matches = rank_candidates(candidates, rfq.location, self.result_limit)

        logger.info(
            f"Matched RFQ {rfq.id}: {len(candidates)} candidates, {len(matches)} returned"
        )

        return {
            "success": True,
            "matches": matches,
            "total_matches": len(matches),
            "rfq": {
                "id": rfq.id,
                "title": rfq.title,
                "category": rfq.category,
                "location": rfq.location,
                "budget": rfq.max_budget,
            },
        }
