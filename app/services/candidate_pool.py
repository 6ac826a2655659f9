import logging
from typing import List, Optional

from app.core.config import settings
from app.services.repository import MatchRepository, SupplierCandidate

logger = logging.getLogger(__name__)


class CandidatePoolBuilder:
    """
    Builds the supplier candidate list for an RFQ.

    Suppliers whose location contains the RFQ location come first, then the
    global fallback pool fills in. A supplier found in both keeps its
    location-pool position.
    """

    def __init__(
        self,
        repository: MatchRepository,
        location_limit: Optional[int] = None,
        fallback_limit: Optional[int] = None,
    ):
        self.repository = repository
        self.location_limit = settings.LOCATION_POOL_LIMIT if location_limit is None else location_limit
        self.fallback_limit = settings.FALLBACK_POOL_LIMIT if fallback_limit is None else fallback_limit

    def build(self, location: Optional[str]) -> List[SupplierCandidate]:
        location = location or ""

        location_pool = []
        if location.strip():
            location_pool = self.repository.find_active_suppliers(
                location, self.location_limit
            )
        fallback_pool = self.repository.find_active_suppliers(None, self.fallback_limit)

        seen = set()
        candidates = []
        for supplier in location_pool + fallback_pool:
            if supplier.id in seen:
                continue
            seen.add(supplier.id)
            candidates.append(supplier)

        logger.debug(
            f"Candidate pool for location '{location}': {len(location_pool)} local, "
            f"{len(fallback_pool)} fallback, {len(candidates)} unique"
        )
        return candidates
