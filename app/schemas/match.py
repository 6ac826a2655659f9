from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional


class MatchRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    rfq_id: Optional[int] = None


class SupplierMatch(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    id: int
    name: str
    company: str
    phone: str
    location: str
    is_verified: bool
    trust_score: int
    total_quotes: int
    won_quotes: int
    match_score: int
    reasons: List[str]


class RFQSummaryOut(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    id: int
    title: str
    category: Optional[str] = None
    location: Optional[str] = None
    budget: Optional[float] = None


class MatchResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    success: bool = True
    matches: List[SupplierMatch]
    total_matches: int
    rfq: RFQSummaryOut
