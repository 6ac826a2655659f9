from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional


class TrustInput(BaseModel):
    """Verification fields of a participant. Everything is optional."""

    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    email: Optional[str] = None
    phone: Optional[str] = None
    is_verified: Optional[bool] = None
    gst_number: Optional[str] = None
    udyam_number: Optional[str] = None
    company: Optional[str] = None
    accepted_quotes_count: Optional[int] = Field(default=None, ge=0)


class TrustScoreResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    trust_score: int
    signals: List[str]


class TrustRecalculation(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    participant_id: int
    previous_score: int
    trust_score: int
    signals: List[str]


class KycStats(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    gst_provided: int
    udyam_provided: int
    both_provided: int
    verified: int


class TrustStats(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    trust_distribution: Dict[str, int]
    high_trust_suppliers: int
    kyc: KycStats
    validators: Dict[str, str]
