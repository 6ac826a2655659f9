from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime


class SupplierRow(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        from_attributes=True,
    )

    id: int
    name: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    trust_score: int
    is_verified: bool
    gst_number: Optional[str] = None
    udyam_number: Optional[str] = None
    total_quotes: int = 0
    created_at: Optional[datetime] = None


class Pagination(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class SupplierDirectory(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    suppliers: List[SupplierRow]
    pagination: Pagination
