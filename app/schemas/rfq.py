from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from app.models.rfq import RFQStatus


class RFQOut(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        from_attributes=True,
    )

    id: int
    title: str
    category: Optional[str] = None
    location: Optional[str] = None
    min_budget: Optional[float] = None
    max_budget: Optional[float] = None
    urgency: Optional[str] = None
    status: str
    is_public: bool
    buyer_id: Optional[int] = None
    created_at: Optional[datetime] = None


class RFQStatusUpdate(BaseModel):
    status: RFQStatus
