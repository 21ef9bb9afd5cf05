from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class InspectionTypeCreate(EmptyStringModel):
    inspection_type: str = Field(..., min_length=1, max_length=100)


class InspectionTypeUpdate(InspectionTypeCreate):
    id: int


class InspectionTypeOut(BaseModel):
    id: int
    inspection_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class InspectionTypeListResponse(BaseModel):
    total: int
    items: List[InspectionTypeOut]
