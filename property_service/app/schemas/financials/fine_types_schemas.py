from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class FineTypeCreate(EmptyStringModel):
    fine_type: str = Field(..., min_length=1, max_length=100)


class FineTypeUpdate(FineTypeCreate):
    id: int


class FineTypeOut(BaseModel):
    id: int
    fine_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FineTypeListResponse(BaseModel):
    total: int
    items: List[FineTypeOut]
