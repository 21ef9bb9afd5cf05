from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class UtilityTypeCreate(EmptyStringModel):
    utility_name: str = Field(..., min_length=1, max_length=100)
    utility_provider: str = Field(..., min_length=1, max_length=100)
    active: bool = True


class UtilityTypeUpdate(EmptyStringModel):
    id: int
    utility_name: Optional[str] = Field(None, min_length=1, max_length=100)
    utility_provider: Optional[str] = Field(None, min_length=1, max_length=100)
    active: Optional[bool] = None


class UtilityTypeOut(BaseModel):
    id: int
    utility_name: str
    utility_provider: str
    active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UtilityTypeListResponse(BaseModel):
    total: int
    items: List[UtilityTypeOut]


class UtilityTypeRequest(CommonQueryParams):
    active: Optional[bool] = None
