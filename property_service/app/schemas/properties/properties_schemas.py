from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class PropertyBase(EmptyStringModel):
    name: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, min_length=2, max_length=2)
    zipcode: Optional[int] = Field(None, ge=0, le=99999)
    unit_count: Optional[int] = Field(None, ge=0)

    @field_validator("state")
    @classmethod
    def upper_state(cls, v):
        return v.upper() if v else v


class PropertyCreate(PropertyBase):
    name: str = Field(..., max_length=100)
    address: str = Field(..., max_length=200)
    city: str = Field(..., max_length=100)
    state: str = Field(..., min_length=2, max_length=2)


class PropertyUpdate(PropertyBase):
    id: int


class PropertyOut(BaseModel):
    id: int
    name: str
    address: str
    city: str
    state: str
    zipcode: Optional[int] = None
    unit_count: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PropertyListResponse(BaseModel):
    total: int
    items: List[PropertyOut]


class PropertyRequest(CommonQueryParams):
    city: Optional[str] = None
    state: Optional[str] = None
