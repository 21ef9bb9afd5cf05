from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class UnitBase(EmptyStringModel):
    property_id: Optional[int] = None
    unit_number: Optional[str] = Field(None, max_length=50)
    bedrooms: Optional[int] = Field(None, ge=0, le=20)
    bathrooms: Optional[int] = Field(None, ge=0, le=20)
    notes: Optional[str] = Field(None, max_length=500)
    rented: Optional[bool] = None


class UnitCreate(UnitBase):
    property_id: int
    unit_number: str = Field(..., max_length=50)
    rented: bool = False


class UnitUpdate(UnitBase):
    id: int


class UnitOut(BaseModel):
    id: int
    property_id: int
    property_name: Optional[str] = None
    unit_number: str
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    notes: Optional[str] = None
    rented: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UnitListResponse(BaseModel):
    total: int
    items: List[UnitOut]


class UnitRequest(CommonQueryParams):
    property_id: Optional[int] = None
    rented: Optional[bool] = None
