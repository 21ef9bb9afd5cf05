from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from shared.core.schemas import CommonQueryParams
from shared.helpers.date_helper import ensure_not_future
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class InspectionBase(EmptyStringModel):
    property_id: Optional[int] = None
    inspection_type_id: Optional[int] = None
    payment_type_id: Optional[int] = None
    inspection_date: Optional[date] = None
    inspected_by: Optional[str] = Field(None, min_length=1, max_length=100)
    inspection_amount: Optional[Decimal] = Field(None, ge=0)
    check_number: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("inspection_date")
    @classmethod
    def inspection_date_not_future(cls, v):
        return ensure_not_future(v, "Inspection date")


class InspectionCreate(InspectionBase):
    property_id: int
    inspection_type_id: int
    payment_type_id: int
    inspection_date: date
    inspected_by: str = Field(..., min_length=1, max_length=100)
    inspection_amount: Decimal = Field(..., ge=0)


class InspectionUpdate(InspectionBase):
    id: int


class InspectionOut(BaseModel):
    id: int
    property_id: int
    property_name: Optional[str] = None
    inspection_type_id: int
    inspection_type: Optional[str] = None
    payment_type_id: int
    inspection_date: date
    inspected_by: str
    inspection_amount: float
    check_number: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class InspectionListResponse(BaseModel):
    total: int
    items: List[InspectionOut]


class InspectionRequest(CommonQueryParams):
    property_id: Optional[int] = None
    inspection_type_id: Optional[int] = None
