from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from shared.core.schemas import CommonQueryParams
from shared.helpers.date_helper import ensure_not_future, ensure_on_or_after
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class LeaseBase(EmptyStringModel):
    lease_id: Optional[str] = Field(None, max_length=64)
    property_id: Optional[int] = None
    unit_id: Optional[int] = None
    lease_date: Optional[date] = None
    lease_start_date: Optional[date] = None
    lease_end_date: Optional[date] = None
    lease_term: Optional[int] = Field(None, ge=0)
    monthly_rent: Optional[Decimal] = Field(None, ge=0)
    security_deposit: Optional[Decimal] = Field(None, ge=0)
    active: Optional[bool] = None

    @field_validator("lease_date")
    @classmethod
    def lease_date_not_future(cls, v):
        return ensure_not_future(v, "Lease date")

    @model_validator(mode="after")
    def start_before_end(self):
        ensure_on_or_after(
            self.lease_end_date, self.lease_start_date,
            "Lease start date must be on or before lease end date")
        return self


class LeaseCreate(LeaseBase):
    lease_id: str = Field(..., max_length=64)
    property_id: int
    unit_id: int
    lease_date: date
    monthly_rent: Decimal = Field(..., ge=0)
    active: bool = True


class LeaseUpdate(LeaseBase):
    id: int


class LeaseOut(BaseModel):
    id: int
    lease_id: str
    property_id: int
    unit_id: int
    property_name: Optional[str] = None
    unit_number: Optional[str] = None
    lease_date: date
    lease_start_date: Optional[date] = None
    lease_end_date: Optional[date] = None
    lease_term: Optional[int] = None
    monthly_rent: float
    security_deposit: Optional[float] = None
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LeaseListResponse(BaseModel):
    total: int
    items: List[LeaseOut]


class LeaseRequest(CommonQueryParams):
    property_id: Optional[int] = None
    active: Optional[bool] = None
