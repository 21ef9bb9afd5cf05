from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from shared.core.schemas import CommonQueryParams
from shared.helpers.date_helper import ensure_not_future, ensure_on_or_after
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class UtilityBase(EmptyStringModel):
    property_id: Optional[int] = None
    utility_type_id: Optional[int] = None
    payment_type_id: Optional[int] = None
    payment_category_id: Optional[int] = None
    reading_date: Optional[date] = None
    meter_reading: Optional[Decimal] = Field(None, ge=0)
    amount: Optional[Decimal] = Field(None, ge=0)
    payment_date: Optional[date] = None
    check_number: Optional[int] = Field(None, ge=0)

    @field_validator("reading_date")
    @classmethod
    def reading_date_not_future(cls, v):
        return ensure_not_future(v, "Reading date")

    @field_validator("payment_date")
    @classmethod
    def payment_date_not_future(cls, v):
        return ensure_not_future(v, "Payment date")

    @model_validator(mode="after")
    def reading_before_payment(self):
        ensure_on_or_after(
            self.payment_date, self.reading_date,
            "Reading date cannot be after payment date")
        return self


class UtilityCreate(UtilityBase):
    property_id: int
    utility_type_id: int
    payment_type_id: int
    payment_category_id: int
    amount: Decimal = Field(..., ge=0)
    payment_date: date


class UtilityUpdate(UtilityBase):
    id: int


class UtilityOut(BaseModel):
    id: int
    property_id: int
    property_name: Optional[str] = None
    utility_type_id: int
    utility_name: Optional[str] = None
    payment_type_id: int
    payment_category_id: int
    reading_date: Optional[date] = None
    meter_reading: Optional[float] = None
    amount: float
    payment_date: date
    check_number: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UtilityListResponse(BaseModel):
    total: int
    items: List[UtilityOut]


class UtilityRequest(CommonQueryParams):
    property_id: Optional[int] = None
    utility_type_id: Optional[int] = None
