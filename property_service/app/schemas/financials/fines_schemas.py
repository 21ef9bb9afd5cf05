from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from shared.core.schemas import CommonQueryParams
from shared.helpers.date_helper import ensure_not_future, ensure_on_or_after
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

FINE_ID_PATTERN = r"^[A-Za-z0-9-]+$"


class FineBase(EmptyStringModel):
    fine_id: Optional[str] = Field(None, max_length=64, pattern=FINE_ID_PATTERN)
    property_id: Optional[int] = None
    fine_type_id: Optional[int] = None
    payment_type_id: Optional[int] = None
    payment_category_id: Optional[int] = None
    fine_date: Optional[date] = None
    fine_due_date: Optional[date] = None
    fine_amount: Optional[Decimal] = Field(None, ge=0)
    check_number: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("fine_date")
    @classmethod
    def fine_date_not_future(cls, v):
        return ensure_not_future(v, "Fine date")

    @model_validator(mode="after")
    def due_after_fine(self):
        ensure_on_or_after(
            self.fine_due_date, self.fine_date,
            "Fine due date must be on or after fine date")
        return self


class FineCreate(FineBase):
    fine_id: str = Field(..., max_length=64, pattern=FINE_ID_PATTERN)
    property_id: int
    fine_type_id: int
    payment_type_id: int
    payment_category_id: int
    fine_date: date
    fine_due_date: date
    fine_amount: Decimal = Field(..., ge=0)


class FineUpdate(FineBase):
    id: int


class FineOut(BaseModel):
    id: int
    fine_id: str
    property_id: int
    property_name: Optional[str] = None
    fine_type_id: int
    fine_type: Optional[str] = None
    payment_type_id: int
    payment_category_id: int
    fine_date: date
    fine_due_date: date
    fine_amount: float
    check_number: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FineListResponse(BaseModel):
    total: int
    items: List[FineOut]


class FineRequest(CommonQueryParams):
    property_id: Optional[int] = None
    fine_type_id: Optional[int] = None
