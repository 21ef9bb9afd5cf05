from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from shared.core.schemas import CommonQueryParams
from shared.helpers.date_helper import ensure_not_future, ensure_on_or_after
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.leasing_tenants_enum import LedgerStanding


class LeasePaymentBase(EmptyStringModel):
    lease_id: Optional[str] = Field(None, max_length=64)
    payment_type_id: Optional[int] = None
    payment_category_id: Optional[int] = None
    payment_date: Optional[date] = None
    payment_amount: Optional[Decimal] = Field(None, ge=0)
    payment_due_date: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("payment_date")
    @classmethod
    def payment_date_not_future(cls, v):
        return ensure_not_future(v, "Payment date")

    @model_validator(mode="after")
    def due_after_payment(self):
        ensure_on_or_after(
            self.payment_due_date, self.payment_date,
            "Payment due date must be on or after payment date")
        return self


class LeasePaymentCreate(LeasePaymentBase):
    lease_id: str = Field(..., max_length=64)
    payment_type_id: int
    payment_category_id: int
    payment_date: date
    payment_amount: Decimal = Field(..., ge=0)


class LeasePaymentUpdate(LeasePaymentBase):
    id: int


class LeasePaymentOut(BaseModel):
    id: int
    lease_id: str
    payment_type_id: int
    payment_category_id: int
    payment_type: Optional[str] = None
    payment_category: Optional[str] = None
    payment_date: date
    payment_amount: float
    payment_due_date: Optional[date] = None
    notes: Optional[str] = None
    monthly_rent: Optional[float] = None
    total_paid: float
    balance: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LeasePaymentListResponse(BaseModel):
    total: int
    items: List[LeasePaymentOut]


class LeasePaymentRequest(CommonQueryParams):
    lease_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class LedgerSummaryOut(BaseModel):
    lease_id: str
    monthly_rent: float
    lease_start: date
    as_of: date
    months_elapsed: int
    expected_total_rent: float
    total_paid: float
    balance: float
    standing: LedgerStanding
    payments: List[LeasePaymentOut]

    model_config = {"from_attributes": True}
