from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from shared.core.schemas import CommonQueryParams
from shared.helpers.date_helper import ensure_not_future
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ExpenseBase(EmptyStringModel):
    property_id: Optional[int] = None
    payment_type_id: Optional[int] = None
    payment_category_id: Optional[int] = None
    expense_date: Optional[date] = None
    expense_amount: Optional[Decimal] = Field(None, ge=0)
    check_number: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("expense_date")
    @classmethod
    def expense_date_not_future(cls, v):
        return ensure_not_future(v, "Expense date")


class ExpenseCreate(ExpenseBase):
    property_id: int
    payment_type_id: int
    payment_category_id: int
    expense_date: date
    expense_amount: Decimal = Field(..., ge=0)


class ExpenseUpdate(ExpenseBase):
    id: int


class ExpenseOut(BaseModel):
    id: int
    property_id: int
    property_name: Optional[str] = None
    payment_type_id: int
    payment_category_id: int
    expense_date: date
    expense_amount: float
    check_number: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ExpenseListResponse(BaseModel):
    total: int
    items: List[ExpenseOut]


class ExpenseRequest(CommonQueryParams):
    property_id: Optional[int] = None
    month: Optional[str] = None
