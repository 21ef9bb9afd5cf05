from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ExpenseTypeCreate(EmptyStringModel):
    expense_type: str = Field(..., min_length=2, max_length=50)
    description: Optional[str] = Field(None, max_length=200)


class ExpenseTypeUpdate(EmptyStringModel):
    id: int
    expense_type: Optional[str] = Field(None, min_length=2, max_length=50)
    description: Optional[str] = Field(None, max_length=200)


class ExpenseTypeOut(BaseModel):
    id: int
    expense_type: str
    description: str = ""
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ExpenseTypeListResponse(BaseModel):
    total: int
    items: List[ExpenseTypeOut]
