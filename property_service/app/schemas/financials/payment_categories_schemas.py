from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class PaymentCategoryCreate(EmptyStringModel):
    payment_category: str = Field(..., min_length=2, max_length=50)
    description: Optional[str] = Field(None, max_length=200)


class PaymentCategoryUpdate(EmptyStringModel):
    id: int
    payment_category: Optional[str] = Field(None, min_length=2, max_length=50)
    description: Optional[str] = Field(None, max_length=200)


class PaymentCategoryOut(BaseModel):
    id: int
    payment_category: str
    description: str = ""
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PaymentCategoryListResponse(BaseModel):
    total: int
    items: List[PaymentCategoryOut]
