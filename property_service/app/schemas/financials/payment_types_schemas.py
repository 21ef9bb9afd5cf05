from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class PaymentTypeCreate(EmptyStringModel):
    payment_type: str = Field(..., max_length=50)


class PaymentTypeUpdate(PaymentTypeCreate):
    id: int


class PaymentTypeOut(BaseModel):
    id: int
    payment_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PaymentTypeListResponse(BaseModel):
    total: int
    items: List[PaymentTypeOut]
