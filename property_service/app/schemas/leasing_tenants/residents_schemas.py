import re
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


class ResidentBase(EmptyStringModel):
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    mobile_number: Optional[str] = Field(None, max_length=15)
    home_number: Optional[str] = Field(None, max_length=15)
    notes: Optional[str] = Field(None, max_length=500)
    active: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return v.lower() if v else v

    @field_validator("mobile_number", "home_number")
    @classmethod
    def check_phone(cls, v, info):
        if v is not None and not PHONE_PATTERN.match(v):
            label = info.field_name.replace("_", " ").capitalize()
            raise ValueError(
                f"{label} must be a valid phone number (e.g., +12025550123)")
        return v


class ResidentCreate(ResidentBase):
    first_name: str = Field(..., max_length=50)
    last_name: str = Field(..., max_length=50)
    active: bool = True


class ResidentUpdate(ResidentBase):
    id: int


class ResidentOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: Optional[str] = None
    mobile_number: Optional[str] = None
    home_number: Optional[str] = None
    notes: Optional[str] = None
    active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ResidentListResponse(BaseModel):
    total: int
    items: List[ResidentOut]


class ResidentRequest(CommonQueryParams):
    active: Optional[bool] = None
