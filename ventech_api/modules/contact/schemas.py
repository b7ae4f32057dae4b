# ventech_api/modules/contact/schemas.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

class ContactFormRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    company: Optional[str] = None
    message: str = Field(min_length=1)

    # EmailStr would accept "Name <addr>" and keep only addr
    @field_validator("email", mode="before")
    def reject_display_name(cls, value):
        if isinstance(value, str) and ("<" in value or ">" in value):
            raise ValueError("display names are not accepted")
        return value

class ContactFormResponse(BaseModel):
    success: bool
    message: str
