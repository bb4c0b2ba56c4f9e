# bfhl/models/responses.py

from typing import Any, Optional

from pydantic import BaseModel, EmailStr


class HealthOut(BaseModel):
    is_success: bool = True
    official_email: Optional[EmailStr] = None


class SuccessOut(BaseModel):
    is_success: bool = True
    official_email: Optional[EmailStr] = None
    data: Any = None


class FailureOut(BaseModel):
    is_success: bool = False
    message: str
