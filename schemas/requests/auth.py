from typing import Optional

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    # Presence is checked by the account service so the error shape matches login's
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateProfileRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
