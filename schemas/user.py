from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    name: Optional[str] = None
    email: str
    date: datetime


class UserProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    email: str
    date: datetime


class GetUserResponse(BaseModel):
    success: bool = True
    user: UserSummary


class UpdateProfileResponse(BaseModel):
    success: bool = True
    user: UserProfile


class AuthTokenResponse(BaseModel):
    success: bool
    token: Optional[str] = None
    errors: Optional[str] = None
