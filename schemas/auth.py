# schemas/auth.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
     email: str = Field(..., min_length=3, max_length=255)
     password: str = Field(..., min_length=6)
     name: str = Field(..., min_length=1, max_length=100)
     phone: Optional[str] = None


class LoginRequest(BaseModel):
     email: str
     password: str


class UserResponse(BaseModel):
     id: int
     email: str
     name: str


class TokenResponse(BaseModel):
     token: str
     user: UserResponse


class UserProfile(BaseModel):
     model_config = ConfigDict(from_attributes=True)

     id: int
     email: str
     name: str
     phone: Optional[str] = None
     created_at: datetime
     updated_at: Optional[datetime] = None


class UserUpdate(BaseModel):
     """Omitted fields, and a blank name or phone, are left as stored."""
     name: Optional[str] = Field(None, max_length=100)
     phone: Optional[str] = Field(None, max_length=50)
     password: Optional[str] = Field(None, min_length=6)
