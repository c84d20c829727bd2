# schemas/tenant.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class TenantCreate(BaseModel):
     name: str = Field(..., min_length=1, max_length=100)
     phone: Optional[str] = Field(None, max_length=50)
     email: Optional[str] = Field(None, max_length=255)
     id_number: Optional[str] = Field(None, max_length=100)
     memo: Optional[str] = None


class TenantUpdate(BaseModel):
     name: Optional[str] = Field(None, min_length=1, max_length=100)
     phone: Optional[str] = None
     email: Optional[str] = None
     id_number: Optional[str] = None
     memo: Optional[str] = None


class TenantResponse(BaseModel):
     id: int
     name: str
     phone: Optional[str] = None
     email: Optional[str] = None
     id_number: Optional[str] = None
     memo: Optional[str] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
