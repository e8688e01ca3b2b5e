# schemas/owner_info.py
"""
Landlord details shown on receipts and statements.
"""
from typing import Optional

from pydantic import Field

from .base import CamelModel


OWNER_INFO_ID = "owner"


class OwnerInfoFields(CamelModel):
     name: str = Field("", max_length=255)
     address: str = Field("", max_length=255)
     phone: Optional[str] = Field(None, max_length=50)
     email: Optional[str] = Field(None, max_length=255)
     bank_account: Optional[str] = Field(None, max_length=100)
     company_number: Optional[str] = Field(None, max_length=100)


class OwnerInfoUpdate(CamelModel):
     name: Optional[str] = Field(None, max_length=255)
     address: Optional[str] = Field(None, max_length=255)
     phone: Optional[str] = Field(None, max_length=50)
     email: Optional[str] = Field(None, max_length=255)
     bank_account: Optional[str] = Field(None, max_length=100)
     company_number: Optional[str] = Field(None, max_length=100)


class OwnerInfoRecord(OwnerInfoFields):
     id: str = OWNER_INFO_ID
