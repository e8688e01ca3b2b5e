# schemas/tenant.py
"""
Pydantic schemas for tenants.
"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field, ConfigDict

from .base import CamelModel


class TenantStatusEnum(str, Enum):
     """Tenant activity status."""
     ACTIVE = "Actif"
     INACTIVE = "Inactif"


class DepositStatusEnum(str, Enum):
     """Security deposit disposition."""
     UNPAID = "Non payé"
     PAID = "Payé"
     REFUNDED = "Remboursé"
     PARTIALLY_REFUNDED = "Partiellement remboursé"


class TenantCreate(CamelModel):
     """Schema for creating a tenant. depositAmount defaults to twice the rent."""
     first_name: str = Field(..., min_length=1, max_length=100)
     last_name: str = Field(..., min_length=1, max_length=100)
     email: str = Field("", max_length=255)
     phone: str = Field("", max_length=50)
     national_id: str = Field("", max_length=100)
     nationality: str = Field("", max_length=100)
     bank_account: str = Field("", max_length=100)
     property_id: Optional[str] = None
     property_name: str = Field("", max_length=255)
     lease_start: Optional[date] = None
     lease_duration: int = Field(12, ge=1, description="Lease duration in months")
     payment_due_day: int = Field(1, ge=1, le=31)
     rent: float = Field(..., ge=0, description="Monthly rent")
     deposit_amount: Optional[float] = Field(None, ge=0)
     deposit_status: DepositStatusEnum = DepositStatusEnum.UNPAID
     status: TenantStatusEnum = TenantStatusEnum.ACTIVE

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "firstName": "Jean",
                    "lastName": "Dupont",
                    "email": "jean.dupont@example.com",
                    "phone": "+32470123456",
                    "propertyId": "3f2b9c1e",
                    "leaseStart": "2024-07-01",
                    "leaseDuration": 12,
                    "paymentDueDay": 1,
                    "rent": 1200.00,
               }
          }
     )


class TenantFields(TenantCreate):
     """Full writable field set stored for a new tenant."""
     deposit_amount: float = Field(..., ge=0)


class TenantUpdate(CamelModel):
     """Schema for editing a tenant. Only provided fields are written."""
     first_name: Optional[str] = Field(None, min_length=1, max_length=100)
     last_name: Optional[str] = Field(None, min_length=1, max_length=100)
     email: Optional[str] = Field(None, max_length=255)
     phone: Optional[str] = Field(None, max_length=50)
     national_id: Optional[str] = Field(None, max_length=100)
     nationality: Optional[str] = Field(None, max_length=100)
     bank_account: Optional[str] = Field(None, max_length=100)
     property_id: Optional[str] = None
     lease_start: Optional[date] = None
     lease_duration: Optional[int] = Field(None, ge=1)
     payment_due_day: Optional[int] = Field(None, ge=1, le=31)
     rent: Optional[float] = Field(None, ge=0)
     deposit_amount: Optional[float] = Field(None, ge=0)
     deposit_status: Optional[DepositStatusEnum] = None
     status: Optional[TenantStatusEnum] = None


class TenantPatch(TenantUpdate):
     """Store-level partial update, including fields the API derives itself."""
     property_name: Optional[str] = Field(None, max_length=255)
     id_card_url: Optional[str] = Field(None, max_length=500)
     id_card_path: Optional[str] = Field(None, max_length=500)


class TenantRecord(CamelModel):
     """Tenant as read from the record store."""
     id: str
     first_name: str
     last_name: str
     email: str = ""
     phone: str = ""
     national_id: str = ""
     nationality: str = ""
     bank_account: str = ""
     property_id: Optional[str] = None
     property_name: str = ""
     lease_start: Optional[date] = None
     lease_duration: int = 12
     payment_due_day: int = 1
     rent: float = 0.0
     deposit_amount: float = 0.0
     deposit_status: DepositStatusEnum = DepositStatusEnum.UNPAID
     status: TenantStatusEnum = TenantStatusEnum.ACTIVE
     id_card_url: Optional[str] = None
     id_card_path: Optional[str] = None
     version: int = 1

     @property
     def full_name(self) -> str:
          return f"{self.first_name} {self.last_name}".strip()
