# schemas/payment.py
"""
Pydantic schemas for payments and grouped payment obligations.
"""
import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, ConfigDict, computed_field

from .base import CamelModel


PAID_STATUS = "Payé"


class PaymentTypeEnum(str, Enum):
     """What a payment settles."""
     RENT = "Loyer"
     DEPOSIT = "Caution"


class GroupStatusEnum(str, Enum):
     """Settlement status of a grouped obligation."""
     PAID = "Payé"
     PARTIAL = "Partiel"
     UNPAID = "Non payé"


class PaymentCreate(CamelModel):
     """Request body for recording a payment against a tenant."""
     tenant_id: str = Field(..., min_length=1)
     date: datetime.date
     amount: float = Field(..., ge=0)
     status: str = Field(PAID_STATUS, min_length=1, max_length=50)
     period: str = Field("", max_length=100, description='e.g. "Juillet 2024"; forced to "Caution" for deposits')
     type: PaymentTypeEnum = PaymentTypeEnum.RENT

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenantId": "3f2b9c1e",
                    "date": "2024-07-01",
                    "amount": 1200.00,
                    "status": "Payé",
                    "period": "Juillet 2024",
                    "type": "Loyer",
               }
          }
     )


class PaymentFields(CamelModel):
     """Full field set stored for a payment, including the snapshots taken at creation."""
     tenant_id: str = Field(..., min_length=1)
     tenant_first_name: str = ""
     tenant_last_name: str = ""
     phone: str = ""
     email: str = ""
     property: str = ""
     date: datetime.date
     amount: float = Field(..., ge=0)
     status: str = Field(..., min_length=1, max_length=50)
     period: str = Field("", max_length=100)
     rent_due: float = Field(0, ge=0)
     type: PaymentTypeEnum


class PaymentUpdate(CamelModel):
     """In-place amendment of a payment. rentDue is a snapshot and is not amended."""
     date: Optional[datetime.date] = None
     amount: Optional[float] = Field(None, ge=0)
     status: Optional[str] = Field(None, min_length=1, max_length=50)
     period: Optional[str] = Field(None, max_length=100)


class PaymentRecord(CamelModel):
     """Payment as read from the record store."""
     id: str
     tenant_id: str
     tenant_first_name: str = ""
     tenant_last_name: str = ""
     phone: str = ""
     email: str = ""
     property: str = ""
     date: datetime.date
     amount: float
     status: str
     period: str = ""
     rent_due: float = 0.0
     type: PaymentTypeEnum


class GroupedPayment(CamelModel):
     """A single rent-period or deposit obligation aggregating its payments."""
     group_key: str
     tenant_id: str
     tenant_first_name: str
     tenant_last_name: str
     property: str
     type: PaymentTypeEnum
     period: str
     total_due: float
     total_paid: float
     status: GroupStatusEnum
     payments: List[PaymentRecord]

     @computed_field
     @property
     def balance(self) -> float:
          return self.total_due - self.total_paid
