# schemas/reminder.py
"""
Pydantic schemas for rent reminders.
"""
import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel


class ReminderStatusEnum(str, Enum):
     SENT = "Envoyé"
     PENDING = "En attente"
     SCHEDULED = "Programmé"


class ReminderCreate(CamelModel):
     """Schema for creating a reminder. Display fields default from the tenant."""
     tenant_id: str = Field(..., min_length=1)
     tenant: str = Field("", max_length=255)
     property: str = Field("", max_length=255)
     due_date: datetime.date
     amount: float = Field(..., ge=0)
     status: ReminderStatusEnum = ReminderStatusEnum.PENDING


class ReminderUpdate(CamelModel):
     due_date: Optional[datetime.date] = None
     amount: Optional[float] = Field(None, ge=0)
     status: Optional[ReminderStatusEnum] = None


class ReminderRecord(CamelModel):
     id: str
     tenant_id: str
     tenant: str = ""
     property: str = ""
     due_date: datetime.date
     amount: float
     status: ReminderStatusEnum
