# schemas/maintenance.py
"""
Pydantic schemas for maintenance work orders.
"""
import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class MaintenanceCreate(CamelModel):
     """Schema for logging maintenance work on a property."""
     property_id: str = Field(..., min_length=1)
     tenant_id: Optional[str] = None
     date: datetime.date
     description: str = Field(..., min_length=1, max_length=1000)
     cost: float = Field(..., ge=0)


class MaintenanceFields(MaintenanceCreate):
     """Stored field set; display names are resolved when the record is created."""
     property_name: str = ""
     tenant_name: Optional[str] = None
     deducted_from_deposit: bool = False


class MaintenanceUpdate(CamelModel):
     property_id: Optional[str] = Field(None, min_length=1)
     tenant_id: Optional[str] = None
     date: Optional[datetime.date] = None
     description: Optional[str] = Field(None, min_length=1, max_length=1000)
     cost: Optional[float] = Field(None, ge=0)


class MaintenancePatch(MaintenanceUpdate):
     """Store-level partial update. deductedFromDeposit is written by deposit settlement only."""
     property_name: Optional[str] = None
     tenant_name: Optional[str] = None
     deducted_from_deposit: Optional[bool] = None


class MaintenanceRecord(CamelModel):
     id: str
     property_id: str
     property_name: str = ""
     tenant_id: Optional[str] = None
     tenant_name: Optional[str] = None
     date: datetime.date
     description: str
     cost: float
     deducted_from_deposit: bool = False
