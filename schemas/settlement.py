# schemas/settlement.py
"""
Pydantic schemas for security-deposit settlement.
"""
from typing import List, Optional

from pydantic import Field, ConfigDict

from .base import CamelModel
from .tenant import DepositStatusEnum


class MaintenanceDeduction(CamelModel):
     """A maintenance record offered as a deposit deduction."""
     maintenance_id: str
     description: str = ""
     date: Optional[str] = None
     cost: float = Field(..., ge=0)
     included: bool = False


class RentDeduction(CamelModel):
     """An unpaid rent obligation offered as a deposit deduction."""
     group_key: str
     period: str = ""
     balance: float
     included: bool = False


class SettlementCandidates(CamelModel):
     """Everything the settlement dialog needs for one tenant."""
     tenant_id: str
     tenant_name: str
     deposit_amount: float
     deposit_status: DepositStatusEnum
     version: int
     maintenance: List[MaintenanceDeduction]
     unpaid_rent: List[RentDeduction]


class SettlementSelection(CamelModel):
     """User selections: which maintenance ids and unpaid-rent group keys to deduct."""
     maintenance_ids: List[str] = Field(default_factory=list)
     rent_group_keys: List[str] = Field(default_factory=list)


class SettlementCommit(SettlementSelection):
     """Selections plus the deposit status to persist.

     When ``expected_version`` is given the commit is rejected if the tenant
     was modified since the candidates were read.
     """
     deposit_status: Optional[DepositStatusEnum] = None
     expected_version: Optional[int] = Field(None, ge=1)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "maintenanceIds": ["m-42"],
                    "rentGroupKeys": ["3f2b9c1e-Loyer-Juillet 2024"],
                    "depositStatus": "Partiellement remboursé",
                    "expectedVersion": 3,
               }
          }
     )


class SettlementResult(CamelModel):
     deposit_amount: float
     maintenance_deductions: float
     rent_deductions: float
     total_deductions: float
     final_refund_amount: float


class SettlementCommitResponse(SettlementResult):
     tenant_id: str
     deposit_status: DepositStatusEnum
     updated_maintenance_ids: List[str]
