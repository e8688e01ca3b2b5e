# services/deposit_settlement.py
"""
Deposit Settlement - nets selected deductions against a security deposit.

Deductions are the costs of the selected maintenance records plus the
balances of the selected unpaid rent obligations. The refund is the deposit
minus the deductions and is not clamped: a negative refund means the tenant
still owes money.

Amounts are summed as decimals so that toggling one item moves the total by
exactly that item's amount.
"""
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Optional

from schemas import (
     DepositStatusEnum,
     MaintenanceDeduction,
     RentDeduction,
     SettlementResult,
)


def _dec(value: float) -> Decimal:
     return Decimal(str(value))


def compute_settlement(
     deposit_amount: float,
     maintenance: Iterable[MaintenanceDeduction],
     unpaid_rent: Iterable[RentDeduction],
) -> SettlementResult:
     """
     Compute total deductions and the final refund.

     Args:
          deposit_amount: Deposit held for the tenant
          maintenance: Maintenance candidates with their inclusion flag
          unpaid_rent: Unpaid rent candidates with their inclusion flag

     Returns:
          SettlementResult with the per-kind subtotals
     """
     maintenance_total = sum((_dec(m.cost) for m in maintenance if m.included), Decimal("0"))
     rent_total = sum((_dec(r.balance) for r in unpaid_rent if r.included), Decimal("0"))
     total = maintenance_total + rent_total
     return SettlementResult(
          deposit_amount=deposit_amount,
          maintenance_deductions=float(maintenance_total),
          rent_deductions=float(rent_total),
          total_deductions=float(total),
          final_refund_amount=float(_dec(deposit_amount) - total),
     )


def changed_deduction_flags(
     maintenance: Iterable[MaintenanceDeduction],
     saved_flags: Mapping[str, bool],
) -> Dict[str, bool]:
     """
     Maintenance ids whose inclusion differs from the saved
     ``deducted_from_deposit`` flag, mapped to the flag to write.
     """
     return {
          m.maintenance_id: m.included
          for m in maintenance
          if bool(saved_flags.get(m.maintenance_id, False)) != m.included
     }


def derive_deposit_status(result: SettlementResult, requested: Optional[str] = None) -> str:
     """Deposit status to persist: the requested one, else refunded in full or in part."""
     if requested:
          return requested
     if result.total_deductions == 0:
          return DepositStatusEnum.REFUNDED.value
     return DepositStatusEnum.PARTIALLY_REFUNDED.value
