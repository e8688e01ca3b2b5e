# services/payment_grouping.py
"""
Payment Grouping - folds individual payment events into obligations.

An obligation is one (tenant, type, period) triple. Its due amount is the
``rent_due`` snapshot carried by its payments (first non-zero value in
encounter order), falling back to the tenant's current rent or deposit only
when no payment carries one. Only payments with status "Payé" count towards
the paid total; every payment is listed in its group.

Pure functions: no store access, no state kept between calls.
"""
import re
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from schemas import (
     GroupedPayment,
     GroupStatusEnum,
     PaymentRecord,
     PaymentTypeEnum,
     PropertyRecord,
     TenantRecord,
     PAID_STATUS,
)

NOT_AVAILABLE = "N/A"

FRENCH_MONTHS = {
     "janvier": 1,
     "février": 2,
     "fevrier": 2,
     "mars": 3,
     "avril": 4,
     "mai": 5,
     "juin": 6,
     "juillet": 7,
     "août": 8,
     "aout": 8,
     "septembre": 9,
     "octobre": 10,
     "novembre": 11,
     "décembre": 12,
     "decembre": 12,
}

_MONTH_YEAR = re.compile(r"^\s*([^\W\d_]+)\s+(\d{4})\s*$")
_ISO_MONTH = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


def group_key(payment: PaymentRecord) -> str:
     """Obligation key: ``tenantId-type-period``."""
     return f"{payment.tenant_id}-{payment.type}-{payment.period}"


def derive_status(total_due: float, total_paid: float) -> str:
     """
     Three-way settlement status of an obligation.

     "Payé" when something is due and fully covered, "Non payé" when nothing
     has been paid, "Partiel" for everything in between.
     """
     if total_due > 0 and total_paid >= total_due:
          return GroupStatusEnum.PAID.value
     if total_paid == 0:
          return GroupStatusEnum.UNPAID.value
     return GroupStatusEnum.PARTIAL.value


def parse_period(period: str) -> Optional[Tuple[int, int]]:
     """
     Parse a period label into (year, month).

     Accepts "Juillet 2024" (French month names, any case, with or without
     accents) and "2024-07". Returns None for anything else, e.g. "Caution".
     """
     match = _MONTH_YEAR.match(period or "")
     if match:
          month = FRENCH_MONTHS.get(match.group(1).lower())
          if month:
               return int(match.group(2)), month
          return None
     match = _ISO_MONTH.match(period or "")
     if match and 1 <= int(match.group(2)) <= 12:
          return int(match.group(1)), int(match.group(2))
     return None


def period_sort_key(group: GroupedPayment) -> tuple:
     """
     Sort key for newest-first ordering of groups.

     Calendar periods sort chronologically and ahead of labels that are not
     periods ("Caution"), which sort lexically among themselves.
     """
     parsed = parse_period(group.period)
     if parsed:
          return (1, parsed[0], parsed[1], "", group.group_key)
     return (0, 0, 0, group.period, group.group_key)


def _fallback_due(payment_type: str, tenant: Optional[TenantRecord]) -> float:
     if tenant is None:
          return 0.0
     if payment_type == PaymentTypeEnum.DEPOSIT:
          return tenant.deposit_amount or 0.0
     return tenant.rent or 0.0


def _display_property(
     payment: PaymentRecord,
     tenant: Optional[TenantRecord],
     properties: Dict[str, PropertyRecord],
) -> str:
     if tenant is not None:
          prop = properties.get(tenant.property_id) if tenant.property_id else None
          if prop is not None:
               return prop.address
          if tenant.property_name:
               return tenant.property_name
     return payment.property or NOT_AVAILABLE


def group_payments(
     payments: Iterable[PaymentRecord],
     tenants: Iterable[TenantRecord],
     properties: Iterable[PropertyRecord],
) -> List[GroupedPayment]:
     """
     Group payments into obligations.

     Args:
          payments: Payment records, any order
          tenants: Tenant records used for display fields and the due fallback
          properties: Property records used for the display address

     Returns:
          GroupedPayment list, newest period first; each group's payments
          ordered by date ascending
     """
     tenants_by_id = {t.id: t for t in tenants}
     properties_by_id = {p.id: p for p in properties}

     seeds: Dict[str, dict] = {}
     for payment in payments:
          key = group_key(payment)
          seed = seeds.get(key)
          if seed is None:
               tenant = tenants_by_id.get(payment.tenant_id)
               seed = {
                    "group_key": key,
                    "tenant_id": payment.tenant_id,
                    "tenant_first_name": (
                         tenant.first_name if tenant else payment.tenant_first_name or NOT_AVAILABLE
                    ),
                    "tenant_last_name": tenant.last_name if tenant else payment.tenant_last_name,
                    "property": _display_property(payment, tenant, properties_by_id),
                    "type": payment.type,
                    "period": payment.period,
                    "fallback_due": _fallback_due(payment.type, tenant),
                    "snapshot_due": 0.0,
                    "total_paid": Decimal("0"),
                    "payments": [],
               }
               seeds[key] = seed

          if not seed["snapshot_due"] and payment.rent_due:
               seed["snapshot_due"] = payment.rent_due
          if payment.status == PAID_STATUS:
               seed["total_paid"] += Decimal(str(payment.amount))
          seed["payments"].append(payment)

     groups = []
     for seed in seeds.values():
          snapshot_due = seed.pop("snapshot_due")
          fallback_due = seed.pop("fallback_due")
          total_due = snapshot_due or fallback_due
          seed["total_paid"] = float(seed["total_paid"])
          seed["payments"] = sorted(seed["payments"], key=lambda p: p.date)
          groups.append(
               GroupedPayment(
                    total_due=total_due,
                    status=derive_status(total_due, seed["total_paid"]),
                    **seed,
               )
          )

     groups.sort(key=period_sort_key, reverse=True)
     return groups


def unpaid_rent_groups(groups: Iterable[GroupedPayment], tenant_id: str) -> List[GroupedPayment]:
     """Rent obligations of one tenant that still carry a positive balance."""
     return [
          g for g in groups
          if g.tenant_id == tenant_id
          and g.type == PaymentTypeEnum.RENT
          and g.status != GroupStatusEnum.PAID
          and g.total_due - g.total_paid > 0
     ]
