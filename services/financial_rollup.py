# services/financial_rollup.py
"""
Financial Rollup - revenue, expenses and a transaction ledger for reporting.

``compute_rollup`` is a pure fold over already-fetched records.
``load_reports_data`` reads the store and never raises: on a failed read
the reporting view gets the zeroed default.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from schemas import (
     MaintenanceRecord,
     MonthlyData,
     PaymentRecord,
     ReportsData,
     Transaction,
     TransactionTypeEnum,
     PAID_STATUS,
)

logger = logging.getLogger(__name__)

MONTHS_IN_SERIES = 6
MAX_TRANSACTIONS = 10

# Short month names as rendered by the fr-BE locale, capitalized, without the trailing dot
MONTH_LABELS = (
     "Janv", "Févr", "Mars", "Avr", "Mai", "Juin",
     "Juil", "Août", "Sept", "Oct", "Nov", "Déc",
)


def month_key(day: date) -> str:
     return f"{day.year}-{day.month:02d}"


def trailing_months(now: date, count: int = MONTHS_IN_SERIES) -> List[Tuple[str, str]]:
     """(YYYY-MM key, label) for the ``count`` calendar months ending with ``now``'s, oldest first."""
     months = []
     year, month = now.year, now.month
     for _ in range(count):
          months.append((f"{year}-{month:02d}", MONTH_LABELS[month - 1]))
          month -= 1
          if month == 0:
               year, month = year - 1, 12
     months.reverse()
     return months


def _empty_series(now: date) -> List[MonthlyData]:
     return [MonthlyData(key=key, month=label) for key, label in trailing_months(now)]


def default_reports_data(now: date) -> ReportsData:
     """Zeroed result: six empty month buckets and no transactions."""
     return ReportsData(monthly_data=_empty_series(now), transactions=[])


def compute_rollup(
     payments: Iterable[PaymentRecord],
     maintenances: Iterable[MaintenanceRecord],
     now: date,
) -> ReportsData:
     """
     Aggregate paid payments and maintenance costs.

     Args:
          payments: All payment records; only status "Payé" counts as revenue
          maintenances: All maintenance records; every cost is an expense
          now: Reference date for the trailing six-month series

     Returns:
          ReportsData with totals, margin (percent), monthly series and the
          ten most recent transactions
     """
     paid = [p for p in payments if p.status == PAID_STATUS]
     maintenances = list(maintenances)

     revenue = sum((Decimal(str(p.amount)) for p in paid), Decimal("0"))
     expenses = sum((Decimal(str(m.cost)) for m in maintenances), Decimal("0"))
     net = revenue - expenses
     margin = float(net / revenue * 100) if revenue > 0 else 0.0

     buckets: Dict[str, Dict[str, Decimal]] = {
          key: {"income": Decimal("0"), "expenses": Decimal("0")}
          for key, _ in trailing_months(now)
     }
     for p in paid:
          bucket = buckets.get(month_key(p.date))
          if bucket is not None:
               bucket["income"] += Decimal(str(p.amount))
     for m in maintenances:
          bucket = buckets.get(month_key(m.date))
          if bucket is not None:
               bucket["expenses"] += Decimal(str(m.cost))

     monthly_data = [
          MonthlyData(
               key=key,
               month=label,
               income=float(buckets[key]["income"]),
               expenses=float(buckets[key]["expenses"]),
          )
          for key, label in trailing_months(now)
     ]

     transactions = [
          Transaction(
               id=f"p-{p.id}",
               date=p.date,
               description=f"{p.type} {p.period} - {p.tenant_first_name} {p.tenant_last_name}".strip(),
               type=TransactionTypeEnum.INCOME,
               amount=p.amount,
          )
          for p in paid
     ] + [
          Transaction(
               id=f"m-{m.id}",
               date=m.date,
               description=m.description,
               type=TransactionTypeEnum.EXPENSE,
               amount=m.cost,
          )
          for m in maintenances
     ]
     transactions.sort(key=lambda t: t.date, reverse=True)

     return ReportsData(
          total_revenue=float(revenue),
          total_expenses=float(expenses),
          net_profit=float(net),
          profit_margin=margin,
          monthly_data=monthly_data,
          transactions=transactions[:MAX_TRANSACTIONS],
     )


def load_reports_data(store, now: date) -> ReportsData:
     """
     Fetch payments and maintenance records and roll them up.

     Any failure while reading or aggregating is logged and answered with
     ``default_reports_data`` so the reporting view always renders.
     """
     try:
          payments = store.fetch_all("payments")
          maintenances = store.fetch_all("maintenances")
          return compute_rollup(payments, maintenances, now)
     except Exception:
          logger.exception("Error fetching reports data")
          return default_reports_data(now)
