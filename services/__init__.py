# services/__init__.py
from .errors import (
     RecordNotFoundError,
     UnknownCollectionError,
     StoreError,
     ConcurrentUpdateError,
     IndexationError,
     InvalidRecordError,
)
from .record_store import (
     RecordStore,
     Subscription,
     TENANTS,
     PROPERTIES,
     PAYMENTS,
     MAINTENANCES,
     REMINDERS,
     DOCUMENTS,
     OWNER_INFO,
)
from .payment_grouping import group_payments, derive_status, unpaid_rent_groups
from .deposit_settlement import compute_settlement, changed_deduction_flags, derive_deposit_status
from .indexation import compute_indexed_rent, format_euro
from .financial_rollup import compute_rollup, default_reports_data, load_reports_data
from .live_view import LiveGroupedPayments
from .tenant_service import TenantService
from .payment_service import PaymentService
from .property_service import PropertyService

__all__ = [
     "RecordNotFoundError",
     "UnknownCollectionError",
     "StoreError",
     "ConcurrentUpdateError",
     "IndexationError",
     "InvalidRecordError",
     "RecordStore",
     "Subscription",
     "TENANTS",
     "PROPERTIES",
     "PAYMENTS",
     "MAINTENANCES",
     "REMINDERS",
     "DOCUMENTS",
     "OWNER_INFO",
     "group_payments",
     "derive_status",
     "unpaid_rent_groups",
     "compute_settlement",
     "changed_deduction_flags",
     "derive_deposit_status",
     "compute_indexed_rent",
     "format_euro",
     "compute_rollup",
     "default_reports_data",
     "load_reports_data",
     "LiveGroupedPayments",
     "TenantService",
     "PaymentService",
     "PropertyService",
]
