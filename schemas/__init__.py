# schemas/__init__.py
from .tenant import (
     TenantCreate,
     TenantFields,
     TenantUpdate,
     TenantPatch,
     TenantRecord,
     TenantStatusEnum,
     DepositStatusEnum,
)
from .property import PropertyCreate, PropertyFields, PropertyUpdate, PropertyPatch, PropertyRecord
from .payment import (
     PaymentCreate,
     PaymentFields,
     PaymentUpdate,
     PaymentRecord,
     PaymentTypeEnum,
     GroupedPayment,
     GroupStatusEnum,
     PAID_STATUS,
)
from .maintenance import (
     MaintenanceCreate,
     MaintenanceFields,
     MaintenanceUpdate,
     MaintenancePatch,
     MaintenanceRecord,
)
from .reminder import ReminderCreate, ReminderUpdate, ReminderRecord, ReminderStatusEnum
from .document import DocumentFields, DocumentPatch, DocumentRecord, PrintableDocument
from .owner_info import OwnerInfoFields, OwnerInfoUpdate, OwnerInfoRecord, OWNER_INFO_ID
from .settlement import (
     MaintenanceDeduction,
     RentDeduction,
     SettlementCandidates,
     SettlementSelection,
     SettlementCommit,
     SettlementResult,
     SettlementCommitResponse,
)
from .report import ReportsData, MonthlyData, Transaction, TransactionTypeEnum
from .indexation import IndexationRequest, IndexationResponse
from .analysis import MarketAnalysisRequest, MarketAnalysis, MarketAnalysisResult

__all__ = [
     "TenantCreate",
     "TenantFields",
     "TenantUpdate",
     "TenantPatch",
     "TenantRecord",
     "TenantStatusEnum",
     "DepositStatusEnum",
     "PropertyCreate",
     "PropertyFields",
     "PropertyUpdate",
     "PropertyPatch",
     "PropertyRecord",
     "PaymentCreate",
     "PaymentFields",
     "PaymentUpdate",
     "PaymentRecord",
     "PaymentTypeEnum",
     "GroupedPayment",
     "GroupStatusEnum",
     "PAID_STATUS",
     "MaintenanceCreate",
     "MaintenanceFields",
     "MaintenanceUpdate",
     "MaintenancePatch",
     "MaintenanceRecord",
     "ReminderCreate",
     "ReminderUpdate",
     "ReminderRecord",
     "ReminderStatusEnum",
     "DocumentFields",
     "DocumentPatch",
     "DocumentRecord",
     "PrintableDocument",
     "OwnerInfoFields",
     "OwnerInfoUpdate",
     "OwnerInfoRecord",
     "OWNER_INFO_ID",
     "MaintenanceDeduction",
     "RentDeduction",
     "SettlementCandidates",
     "SettlementSelection",
     "SettlementCommit",
     "SettlementResult",
     "SettlementCommitResponse",
     "ReportsData",
     "MonthlyData",
     "Transaction",
     "TransactionTypeEnum",
     "IndexationRequest",
     "IndexationResponse",
     "MarketAnalysisRequest",
     "MarketAnalysis",
     "MarketAnalysisResult",
]
