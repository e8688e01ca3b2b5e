# models/__init__.py
from .base import Base, generate_id
from .tenant import Tenant
from .property import Property
from .payment import Payment
from .maintenance import Maintenance
from .reminder import Reminder
from .document import Document
from .owner_info import OwnerInfo

__all__ = [
     "Base",
     "generate_id",
     "Tenant",
     "Property",
     "Payment",
     "Maintenance",
     "Reminder",
     "Document",
     "OwnerInfo",
]
