# models/payment.py
"""
Payment model - one payment event recorded against a tenant.

Tenant name, contact details, property label and ``rent_due`` are snapshots
taken when the payment is recorded; they are not refreshed when the tenant
or the rent changes later. ``tenant_id`` carries no foreign key: payments
outlive the tenants they reference.
"""
from sqlalchemy import Column, String, Numeric, Date, DateTime, func
from .base import Base, generate_id


class Payment(Base):

     id = Column(String(36), primary_key=True, default=generate_id)
     tenant_id = Column(String(36), nullable=False, index=True)

     # Snapshots
     tenant_first_name = Column(String(100), default="", nullable=False)
     tenant_last_name = Column(String(100), default="", nullable=False)
     phone = Column(String(50), default="", nullable=False)
     email = Column(String(255), default="", nullable=False)
     property = Column(String(255), default="", nullable=False)
     rent_due = Column(Numeric(12, 2, asdecimal=False), default=0, nullable=False)

     # Payment details
     date = Column(Date, nullable=False, index=True)
     amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
     status = Column(String(50), nullable=False)  # "Payé" or e.g. "En retard"
     period = Column(String(100), default="", nullable=False)  # "Juillet 2024" or "Caution"
     type = Column(String(20), nullable=False)  # Loyer, Caution

     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, onupdate=func.now(), nullable=True)

     def __repr__(self):
          return f"<Payment(id={self.id}, tenant_id={self.tenant_id}, amount={self.amount}, period='{self.period}')>"
