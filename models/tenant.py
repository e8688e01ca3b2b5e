# models/tenant.py
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, func
from .base import Base, generate_id


class Tenant(Base):
     """
     Tenant model - identity, lease terms and security deposit of an occupant.

     ``version`` is bumped by the record store on every update and backs the
     optional optimistic-concurrency check on deposit settlement.
     """

     id = Column(String(36), primary_key=True, default=generate_id)

     # Personal info
     first_name = Column(String(100), nullable=False)
     last_name = Column(String(100), nullable=False)
     email = Column(String(255), default="", nullable=False)
     phone = Column(String(50), default="", nullable=False)
     national_id = Column(String(100), default="", nullable=False)
     nationality = Column(String(100), default="", nullable=False)
     bank_account = Column(String(100), default="", nullable=False)

     # Property link (by id only; display name kept for when the property is gone)
     property_id = Column(String(36), nullable=True, index=True)
     property_name = Column(String(255), default="", nullable=False)

     # Lease terms
     lease_start = Column(Date, nullable=True)
     lease_duration = Column(Integer, default=12, nullable=False)  # months
     payment_due_day = Column(Integer, default=1, nullable=False)
     rent = Column(Numeric(12, 2, asdecimal=False), nullable=False)

     # Security deposit
     deposit_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
     deposit_status = Column(String(50), default="Non payé", nullable=False)

     status = Column(String(20), default="Actif", nullable=False)  # Actif, Inactif

     # ID verification (blob store)
     id_card_url = Column(String(500), nullable=True)
     id_card_path = Column(String(500), nullable=True)

     version = Column(Integer, default=1, nullable=False)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, onupdate=func.now(), nullable=True)

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.first_name} {self.last_name}')>"
