# models/maintenance.py
from sqlalchemy import Column, String, Text, Numeric, Date, Boolean, DateTime, func
from .base import Base, generate_id


class Maintenance(Base):
     """
     Maintenance model - work carried out on a property, optionally
     associated with a tenant. ``deducted_from_deposit`` is only written by
     deposit settlement.
     """

     id = Column(String(36), primary_key=True, default=generate_id)
     property_id = Column(String(36), nullable=False, index=True)
     property_name = Column(String(255), default="", nullable=False)
     tenant_id = Column(String(36), nullable=True, index=True)
     tenant_name = Column(String(255), nullable=True)

     date = Column(Date, nullable=False)
     description = Column(Text, nullable=False)
     cost = Column(Numeric(12, 2, asdecimal=False), nullable=False)
     deducted_from_deposit = Column(Boolean, default=False, nullable=False)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Maintenance(id={self.id}, property_id={self.property_id}, cost={self.cost})>"
