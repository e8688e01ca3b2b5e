# models/reminder.py
from sqlalchemy import Column, String, Numeric, Date, DateTime, func
from .base import Base, generate_id


class Reminder(Base):
     """Reminder model - a rent reminder addressed to a tenant."""

     id = Column(String(36), primary_key=True, default=generate_id)
     tenant_id = Column(String(36), nullable=False, index=True)
     tenant = Column(String(255), default="", nullable=False)
     property = Column(String(255), default="", nullable=False)
     due_date = Column(Date, nullable=False)
     amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
     status = Column(String(20), default="En attente", nullable=False)  # Envoyé, En attente, Programmé

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Reminder(id={self.id}, tenant_id={self.tenant_id}, status='{self.status}')>"
