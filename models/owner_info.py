# models/owner_info.py
from sqlalchemy import Column, String, DateTime, func
from .base import Base


class OwnerInfo(Base):
     """
     Landlord profile - a single row keyed "owner".
     """
     __tablename__ = "owner_info"

     id = Column(String(36), primary_key=True)
     name = Column(String(255), default="", nullable=False)
     address = Column(String(255), default="", nullable=False)
     phone = Column(String(50), nullable=True)
     email = Column(String(255), nullable=True)
     bank_account = Column(String(100), nullable=True)
     company_number = Column(String(100), nullable=True)

     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     def __repr__(self):
          return f"<OwnerInfo(name='{self.name}')>"
