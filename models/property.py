# models/property.py
from sqlalchemy import Column, String, Numeric, DateTime, func
from .base import Base, generate_id


class Property(Base):
     """
     Property model - a rental unit with its base rent and itemized charges.
     ``rent`` holds the total monthly rent (base + charges).
     """

     id = Column(String(36), primary_key=True, default=generate_id)
     address = Column(String(255), nullable=False)

     # Pricing
     base_rent = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
     water_charges = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
     electricity_charges = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
     gas_charges = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
     common_charges = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
     rent = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)

     # Image (blob store)
     image_url = Column(String(500), nullable=True)
     image_path = Column(String(500), nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, onupdate=func.now(), nullable=True)

     def __repr__(self):
          return f"<Property(id={self.id}, address='{self.address}')>"
