# schemas/property.py
"""
Pydantic schemas for rental properties.

A property carries a base rent and itemized monthly charges; ``rent`` is
the total monthly rent (base + charges) and is computed server-side.
"""
from typing import Optional

from pydantic import Field, ConfigDict

from .base import CamelModel


class PropertyCreate(CamelModel):
     """Schema for creating a property.

     Older clients send only ``rent``; it is then taken as the base rent.
     """
     address: str = Field(..., min_length=1, max_length=255)
     base_rent: Optional[float] = Field(None, ge=0)
     rent: Optional[float] = Field(None, ge=0)
     water_charges: float = Field(0, ge=0)
     electricity_charges: float = Field(0, ge=0)
     gas_charges: float = Field(0, ge=0)
     common_charges: float = Field(0, ge=0)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "address": "Appt 101, Rue de la Loi 1, 1000 Bruxelles",
                    "baseRent": 1100.00,
                    "waterCharges": 30.00,
                    "commonCharges": 70.00,
               }
          }
     )


class PropertyFields(CamelModel):
     """Full writable field set stored for a property."""
     address: str = Field(..., min_length=1, max_length=255)
     base_rent: float = Field(..., ge=0)
     water_charges: float = Field(0, ge=0)
     electricity_charges: float = Field(0, ge=0)
     gas_charges: float = Field(0, ge=0)
     common_charges: float = Field(0, ge=0)
     rent: float = Field(..., ge=0)
     image_url: Optional[str] = None
     image_path: Optional[str] = None


class PropertyUpdate(CamelModel):
     """Schema for editing a property."""
     address: Optional[str] = Field(None, min_length=1, max_length=255)
     base_rent: Optional[float] = Field(None, ge=0)
     water_charges: Optional[float] = Field(None, ge=0)
     electricity_charges: Optional[float] = Field(None, ge=0)
     gas_charges: Optional[float] = Field(None, ge=0)
     common_charges: Optional[float] = Field(None, ge=0)


class PropertyPatch(PropertyUpdate):
     rent: Optional[float] = Field(None, ge=0)
     image_url: Optional[str] = None
     image_path: Optional[str] = None


class PropertyRecord(CamelModel):
     """Property as read from the record store."""
     id: str
     address: str
     base_rent: float = 0.0
     water_charges: float = 0.0
     electricity_charges: float = 0.0
     gas_charges: float = 0.0
     common_charges: float = 0.0
     rent: float = 0.0
     image_url: Optional[str] = None
     image_path: Optional[str] = None
