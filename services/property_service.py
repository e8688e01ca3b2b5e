# services/property_service.py
"""
Property Service - rent composition and property writes.
"""
from typing import Optional

from schemas import PropertyCreate, PropertyRecord, PropertyUpdate
from .record_store import RecordStore, PROPERTIES

CHARGE_FIELDS = ("water_charges", "electricity_charges", "gas_charges", "common_charges")


def total_monthly_rent(base_rent: float, *charges: float) -> float:
     """Total monthly rent: base rent plus every itemized charge."""
     return round(base_rent + sum(c or 0 for c in charges), 2)


class PropertyService:
     """Service class for property business rules."""

     @staticmethod
     def create_property(store: RecordStore, data: PropertyCreate) -> PropertyRecord:
          """
          Create a property, deriving the base rent for clients that only send
          ``rent`` and computing the total monthly rent.
          """
          fields = data.model_dump(exclude={"rent"})
          base = data.base_rent if data.base_rent is not None else (data.rent or 0.0)
          fields["base_rent"] = base
          fields["rent"] = total_monthly_rent(base, *(fields[name] for name in CHARGE_FIELDS))
          property_id = store.create(PROPERTIES, fields)
          return store.get(PROPERTIES, property_id)

     @staticmethod
     def update_property(store: RecordStore, property_id: str, data: PropertyUpdate) -> PropertyRecord:
          """Apply an edit and recompute the total rent from the merged values."""
          current = store.get(PROPERTIES, property_id)
          changes = data.model_dump(exclude_unset=True)
          merged = current.model_copy(update=changes)
          changes["rent"] = total_monthly_rent(
               merged.base_rent, *(getattr(merged, name) for name in CHARGE_FIELDS)
          )
          return store.update(PROPERTIES, property_id, changes)

     @staticmethod
     def set_image(store: RecordStore, property_id: str, url: Optional[str], path: Optional[str]) -> PropertyRecord:
          return store.update(PROPERTIES, property_id, {"image_url": url, "image_path": path})
