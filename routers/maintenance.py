# routers/maintenance.py
"""
Maintenance API routes.

A maintenance record belongs to a property and may be associated with a
tenant. ``deductedFromDeposit`` is only written by deposit settlement.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from dependencies import get_record_store, verify_token
from schemas import MaintenanceCreate, MaintenanceRecord, MaintenanceUpdate
from services import RecordStore, MAINTENANCES, PROPERTIES, TENANTS

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"], dependencies=[Depends(verify_token)])


def _display_names(store: RecordStore, changes: dict) -> dict:
     """Resolve propertyName / tenantName for the ids present in ``changes``."""
     names = {}
     if changes.get("property_id"):
          prop = store.find(PROPERTIES, changes["property_id"])
          if prop is None:
               raise HTTPException(status_code=422, detail="Property not found")
          names["property_name"] = prop.address
     if "tenant_id" in changes:
          tenant = store.find(TENANTS, changes["tenant_id"])
          if changes["tenant_id"] and tenant is None:
               raise HTTPException(status_code=422, detail="Tenant not found")
          names["tenant_name"] = tenant.full_name if tenant else None
     return names


@router.get("", response_model=List[MaintenanceRecord], summary="List maintenance records")
def list_maintenance(
     property_id: Optional[str] = Query(None),
     tenant_id: Optional[str] = Query(None),
     store: RecordStore = Depends(get_record_store),
):
     records = store.fetch_all(MAINTENANCES)
     if property_id:
          records = [m for m in records if m.property_id == property_id]
     if tenant_id:
          records = [m for m in records if m.tenant_id == tenant_id]
     return sorted(records, key=lambda m: m.date, reverse=True)


@router.post(
     "",
     response_model=MaintenanceRecord,
     status_code=status.HTTP_201_CREATED,
     summary="Log maintenance work",
)
def create_maintenance(body: MaintenanceCreate, store: RecordStore = Depends(get_record_store)):
     """
     Log maintenance work on a property.

     - **propertyId**: Property the work was done on
     - **tenantId**: Optional tenant the cost may later be deducted from
     - **cost**: Cost of the work (>= 0)
     """
     fields = body.model_dump()
     fields.update(_display_names(store, fields))
     record_id = store.create(MAINTENANCES, fields)
     return store.get(MAINTENANCES, record_id)


@router.get("/{maintenance_id}", response_model=MaintenanceRecord, summary="Get a maintenance record")
def get_maintenance(maintenance_id: str, store: RecordStore = Depends(get_record_store)):
     return store.get(MAINTENANCES, maintenance_id)


@router.put("/{maintenance_id}", response_model=MaintenanceRecord, summary="Update a maintenance record")
def update_maintenance(
     maintenance_id: str,
     body: MaintenanceUpdate,
     store: RecordStore = Depends(get_record_store),
):
     changes = body.model_dump(exclude_unset=True)
     changes.update(_display_names(store, changes))
     return store.update(MAINTENANCES, maintenance_id, changes)


@router.delete("/{maintenance_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a maintenance record")
def delete_maintenance(maintenance_id: str, store: RecordStore = Depends(get_record_store)):
     store.delete(MAINTENANCES, maintenance_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)
