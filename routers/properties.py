# routers/properties.py
"""
Property API routes.

The total monthly rent (``rent``) is always computed from the base rent and
the itemized charges; clients never write it directly.
"""
from typing import List

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from dependencies import get_blob_store, get_optional_blob_store, get_record_store, verify_token
from schemas import PropertyCreate, PropertyRecord, PropertyUpdate
from services import PropertyService, RecordStore, PROPERTIES
from services.blob_store import blob_path, discard_blob

router = APIRouter(prefix="/api/properties", tags=["properties"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[PropertyRecord], summary="List properties")
def list_properties(store: RecordStore = Depends(get_record_store)):
     return store.fetch_all(PROPERTIES)


@router.post(
     "",
     response_model=PropertyRecord,
     status_code=status.HTTP_201_CREATED,
     summary="Create a property",
)
def create_property(body: PropertyCreate, store: RecordStore = Depends(get_record_store)):
     """
     Create a property.

     - **address**: Display address
     - **baseRent**: Rent excluding charges (``rent`` is accepted as an alias)
     - **waterCharges**, **electricityCharges**, **gasCharges**, **commonCharges**: Monthly charges
     """
     return PropertyService.create_property(store, body)


@router.get("/{property_id}", response_model=PropertyRecord, summary="Get a property")
def get_property(property_id: str, store: RecordStore = Depends(get_record_store)):
     return store.get(PROPERTIES, property_id)


@router.put("/{property_id}", response_model=PropertyRecord, summary="Update a property")
def update_property(property_id: str, body: PropertyUpdate, store: RecordStore = Depends(get_record_store)):
     return PropertyService.update_property(store, property_id, body)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a property")
def delete_property(
     property_id: str,
     store: RecordStore = Depends(get_record_store),
     blob_store=Depends(get_optional_blob_store),
):
     """Tenants and payments keep their stored property name."""
     prop = store.get(PROPERTIES, property_id)
     store.delete(PROPERTIES, property_id)
     discard_blob(blob_store, prop.image_path)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{property_id}/image", response_model=PropertyRecord, summary="Upload a property image")
async def upload_image(
     property_id: str,
     file: UploadFile = File(...),
     store: RecordStore = Depends(get_record_store),
     blob_store=Depends(get_blob_store),
):
     prop = store.get(PROPERTIES, property_id)
     data = await file.read()
     path = blob_path("properties", property_id, file.filename)
     url = blob_store.upload(path, data, file.content_type or "application/octet-stream")
     updated = PropertyService.set_image(store, property_id, url, path)
     if prop.image_path != path:
          discard_blob(blob_store, prop.image_path)
     return updated
