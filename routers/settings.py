# routers/settings.py
"""
Settings API routes: the landlord details printed on receipts and statements.
"""
from fastapi import APIRouter, Depends

from dependencies import get_record_store, verify_token
from schemas import OwnerInfoRecord, OwnerInfoUpdate, OWNER_INFO_ID
from services import RecordStore, OWNER_INFO

router = APIRouter(prefix="/api/settings", tags=["settings"], dependencies=[Depends(verify_token)])


@router.get("/owner", response_model=OwnerInfoRecord, summary="Get owner details")
def get_owner_info(store: RecordStore = Depends(get_record_store)):
     """Empty details until they are saved once."""
     return store.find(OWNER_INFO, OWNER_INFO_ID) or OwnerInfoRecord()


@router.put("/owner", response_model=OwnerInfoRecord, summary="Save owner details")
def save_owner_info(body: OwnerInfoUpdate, store: RecordStore = Depends(get_record_store)):
     changes = body.model_dump(exclude_unset=True)
     if store.find(OWNER_INFO, OWNER_INFO_ID) is None:
          store.create(OWNER_INFO, body.model_dump(exclude_none=True), record_id=OWNER_INFO_ID)
          return store.get(OWNER_INFO, OWNER_INFO_ID)
     return store.update(OWNER_INFO, OWNER_INFO_ID, changes)
