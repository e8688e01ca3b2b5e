# routers/tenants.py
"""
Tenant API routes.

CRUD over tenants, ID-card upload, and the deposit settlement workflow:
- GET  /api/tenants/{id}/settlement            candidates
- POST /api/tenants/{id}/settlement/preview    compute only
- POST /api/tenants/{id}/settlement            compute and commit
- GET  /api/tenants/{id}/settlement/statement  printable PDF
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from dependencies import get_blob_store, get_optional_blob_store, get_record_store, verify_token
from schemas import (
     SettlementCandidates,
     SettlementCommit,
     SettlementCommitResponse,
     SettlementResult,
     SettlementSelection,
     TenantCreate,
     TenantRecord,
     TenantUpdate,
)
from services import RecordStore, TenantService, TENANTS
from services.blob_store import blob_path, discard_blob
from services.document_renderer import render_document

router = APIRouter(prefix="/api/tenants", tags=["tenants"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[TenantRecord], summary="List tenants")
def list_tenants(store: RecordStore = Depends(get_record_store)):
     return store.fetch_all(TENANTS)


@router.post(
     "",
     response_model=TenantRecord,
     status_code=status.HTTP_201_CREATED,
     summary="Create a tenant",
)
def create_tenant(body: TenantCreate, store: RecordStore = Depends(get_record_store)):
     """
     Create a tenant.

     - **rent**: Monthly rent
     - **depositAmount**: Defaults to twice the rent when omitted
     - **propertyId**: Linked property; its address becomes the property name
     """
     return TenantService.create_tenant(store, body)


@router.get("/{tenant_id}", response_model=TenantRecord, summary="Get a tenant")
def get_tenant(tenant_id: str, store: RecordStore = Depends(get_record_store)):
     return store.get(TENANTS, tenant_id)


@router.put("/{tenant_id}", response_model=TenantRecord, summary="Update a tenant")
def update_tenant(tenant_id: str, body: TenantUpdate, store: RecordStore = Depends(get_record_store)):
     """Only the fields present in the body are written."""
     return TenantService.update_tenant(store, tenant_id, body.model_dump(exclude_unset=True))


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a tenant")
def delete_tenant(
     tenant_id: str,
     store: RecordStore = Depends(get_record_store),
     blob_store=Depends(get_optional_blob_store),
):
     tenant = store.get(TENANTS, tenant_id)
     store.delete(TENANTS, tenant_id)
     discard_blob(blob_store, tenant.id_card_path)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{tenant_id}/id-card", response_model=TenantRecord, summary="Upload an ID card")
async def upload_id_card(
     tenant_id: str,
     file: UploadFile = File(...),
     store: RecordStore = Depends(get_record_store),
     blob_store=Depends(get_blob_store),
):
     """Store the ID-card photo and replace any previous one."""
     tenant = store.get(TENANTS, tenant_id)
     data = await file.read()
     path = blob_path("id-cards", tenant_id, file.filename)
     url = blob_store.upload(path, data, file.content_type or "application/octet-stream")
     updated = store.update(TENANTS, tenant_id, {"id_card_url": url, "id_card_path": path})
     if tenant.id_card_path != path:
          discard_blob(blob_store, tenant.id_card_path)
     return updated


# ---------------------------------------------------------------------------
# Deposit settlement
# ---------------------------------------------------------------------------

@router.get(
     "/{tenant_id}/settlement",
     response_model=SettlementCandidates,
     summary="Deposit settlement candidates",
)
def get_settlement_candidates(tenant_id: str, store: RecordStore = Depends(get_record_store)):
     """
     Maintenance records linked to the tenant (pre-selected when already
     deducted) and the tenant's unpaid rent obligations.
     """
     return TenantService.settlement_candidates(store, tenant_id)


@router.post(
     "/{tenant_id}/settlement/preview",
     response_model=SettlementResult,
     summary="Preview a deposit settlement",
)
def preview_settlement(
     tenant_id: str,
     body: SettlementSelection,
     store: RecordStore = Depends(get_record_store),
):
     return TenantService.preview_settlement(store, tenant_id, body)


@router.post(
     "/{tenant_id}/settlement",
     response_model=SettlementCommitResponse,
     summary="Commit a deposit settlement",
)
def commit_settlement(
     tenant_id: str,
     body: SettlementCommit,
     store: RecordStore = Depends(get_record_store),
):
     """
     Persist the deposit status and the deduction flags.

     - **maintenanceIds**: Maintenance records to deduct
     - **rentGroupKeys**: Unpaid rent obligations to deduct
     - **depositStatus**: Optional; derived from the deductions when omitted
     - **expectedVersion**: Optional; 409 if the tenant changed since it was read
     """
     return TenantService.commit_settlement(store, tenant_id, body)


@router.get("/{tenant_id}/settlement/statement", summary="Deposit settlement statement (PDF)")
def settlement_statement(
     tenant_id: str,
     maintenance_ids: Optional[List[str]] = Query(None, alias="maintenanceIds"),
     rent_group_keys: Optional[List[str]] = Query(None, alias="rentGroupKeys"),
     store: RecordStore = Depends(get_record_store),
):
     """
     Render the statement for the given selection, or for the saved
     deduction flags when no selection is passed.
     """
     candidates = TenantService.settlement_candidates(store, tenant_id)
     selection = None
     if maintenance_ids is not None or rent_group_keys is not None:
          selection = SettlementSelection(
               maintenance_ids=maintenance_ids or [],
               rent_group_keys=rent_group_keys or [],
          )
     document = TenantService.build_statement(candidates, selection, TenantService.owner_info(store))
     return Response(
          content=render_document(document),
          media_type="application/pdf",
          headers={"Content-Disposition": f'inline; filename="decompte-{tenant_id}.pdf"'},
     )

