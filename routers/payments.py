# routers/payments.py
"""
Payment API routes.

Payments are individual payment events. ``/grouped`` folds them into
obligations (one per tenant, type and period) with their due and paid
totals and a settlement status. Payments are amended in place and never
deleted.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from dependencies import get_live_payments, get_record_store, verify_token
from schemas import GroupedPayment, OWNER_INFO_ID, PaymentCreate, PaymentRecord, PaymentUpdate
from services import LiveGroupedPayments, PaymentService, RecordStore, PAYMENTS, OWNER_INFO
from services.document_renderer import render_document
from services.payment_service import whatsapp_receipt_url

router = APIRouter(prefix="/api/payments", tags=["payments"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[PaymentRecord], summary="List payments")
def list_payments(
     tenant_id: Optional[str] = Query(None),
     store: RecordStore = Depends(get_record_store),
):
     payments = store.fetch_all(PAYMENTS)
     if tenant_id:
          payments = [p for p in payments if p.tenant_id == tenant_id]
     return sorted(payments, key=lambda p: p.date, reverse=True)


@router.get("/grouped", response_model=List[GroupedPayment], summary="Payments grouped by obligation")
def list_grouped_payments(
     tenant_id: Optional[str] = Query(None),
     live: LiveGroupedPayments = Depends(get_live_payments),
):
     """
     Obligations, newest period first.

     - **totalDue**: Amount due captured when the first payment was recorded
     - **totalPaid**: Sum of the payments with status "Payé"
     - **status**: "Payé", "Partiel" or "Non payé"
     """
     groups = live.groups()
     if tenant_id:
          groups = [g for g in groups if g.tenant_id == tenant_id]
     return groups


@router.post(
     "",
     response_model=PaymentRecord,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment",
)
def create_payment(body: PaymentCreate, store: RecordStore = Depends(get_record_store)):
     """
     Record a payment against a tenant.

     - **type**: "Loyer" or "Caution" (the period of a deposit is always "Caution")
     - **period**: Rent period, e.g. "Juillet 2024"
     """
     try:
          return PaymentService.record_payment(store, body)
     except ValueError as e:
          raise HTTPException(status_code=422, detail=str(e))


@router.get("/{payment_id}", response_model=PaymentRecord, summary="Get a payment")
def get_payment(payment_id: str, store: RecordStore = Depends(get_record_store)):
     return store.get(PAYMENTS, payment_id)


@router.put("/{payment_id}", response_model=PaymentRecord, summary="Amend a payment")
def update_payment(payment_id: str, body: PaymentUpdate, store: RecordStore = Depends(get_record_store)):
     """Date, amount, status and period can be amended; the due amount cannot."""
     return store.update(PAYMENTS, payment_id, body.model_dump(exclude_unset=True))


@router.get("/{payment_id}/receipt", summary="Printable receipt (PDF)")
def payment_receipt(payment_id: str, store: RecordStore = Depends(get_record_store)):
     payment = store.get(PAYMENTS, payment_id)
     document = PaymentService.build_receipt(payment, store.find(OWNER_INFO, OWNER_INFO_ID))
     return Response(
          content=render_document(document),
          media_type="application/pdf",
          headers={"Content-Disposition": f'inline; filename="recu-{payment_id}.pdf"'},
     )


@router.get("/{payment_id}/receipt/whatsapp", summary="WhatsApp link carrying the receipt")
def payment_receipt_whatsapp(payment_id: str, store: RecordStore = Depends(get_record_store)):
     payment = store.get(PAYMENTS, payment_id)
     if not payment.phone:
          raise HTTPException(status_code=400, detail="Tenant has no phone number")
     return {"url": whatsapp_receipt_url(payment)}
