# routers/reminders.py
"""
Rent reminder API routes.

POST /api/reminders/{id}/send emails the tenant and marks the reminder as sent.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from dependencies import get_mailer, get_record_store, verify_token
from schemas import ReminderCreate, ReminderRecord, ReminderStatusEnum, ReminderUpdate
from services import RecordStore, REMINDERS, TENANTS
from utils.email import EmailDeliveryError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reminders", tags=["reminders"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[ReminderRecord], summary="List reminders")
def list_reminders(store: RecordStore = Depends(get_record_store)):
     return sorted(store.fetch_all(REMINDERS), key=lambda r: r.due_date)


@router.post(
     "",
     response_model=ReminderRecord,
     status_code=status.HTTP_201_CREATED,
     summary="Create a reminder",
)
def create_reminder(body: ReminderCreate, store: RecordStore = Depends(get_record_store)):
     """Tenant and property display names default from the tenant record."""
     tenant = store.find(TENANTS, body.tenant_id)
     if tenant is None:
          raise HTTPException(status_code=422, detail="Tenant not found")
     fields = body.model_dump()
     fields["tenant"] = body.tenant or tenant.full_name
     fields["property"] = body.property or tenant.property_name
     reminder_id = store.create(REMINDERS, fields)
     return store.get(REMINDERS, reminder_id)


@router.get("/{reminder_id}", response_model=ReminderRecord, summary="Get a reminder")
def get_reminder(reminder_id: str, store: RecordStore = Depends(get_record_store)):
     return store.get(REMINDERS, reminder_id)


@router.put("/{reminder_id}", response_model=ReminderRecord, summary="Update a reminder")
def update_reminder(reminder_id: str, body: ReminderUpdate, store: RecordStore = Depends(get_record_store)):
     return store.update(REMINDERS, reminder_id, body.model_dump(exclude_unset=True))


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a reminder")
def delete_reminder(reminder_id: str, store: RecordStore = Depends(get_record_store)):
     store.delete(REMINDERS, reminder_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{reminder_id}/send", response_model=ReminderRecord, summary="Email a reminder to the tenant")
def send_reminder(
     reminder_id: str,
     store: RecordStore = Depends(get_record_store),
     mailer=Depends(get_mailer),
):
     """
     Send the reminder by email. On provider failure the reminder keeps its
     status and 502 is returned.
     """
     reminder = store.get(REMINDERS, reminder_id)
     tenant = store.find(TENANTS, reminder.tenant_id)
     if tenant is None:
          raise HTTPException(status_code=422, detail="Tenant not found")
     try:
          mailer(
               to_email=tenant.email,
               tenant_name=reminder.tenant or tenant.full_name,
               amount=reminder.amount,
               due_date=reminder.due_date.isoformat(),
               property_label=reminder.property,
          )
     except EmailDeliveryError as e:
          logger.error("Reminder %s not sent: %s", reminder_id, e)
          raise HTTPException(status_code=502, detail=f"Email not sent: {e}")
     return store.update(REMINDERS, reminder_id, {"status": ReminderStatusEnum.SENT})
