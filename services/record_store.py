# services/record_store.py
"""
Record Store - keyed collections with create/update/delete and change
subscriptions, backed by SQLAlchemy.

Every collection is described by its ORM model and three schemas:
- record schema: what reads return (typed, validated)
- fields schema: validates a full record before it is inserted
- patch schema: validates a partial update before it is applied

Subscribers registered with ``subscribe`` receive the full current list of
the collection immediately and again after every successful mutation.
Aggregations are never computed here; callers feed the lists to the pure
engines in this package.
"""
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from database import SessionLocal, get_session_context
from models import Tenant, Property, Payment, Maintenance, Reminder, Document, OwnerInfo, generate_id
from schemas import (
     TenantFields, TenantPatch, TenantRecord,
     PropertyFields, PropertyPatch, PropertyRecord,
     PaymentFields, PaymentUpdate, PaymentRecord,
     MaintenanceFields, MaintenancePatch, MaintenanceRecord,
     ReminderCreate, ReminderUpdate, ReminderRecord,
     DocumentFields, DocumentPatch, DocumentRecord,
     OwnerInfoFields, OwnerInfoUpdate, OwnerInfoRecord,
)
from .errors import (
     RecordNotFoundError,
     UnknownCollectionError,
     StoreError,
     ConcurrentUpdateError,
     InvalidRecordError,
)

logger = logging.getLogger(__name__)

TENANTS = "tenants"
PROPERTIES = "properties"
PAYMENTS = "payments"
MAINTENANCES = "maintenances"
REMINDERS = "reminders"
DOCUMENTS = "documents"
OWNER_INFO = "ownerInfo"


@dataclass(frozen=True)
class Collection:
     model: Any
     record: Type[BaseModel]
     fields: Type[BaseModel]
     patch: Type[BaseModel]


COLLECTIONS: Dict[str, Collection] = {
     TENANTS: Collection(Tenant, TenantRecord, TenantFields, TenantPatch),
     PROPERTIES: Collection(Property, PropertyRecord, PropertyFields, PropertyPatch),
     PAYMENTS: Collection(Payment, PaymentRecord, PaymentFields, PaymentUpdate),
     MAINTENANCES: Collection(Maintenance, MaintenanceRecord, MaintenanceFields, MaintenancePatch),
     REMINDERS: Collection(Reminder, ReminderRecord, ReminderCreate, ReminderUpdate),
     DOCUMENTS: Collection(Document, DocumentRecord, DocumentFields, DocumentPatch),
     OWNER_INFO: Collection(OwnerInfo, OwnerInfoRecord, OwnerInfoFields, OwnerInfoUpdate),
}

Listener = Callable[[List[BaseModel]], None]


class Subscription:
     """Handle returned by ``RecordStore.subscribe``; ``cancel`` detaches the listener."""

     def __init__(self, store: "RecordStore", collection: str, listener: Listener):
          self._store = store
          self.collection = collection
          self._listener = listener
          self.active = True

     def cancel(self) -> None:
          if self.active:
               self._store._remove_listener(self.collection, self._listener)
               self.active = False


class RecordStore:
     """Service class for all record store reads, writes and subscriptions."""

     def __init__(self, session_factory: sessionmaker = SessionLocal):
          self._session_factory = session_factory
          self._listeners: Dict[str, List[Listener]] = {}
          self._lock = threading.Lock()
          # Held from fetch to delivery so subscribers see snapshots in commit order
          self._delivery_lock = threading.RLock()

     # ------------------------------------------------------------------
     # Reads
     # ------------------------------------------------------------------

     def fetch_all(self, collection: str) -> List[BaseModel]:
          """Return every record of a collection as typed records."""
          entry = _collection(collection)
          with self._session(collection, "read") as db:
               rows = db.query(entry.model).all()
               return [entry.record.model_validate(row) for row in rows]

     def get(self, collection: str, record_id: str) -> BaseModel:
          """
          Return one record.

          Raises:
               RecordNotFoundError: If the id does not exist
          """
          entry = _collection(collection)
          with self._session(collection, "read") as db:
               row = db.get(entry.model, record_id)
               if row is None:
                    raise RecordNotFoundError(collection, record_id)
               return entry.record.model_validate(row)

     def find(self, collection: str, record_id: Optional[str]) -> Optional[BaseModel]:
          """Like ``get`` but returns None for a missing or empty id."""
          if not record_id:
               return None
          try:
               return self.get(collection, record_id)
          except RecordNotFoundError:
               return None

     # ------------------------------------------------------------------
     # Writes
     # ------------------------------------------------------------------

     def create(self, collection: str, fields: Dict[str, Any], record_id: Optional[str] = None) -> str:
          """
          Validate and insert a record.

          Args:
               collection: Collection name
               fields: Field values (snake_case or camelCase keys)
               record_id: Explicit id; a fresh one is generated when omitted

          Returns:
               The new record id

          Raises:
               pydantic.ValidationError: If fields do not satisfy the collection schema
          """
          entry = _collection(collection)
          data = entry.fields.model_validate(fields).model_dump()
          new_id = record_id or generate_id()
          with self._session(collection, "create") as db:
               db.add(entry.model(id=new_id, **data))
          logger.info("Created %s/%s", collection, new_id)
          self._notify(collection)
          return new_id

     def update(
          self,
          collection: str,
          record_id: str,
          fields: Dict[str, Any],
          expected_version: Optional[int] = None,
     ) -> BaseModel:
          """
          Apply a partial update. Only fields present in ``fields`` are written.

          Records with a ``version`` column get it incremented; when
          ``expected_version`` is given and differs from the stored version
          the update is rejected.

          Returns:
               The updated record

          Raises:
               RecordNotFoundError: If the id does not exist
               ConcurrentUpdateError: On version mismatch
               InvalidRecordError: If a required field is set to null
          """
          [record] = self.update_many([(collection, record_id, fields, expected_version)])
          return record

     def update_many(self, updates: List[Tuple[str, str, Dict[str, Any], Optional[int]]]) -> List[BaseModel]:
          """
          Apply several partial updates in one transaction.

          Args:
               updates: ``(collection, record_id, fields, expected_version)`` tuples,
                    applied in order

          Returns:
               The updated records, in the same order

          Raises:
               Same as ``update``. On any failure nothing is written and no
               subscriber is notified.
          """
          planned = []
          for collection, record_id, fields, expected_version in updates:
               entry = _collection(collection)
               changes = entry.patch.model_validate(fields).model_dump(exclude_unset=True)
               required = [key for key, value in changes.items() if value is None and not _nullable(entry.model, key)]
               if required:
                    raise InvalidRecordError(f"{collection}: {', '.join(sorted(required))} cannot be empty")
               planned.append((collection, entry, record_id, changes, expected_version))
          if not planned:
               return []

          touched = list(dict.fromkeys(collection for collection, *_ in planned))
          records = []
          with self._session(", ".join(touched), "update") as db:
               for collection, entry, record_id, changes, expected_version in planned:
                    row = db.get(entry.model, record_id)
                    if row is None:
                         raise RecordNotFoundError(collection, record_id)
                    versioned = hasattr(entry.model, "version")
                    if expected_version is not None and versioned and row.version != expected_version:
                         raise ConcurrentUpdateError(collection, record_id, expected_version, row.version)
                    for key, value in changes.items():
                         setattr(row, key, value)
                    if versioned:
                         row.version = (row.version or 0) + 1
                    db.flush()
                    records.append(entry.record.model_validate(row))
          for collection, _, record_id, changes, _ in planned:
               logger.info("Updated %s/%s fields=%s", collection, record_id, sorted(changes))
          for collection in touched:
               self._notify(collection)
          return records

     def delete(self, collection: str, record_id: str) -> None:
          """
          Delete a record.

          Raises:
               RecordNotFoundError: If the id does not exist
          """
          entry = _collection(collection)
          with self._session(collection, "delete") as db:
               row = db.get(entry.model, record_id)
               if row is None:
                    raise RecordNotFoundError(collection, record_id)
               db.delete(row)
          logger.info("Deleted %s/%s", collection, record_id)
          self._notify(collection)

     # ------------------------------------------------------------------
     # Subscriptions
     # ------------------------------------------------------------------

     def subscribe(self, collection: str, on_change: Listener) -> Subscription:
          """
          Deliver the current list to ``on_change`` now and after every mutation.

          Returns:
               Subscription: call ``cancel()`` to stop receiving updates
          """
          _collection(collection)
          with self._delivery_lock:
               on_change(self.fetch_all(collection))
               with self._lock:
                    self._listeners.setdefault(collection, []).append(on_change)
          return Subscription(self, collection, on_change)

     def _remove_listener(self, collection: str, listener: Listener) -> None:
          with self._lock:
               listeners = self._listeners.get(collection, [])
               if listener in listeners:
                    listeners.remove(listener)

     def _notify(self, collection: str) -> None:
          with self._delivery_lock:
               with self._lock:
                    listeners = list(self._listeners.get(collection, []))
               if not listeners:
                    return
               try:
                    records = self.fetch_all(collection)
               except StoreError:
                    logger.exception("Could not refresh %s subscribers", collection)
                    return
               for listener in listeners:
                    try:
                         listener(records)
                    except Exception:
                         # A failing subscriber must not undo or fail the write
                         logger.exception("Subscriber of %s raised", collection)

     # ------------------------------------------------------------------
     # Helpers
     # ------------------------------------------------------------------

     def _session(self, collection: str, action: str):
          return _guarded_session(self._session_factory, collection, action)


@contextmanager
def _guarded_session(factory: sessionmaker, collection: str, action: str):
     """Session context that turns SQLAlchemy failures into StoreError."""
     try:
          with get_session_context(factory) as db:
               yield db
     except SQLAlchemyError as exc:
          logger.error("Store %s on %s failed: %s", action, collection, exc)
          raise StoreError(f"Could not {action} {collection}") from exc


def _nullable(model, column: str) -> bool:
     col = model.__table__.columns.get(column)
     return col is None or col.nullable


def _collection(name: str) -> Collection:
     try:
          return COLLECTIONS[name]
     except KeyError:
          raise UnknownCollectionError(name) from None
