# services/live_view.py
"""
Live grouped-payments view.

Subscribes to payments, tenants and properties and recomputes the grouping
from scratch whenever any of them changes. The grouping itself stays a pure
function; this class only holds the latest inputs and result.
"""
import logging
import threading
from typing import List

from schemas import GroupedPayment
from .payment_grouping import group_payments
from .record_store import RecordStore, PAYMENTS, TENANTS, PROPERTIES

logger = logging.getLogger(__name__)


class LiveGroupedPayments:

     def __init__(self, store: RecordStore):
          self._lock = threading.Lock()
          self._inputs = {PAYMENTS: [], TENANTS: [], PROPERTIES: []}
          self._groups: List[GroupedPayment] = []
          self._ready = False
          self._subscriptions = [
               store.subscribe(name, self._listener(name))
               for name in (TENANTS, PROPERTIES, PAYMENTS)
          ]
          with self._lock:
               self._ready = True
               self._recompute()

     def _listener(self, name: str):
          def on_change(records):
               with self._lock:
                    self._inputs[name] = records
                    if self._ready:
                         self._recompute()
          return on_change

     def _recompute(self) -> None:
          """Regroup the latest inputs. Callers hold ``_lock`` so results publish in input order."""
          payments = self._inputs[PAYMENTS]
          groups = group_payments(payments, self._inputs[TENANTS], self._inputs[PROPERTIES])
          self._groups = groups
          logger.debug("Regrouped %d payments into %d obligations", len(payments), len(groups))

     def groups(self) -> List[GroupedPayment]:
          with self._lock:
               return list(self._groups)

     def close(self) -> None:
          for subscription in self._subscriptions:
               subscription.cancel()
