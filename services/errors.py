# services/errors.py
"""
Domain exceptions raised by the service layer.

Routers translate these into HTTP responses; see main.py for the handlers.
"""


class RecordNotFoundError(LookupError):
     """A record id does not exist in its collection."""

     def __init__(self, collection: str, record_id: str):
          self.collection = collection
          self.record_id = record_id
          super().__init__(f"{collection} record '{record_id}' not found")


class UnknownCollectionError(KeyError):
     """A collection name the record store does not serve."""

     def __init__(self, collection: str):
          self.collection = collection
          super().__init__(collection)

     def __str__(self) -> str:
          return f"Unknown collection '{self.collection}'"


class StoreError(RuntimeError):
     """The backing store failed a read or write. Prior state is unchanged."""


class ConcurrentUpdateError(RuntimeError):
     """A record changed between read and write (version mismatch)."""

     def __init__(self, collection: str, record_id: str, expected: int, actual: int):
          self.expected = expected
          self.actual = actual
          super().__init__(
               f"{collection} record '{record_id}' was modified (expected version {expected}, found {actual})"
          )


class IndexationError(ValueError):
     """Indexation inputs were not all strictly positive finite numbers."""


class InvalidRecordError(ValueError):
     """A write would leave a record without a required value."""
