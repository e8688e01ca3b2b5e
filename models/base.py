# models/base.py
import re
import uuid

from sqlalchemy.orm import DeclarativeBase, declared_attr


def generate_id() -> str:
     """Opaque record id, as handed out by the document store."""
     return uuid.uuid4().hex


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: Maintenance -> maintenances, Property -> properties
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'
