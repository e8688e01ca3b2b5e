# schemas/base.py
"""
Shared pydantic configuration.

Store records keep snake_case attribute names; the dashboard speaks the
camelCase field names of the original document store, so every schema
accepts both and serializes with the camelCase alias.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     """Base class for all record and API schemas."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
          use_enum_values=True,
          validate_default=True,
     )
