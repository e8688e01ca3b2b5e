# schemas/indexation.py
"""
Pydantic schemas for the rent indexation calculator.
"""
from pydantic import Field, ConfigDict

from .base import CamelModel


class IndexationRequest(CamelModel):
     base_rent: float = Field(..., gt=0, description="Base rent excluding charges")
     start_index: float = Field(..., gt=0, description="Health index of the month before signature")
     new_index: float = Field(..., gt=0, description="Health index of the month before the anniversary")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {"baseRent": 800.00, "startIndex": 110.50, "newIndex": 112.34}
          }
     )


class IndexationResponse(CamelModel):
     indexed_rent: float
     formatted: str
