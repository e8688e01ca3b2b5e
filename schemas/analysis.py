# schemas/analysis.py
"""
Pydantic schemas for the AI rental-market analysis.
"""
from typing import Optional

from pydantic import Field, ConfigDict

from .base import CamelModel


class MarketAnalysisRequest(CamelModel):
     property_type: str = Field(..., min_length=1, description="e.g. apartment, house")
     location: str = Field(..., min_length=1)
     bedrooms: int = Field(..., ge=0)
     bathrooms: int = Field(..., ge=0)
     square_footage: float = Field(..., gt=0)
     amenities: str = ""

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "propertyType": "apartment",
                    "location": "Ixelles, Bruxelles",
                    "bedrooms": 2,
                    "bathrooms": 1,
                    "squareFootage": 85,
                    "amenities": "balcon, ascenseur",
               }
          }
     )


class MarketAnalysis(CamelModel):
     estimated_rent: float
     market_trends: str
     comparable_properties: str


class MarketAnalysisResult(CamelModel):
     """Uniform outcome: ``data`` on success, ``error`` otherwise."""
     success: bool
     data: Optional[MarketAnalysis] = None
     error: Optional[str] = None
