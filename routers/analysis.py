# routers/analysis.py
"""
AI rental-market analysis API.
"""
from fastapi import APIRouter, Depends

from dependencies import get_analysis_client, verify_token
from schemas import MarketAnalysisRequest, MarketAnalysisResult
from services.market_analysis import analyze_rental_market

router = APIRouter(prefix="/api/analysis", tags=["analysis"], dependencies=[Depends(verify_token)])


@router.post("", response_model=MarketAnalysisResult, summary="Estimate market rent for a property")
def analyze_market(body: MarketAnalysisRequest, client=Depends(get_analysis_client)):
     """
     Always answers 200: ``{success: true, data}`` or ``{success: false, error}``.
     """
     return analyze_rental_market(body, client=client)
