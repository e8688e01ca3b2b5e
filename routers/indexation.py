# routers/indexation.py
"""
Rent indexation calculator.
"""
from fastapi import APIRouter, Depends

from dependencies import verify_token
from schemas import IndexationRequest, IndexationResponse
from services import compute_indexed_rent, format_euro

router = APIRouter(prefix="/api/indexation", tags=["indexation"], dependencies=[Depends(verify_token)])


@router.post("", response_model=IndexationResponse, summary="Compute an indexed rent")
def calculate_indexed_rent(body: IndexationRequest):
     """
     indexed rent = base rent * new index / start index

     - **baseRent**: Rent excluding charges
     - **startIndex**: Health index of the month before the lease was signed
     - **newIndex**: Health index of the month before the lease anniversary
     """
     indexed = compute_indexed_rent(body.base_rent, body.start_index, body.new_index)
     return IndexationResponse(indexed_rent=indexed, formatted=format_euro(indexed))
