# routers/reports.py
"""
Financial reporting API.
"""
from datetime import date

from fastapi import APIRouter, Depends

from dependencies import get_record_store, verify_token
from schemas import ReportsData
from services import RecordStore, load_reports_data

router = APIRouter(prefix="/api/reports", tags=["reports"], dependencies=[Depends(verify_token)])


@router.get("", response_model=ReportsData, summary="Revenue, expenses and recent transactions")
def get_reports(store: RecordStore = Depends(get_record_store)):
     """
     Totals over all records, a six-month income/expense series ending with
     the current month, and the ten most recent transactions. A failed read
     yields zeroed figures instead of an error.
     """
     return load_reports_data(store, date.today())
