# schemas/report.py
"""
Pydantic schemas for the financial reporting view.
"""
import datetime
from enum import Enum
from typing import List

from .base import CamelModel


class TransactionTypeEnum(str, Enum):
     INCOME = "Revenu"
     EXPENSE = "Dépense"


class Transaction(CamelModel):
     id: str
     date: datetime.date
     description: str
     type: TransactionTypeEnum
     amount: float


class MonthlyData(CamelModel):
     key: str
     month: str
     income: float = 0.0
     expenses: float = 0.0


class ReportsData(CamelModel):
     total_revenue: float = 0.0
     total_expenses: float = 0.0
     net_profit: float = 0.0
     profit_margin: float = 0.0
     monthly_data: List[MonthlyData]
     transactions: List[Transaction]
