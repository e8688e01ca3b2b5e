# services/indexation.py
"""
Rent indexation (Belgian health-index formula).

indexed rent = base rent * new index / start index
"""
import math

from .errors import IndexationError


def compute_indexed_rent(base_rent: float, start_index: float, new_index: float) -> float:
     """
     Apply the legal indexation formula. No rounding is applied.

     Raises:
          IndexationError: If any input is not a strictly positive finite number
     """
     for name, value in (("base_rent", base_rent), ("start_index", start_index), ("new_index", new_index)):
          if value is None or not math.isfinite(value) or value <= 0:
               raise IndexationError(f"{name} must be a positive number, got {value!r}")
     return base_rent * new_index / start_index


def format_euro(amount: float) -> str:
     """Two-decimal euro notation with a decimal comma, e.g. "1 200,00 €"."""
     whole = f"{amount:,.2f}"
     return whole.replace(",", " ").replace(".", ",") + " €"
