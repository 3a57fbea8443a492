"""
Domain models and value objects.

Contains Denomination, Stock helpers and DispenseResult.
"""

from cash_dispenser.core.domain.denomination import (
    SMALLEST_UNIT,
    Denomination,
    coerce_denomination,
    descending_by_value,
    is_valid_denomination_value,
)
from cash_dispenser.core.domain.dispense_result import DispenseResult
from cash_dispenser.core.domain.stock import (
    Stock,
    ordered_stock,
    sanitize_stock,
    stock_total_value,
)

__all__ = [
    # Denomination
    "SMALLEST_UNIT",
    "Denomination",
    "coerce_denomination",
    "descending_by_value",
    "is_valid_denomination_value",
    # Stock
    "Stock",
    "sanitize_stock",
    "ordered_stock",
    "stock_total_value",
    # Result
    "DispenseResult",
]
