"""
Cash Dispenser — ядро банкомата: жадный отбор купюр и атомарный остаток.

Contains:
- core/        : domain models, errors, JSON contracts, stock config
- dispenser/   : DenominationSelector, FairLock, Inventory
"""

from cash_dispenser.core.domain import Denomination, DispenseResult, Stock
from cash_dispenser.core.errors import (
    DispenseError,
    InfeasibleAmountError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidInputError,
)
from cash_dispenser.dispenser import DenominationSelector, FairLock, Inventory

__all__ = [
    "Denomination",
    "DispenseResult",
    "Stock",
    "DispenseError",
    "InvalidAmountError",
    "InfeasibleAmountError",
    "InsufficientStockError",
    "InvalidInputError",
    "DenominationSelector",
    "FairLock",
    "Inventory",
]
