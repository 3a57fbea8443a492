"""Dispenser — отбор купюр и потокобезопасный остаток банкомата."""

from .fair_lock import FairLock
from .inventory import Inventory
from .selector import (
    DenominationSelector,
    SelectionStrategy,
    select_denominations,
    validate_amount,
)

__all__ = [
    "DenominationSelector",
    "SelectionStrategy",
    "select_denominations",
    "validate_amount",
    "FairLock",
    "Inventory",
]
