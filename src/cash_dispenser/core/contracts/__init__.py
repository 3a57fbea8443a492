"""
Contract Validation Module

Валидация JSON контрактов на границе ядра с хостом.
"""

from .validators import (
    ContractValidator,
    DispenseResultValidator,
    SchemaLoader,
    StockConfigValidator,
    validate_dispense_result,
    validate_stock_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StockConfigValidator",
    "DispenseResultValidator",
    # Functions
    "validate_stock_config",
    "validate_dispense_result",
]
