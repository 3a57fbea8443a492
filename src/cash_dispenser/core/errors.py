"""
Dispense Errors — типизированные ошибки ядра банкомата

Иерархия:
- DispenseError: базовая ошибка ядра
- InvalidAmountError: сумма <= 0 или не кратна минимальной единице (10)
- InfeasibleAmountError: сумма не собирается из доступных купюр
- InsufficientStockError: предложенная комбинация превышает реальный остаток
- InvalidInputError: некорректные аргументы load()

InvalidAmountError и InvalidInputError: ошибки вызывающей стороны,
поэтому дополнительно наследуют ValueError.
InfeasibleAmountError и InsufficientStockError: доменные исходы, не дефекты.
"""

from typing import Any, Optional


class DispenseError(Exception):
    """Базовая ошибка ядра выдачи наличных."""


class InvalidAmountError(DispenseError, ValueError):
    """Сумма не положительна или не кратна минимальной единице."""

    def __init__(self, amount: Any, message: Optional[str] = None):
        self.amount = amount
        super().__init__(
            message or f"Amount must be a positive multiple of 10, got {amount!r}"
        )


class InfeasibleAmountError(DispenseError):
    """Ни одна комбинация доступных купюр не даёт ровно запрошенную сумму."""

    def __init__(self, amount: int, remaining: int):
        self.amount = amount
        self.remaining = remaining
        super().__init__(
            f"Cannot dispense {amount} with available denominations "
            f"(unresolved remainder {remaining})"
        )


class InsufficientStockError(DispenseError):
    """Комбинация запрашивает больше купюр номинала, чем есть в наличии."""

    def __init__(self, denomination: Any, requested: int, available: int):
        self.denomination = denomination
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient notes for denomination {denomination}: "
            f"requested={requested}, available={available}"
        )


class InvalidInputError(DispenseError, ValueError):
    """Некорректный номинал или количество при загрузке купюр."""

    def __init__(self, denomination: Any, count: Any):
        self.denomination = denomination
        self.count = count
        super().__init__(
            f"Invalid denomination or count: denomination={denomination!r}, count={count!r}"
        )
