"""
DenominationSelector — жадный отбор купюр с минимальным числом банкнот

Чистая функция над снапшотом остатка:
1. Номиналы сортируются от крупного к мелкому (descending_by_value)
2. Для каждого номинала: take = min(remaining // value, available)
3. remaining == 0 → комбинация найдена, иначе сумма невыполнима

Ограничение: жадный алгоритм оптимален только для канонических систем
номиналов (каждый номинал кратен следующему меньшему, например
2000/500/100/50/10). Для произвольных наборов он может не найти решение
или выдать не минимальное число купюр; точный (DP) решатель намеренно
не используется, чтобы не менять наблюдаемые результаты.

Селектор не хранит состояния и не изменяет входной снапшот, поэтому
безопасен для параллельных вызовов на независимых входах.
"""

import logging
from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from cash_dispenser.core.domain import (
    SMALLEST_UNIT,
    Denomination,
    DispenseResult,
    descending_by_value,
    is_valid_denomination_value,
)
from cash_dispenser.core.errors import InfeasibleAmountError, InvalidAmountError

logger = logging.getLogger(__name__)


def validate_amount(amount: Any) -> int:
    """
    Проверка запрошенной суммы.

    Args:
        amount: Сумма в минимальных единицах

    Returns:
        amount без изменений

    Raises:
        InvalidAmountError: Если amount не int, <= 0 или не кратна SMALLEST_UNIT
    """
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidAmountError(amount, f"Amount must be an integer, got {amount!r}")
    if amount <= 0 or amount % SMALLEST_UNIT != 0:
        raise InvalidAmountError(amount)
    return amount


@runtime_checkable
class SelectionStrategy(Protocol):
    """Любой объект с select(amount, available_counts) -> DispenseResult."""

    def select(
        self,
        amount: int,
        available_counts: Mapping[Denomination, int],
    ) -> DispenseResult: ...


class DenominationSelector:
    """Жадный селектор номиналов (stateless)."""

    def select(
        self,
        amount: int,
        available_counts: Mapping[Denomination, int],
    ) -> DispenseResult:
        """
        Подбор комбинации купюр на сумму amount.

        Args:
            amount: Запрошенная сумма (> 0, кратна 10)
            available_counts: Снапшот номинал → доступное количество

        Returns:
            DispenseResult с купюрами от крупных к мелким

        Raises:
            InvalidAmountError: Если сумма некорректна
            InfeasibleAmountError: Если сумма не собирается из доступных купюр
        """
        try:
            validate_amount(amount)
        except InvalidAmountError:
            logger.warning("Invalid amount requested: %r", amount)
            raise

        # Некорректные номиналы (в обход инварианта модели) молча пропускаются
        candidates = [
            d for d in available_counts
            if is_valid_denomination_value(d.value) and available_counts[d] > 0
        ]

        notes: Dict[Denomination, int] = {}
        remaining = amount
        for denomination in sorted(candidates, key=descending_by_value):
            take = min(remaining // denomination.value, available_counts[denomination])
            if take > 0:
                notes[denomination] = take
                remaining -= take * denomination.value

        if remaining != 0:
            logger.warning(
                "Cannot dispense amount %d with available denominations: %s",
                amount,
                {d.value: c for d, c in available_counts.items()},
            )
            raise InfeasibleAmountError(amount, remaining)

        result = DispenseResult.build(amount, notes)
        logger.debug("Selected notes for amount %d: %s", amount, result.as_value_map())
        return result


_DEFAULT_SELECTOR = DenominationSelector()


def select_denominations(
    amount: int,
    available_counts: Mapping[Denomination, int],
) -> DispenseResult:
    """Жадный отбор купюр селектором по умолчанию."""
    return _DEFAULT_SELECTOR.select(amount, available_counts)
