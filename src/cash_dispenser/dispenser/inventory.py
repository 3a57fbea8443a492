"""
Inventory — авторитетный остаток купюр банкомата

Владеет Stock и сериализует все операции (withdraw / load / snapshot /
reset) одной справедливой блокировкой на экземпляр. Каждая публичная
операция является атомарной транзакцией над Stock.

withdraw():
1. Захват блокировки
2. Снапшот Stock → DenominationSelector.select()
3. Проверка: каждое количество в комбинации <= живого остатка
4. Списание и возврат комбинации

Частичного успеха нет: либо остаток списан и возвращён результат,
либо операция падает и Stock не изменён.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from cash_dispenser.core.config import load_stock_config
from cash_dispenser.core.domain import (
    DispenseResult,
    Stock,
    coerce_denomination,
    ordered_stock,
    sanitize_stock,
    stock_total_value,
)
from cash_dispenser.core.errors import (
    InfeasibleAmountError,
    InsufficientStockError,
    InvalidInputError,
)
from cash_dispenser.dispenser.fair_lock import FairLock
from cash_dispenser.dispenser.selector import DenominationSelector, SelectionStrategy

logger = logging.getLogger(__name__)


class Inventory:
    """Потокобезопасный остаток купюр с атомарной выдачей."""

    def __init__(
        self,
        initial_stock: Optional[Mapping[Any, Any]] = None,
        selector: Optional[SelectionStrategy] = None,
    ):
        """
        Args:
            initial_stock: Начальный остаток номинал → количество
                (некорректные записи молча отбрасываются)
            selector: Любой SelectionStrategy (по умолчанию жадный
                DenominationSelector)
        """
        self._stock: Stock = sanitize_stock(initial_stock)
        self._selector = selector or DenominationSelector()
        self._lock = FairLock()

    @classmethod
    def from_config(
        cls,
        data: Dict[str, Any],
        selector: Optional[SelectionStrategy] = None,
    ) -> "Inventory":
        """
        Создание из конфигурации хоста (stock_config.json).

        Raises:
            ValidationError: Если конфигурация не соответствует схеме
            ValueError: Если номинал повторяется или value/count не int
        """
        return cls(load_stock_config(data), selector=selector)

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def withdraw(self, amount: int) -> DispenseResult:
        """
        Атомарная выдача суммы минимальным числом купюр.

        Args:
            amount: Сумма (> 0, кратна 10)

        Returns:
            DispenseResult с выданными купюрами

        Raises:
            InvalidAmountError: Если сумма некорректна
            InfeasibleAmountError: Если сумма не собирается из остатка
            InsufficientStockError: Если комбинация превышает живой остаток
        """
        with self._lock:
            result = self._selector.select(amount, dict(self._stock))
            if not isinstance(result, DispenseResult):
                result = DispenseResult.build(amount, result)

            # Guard инварианта: под блокировкой снапшот не может устареть
            for denomination, count in result.items():
                available = self._stock.get(denomination, 0)
                if count > available:
                    logger.error(
                        "Insufficient notes for denomination %s: requested=%d, available=%d",
                        denomination, count, available,
                    )
                    raise InsufficientStockError(denomination, count, available)

            for denomination, count in result.items():
                self._stock[denomination] -= count

            logger.info("Dispensed amount %d with notes: %s", amount, result.as_value_map())
            return result

    def load(self, denomination: Any, count: int) -> None:
        """
        Загрузка купюр номинала (добавляется к существующему остатку).

        Args:
            denomination: Denomination или int
            count: Количество купюр (> 0)

        Raises:
            InvalidInputError: Если номинал отсутствует/некорректен или count <= 0
        """
        resolved = coerce_denomination(denomination)
        if (
            resolved is None
            or not isinstance(count, int)
            or isinstance(count, bool)
            or count <= 0
        ):
            logger.warning(
                "Invalid denomination or count: denomination=%r, count=%r",
                denomination, count,
            )
            raise InvalidInputError(denomination, count)

        with self._lock:
            self._stock[resolved] = self._stock.get(resolved, 0) + count
            logger.info("Loaded denomination %s with count %d", resolved, count)

    def snapshot(self) -> Stock:
        """Независимая копия остатка (от крупного номинала к мелкому)."""
        with self._lock:
            return ordered_stock(self._stock)

    def reset(self, new_stock: Optional[Mapping[Any, Any]]) -> None:
        """
        Полная замена остатка (тестовая подготовка / административная перезагрузка).

        Некорректные записи отбрасываются так же, как при создании.
        """
        sanitized = sanitize_stock(new_stock)
        with self._lock:
            self._stock = sanitized
            logger.info(
                "Inventory reset with denominations: %s",
                {d.value: c for d, c in sanitized.items()},
            )

    # =========================================================================
    # READ-ONLY ПРОВЕРКИ
    # =========================================================================

    def total_value(self) -> int:
        """Суммарная стоимость купюр в остатке."""
        with self._lock:
            return stock_total_value(self._stock)

    def can_dispense(self, amount: int) -> bool:
        """
        Пробный подбор без списания.

        Raises:
            InvalidAmountError: Если сумма некорректна
        """
        with self._lock:
            try:
                self._selector.select(amount, dict(self._stock))
            except InfeasibleAmountError:
                return False
            return True
