"""
Stock — остаток купюр по номиналам

Stock — отображение Denomination → количество купюр (>= 0).
Отсутствие номинала эквивалентно нулевому количеству.

Санитизация (sanitize_stock) молча отбрасывает некорректные записи:
это политика очистки входных данных, а не ошибка валидации.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .denomination import Denomination, coerce_denomination, descending_by_value

logger = logging.getLogger(__name__)

Stock = Dict[Denomination, int]


def sanitize_stock(raw: Optional[Mapping[Any, Any]]) -> Stock:
    """
    Построение Stock из сырого отображения.

    Отбрасываются записи:
    - с None / недопустимым номиналом
    - с отрицательным или нецелым количеством

    Нулевые количества сохраняются. Ключи-int приводятся к Denomination,
    совпавшие после приведения ключи суммируются.

    Args:
        raw: Отображение номинал → количество (может быть None)

    Returns:
        Новый независимый Stock
    """
    stock: Stock = {}
    if not raw:
        return stock

    for key, count in raw.items():
        denomination = coerce_denomination(key)
        if denomination is None:
            logger.debug("Dropping stock entry with invalid denomination: %r", key)
            continue
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            logger.debug("Dropping stock entry %s with invalid count: %r", denomination, count)
            continue
        stock[denomination] = stock.get(denomination, 0) + count

    return stock


def ordered_stock(stock: Mapping[Denomination, int]) -> Stock:
    """Копия Stock, упорядоченная от крупного номинала к мелкому."""
    return {d: stock[d] for d in sorted(stock, key=descending_by_value)}


def stock_total_value(stock: Mapping[Denomination, int]) -> int:
    """Суммарная стоимость купюр в Stock (в минимальных единицах)."""
    return sum(d.value * count for d, count in stock.items())
