"""
Stock Config — загрузка начального остатка купюр из конфигурации хоста

Формат (stock_config.json):
    {
        "schema_version": "1",
        "denominations": [{"value": 2000, "count": 10}, ...]
    }

В отличие от санитизации Stock при создании Inventory, конфигурация
проверяется строго: нарушение схемы — ошибка.
"""

import json
from pathlib import Path
from typing import Any, Dict

from cash_dispenser.core.contracts import validate_stock_config
from cash_dispenser.core.domain import Denomination, Stock


def _is_strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_stock_config(data: Dict[str, Any]) -> Stock:
    """
    Валидация и конверсия конфигурации в Stock.

    Args:
        data: Payload по схеме stock_config.json

    Returns:
        Stock (номинал → количество)

    Raises:
        ValidationError: Если данные не соответствуют схеме
        ValueError: Если номинал указан более одного раза или value/count
            не int (JSON Schema "integer" пропускает 100.0)
    """
    validate_stock_config(data)

    stock: Stock = {}
    for entry in data["denominations"]:
        for field in ("value", "count"):
            if not _is_strict_int(entry[field]):
                raise ValueError(
                    f"Stock config {field} must be an int, got {entry[field]!r}"
                )
        denomination = Denomination(value=entry["value"])
        if denomination in stock:
            raise ValueError(f"Duplicate denomination in stock config: {denomination}")
        stock[denomination] = entry["count"]
    return stock


def load_stock_config_file(path: str | Path) -> Stock:
    """
    Загрузка конфигурации из JSON файла (UTF-8).

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        ValidationError: Если данные не соответствуют схеме
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Stock config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return load_stock_config(data)
