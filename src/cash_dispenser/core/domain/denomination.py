"""
Denomination — номинал купюры

Immutable Pydantic модель (value object). Номинал — положительное целое,
кратное минимальной денежной единице (SMALLEST_UNIT = 10).

Два номинала равны тогда и только тогда, когда равны их значения.
Порядок выдачи (от крупного к мелкому) задаётся явным ключом сортировки
descending_by_value, а не встроенным порядком модели.
"""

from typing import Any, Final, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальная денежная единица: все суммы и номиналы кратны ей
SMALLEST_UNIT: Final[int] = 10


def is_valid_denomination_value(value: Any) -> bool:
    """
    Проверка, что значение допустимо как номинал.

    Args:
        value: Проверяемое значение

    Returns:
        True если value — int (не bool), > 0 и кратно SMALLEST_UNIT
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value > 0
        and value % SMALLEST_UNIT == 0
    )


# =============================================================================
# DENOMINATION MODEL
# =============================================================================


class Denomination(BaseModel):
    """
    Номинал купюры.

    Immutable модель (frozen=True): hashable, используется как ключ Stock.
    """

    value: int = Field(..., gt=0, strict=True, description="Номинал в минимальных единицах")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_multiple_of_unit(cls, v: int) -> int:
        """Номинал обязан быть кратен SMALLEST_UNIT."""
        if v % SMALLEST_UNIT != 0:
            raise ValueError(f"Invalid denomination {v}: not a multiple of {SMALLEST_UNIT}")
        return v

    @classmethod
    def of(cls, value: int) -> "Denomination":
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# ХЕЛПЕРЫ
# =============================================================================


def descending_by_value(denomination: Denomination) -> int:
    """
    Ключ сортировки для жадного отбора: крупный номинал первым.

    Args:
        denomination: Номинал

    Returns:
        Ключ для sorted() (отрицательное значение номинала)
    """
    return -denomination.value


def coerce_denomination(raw: Any) -> Optional[Denomination]:
    """
    Приведение сырого значения к Denomination без исключений.

    Принимает Denomination или int. Для None, неверного типа или
    недопустимого значения возвращает None (политика санитизации).

    Args:
        raw: Denomination, int или произвольное значение

    Returns:
        Denomination или None
    """
    if isinstance(raw, Denomination):
        return raw if is_valid_denomination_value(raw.value) else None
    if not isinstance(raw, int) or isinstance(raw, bool):
        return None
    try:
        return Denomination(value=raw)
    except ValidationError:
        return None
