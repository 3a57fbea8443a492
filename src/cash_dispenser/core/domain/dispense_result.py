"""
DispenseResult — результат одной выдачи наличных

Отображение Denomination → положительное количество купюр.
Создаётся заново на каждый запрос, не хранится.

ИНВАРИАНТЫ:
1. Все количества > 0
2. sum(denomination.value * count) == amount
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple

from .denomination import Denomination, descending_by_value


@dataclass(frozen=True, eq=False)
class DispenseResult:
    """Купюры к выдаче для одного запроса."""

    amount: int
    notes: Mapping[Denomination, int]

    def __post_init__(self) -> None:
        # Read-only копия: инвариант суммы не нарушается после создания
        object.__setattr__(self, "notes", MappingProxyType(dict(self.notes)))
        for denomination, count in self.notes.items():
            if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
                raise ValueError(
                    f"Dispensed count for {denomination} must be a positive int, got {count!r}"
                )
        total = sum(d.value * count for d, count in self.notes.items())
        if total != self.amount:
            raise ValueError(
                f"Dispensed notes sum to {total}, expected {self.amount}"
            )

    @classmethod
    def build(cls, amount: int, notes: Mapping[Denomination, int]) -> "DispenseResult":
        """
        Создание результата с каноническим порядком купюр (крупные первыми).

        Args:
            amount: Запрошенная сумма
            notes: Номинал → количество

        Returns:
            DispenseResult

        Raises:
            ValueError: Если нарушены инварианты
        """
        ordered = {d: notes[d] for d in sorted(notes, key=descending_by_value)}
        return cls(amount=amount, notes=ordered)

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    def note_count(self) -> int:
        """Общее число выдаваемых купюр."""
        return sum(self.notes.values())

    def total(self) -> int:
        return sum(d.value * count for d, count in self.notes.items())

    def as_value_map(self) -> Dict[int, int]:
        """Представление для хоста: номинал (int) → количество."""
        return {d.value: count for d, count in self.notes.items()}

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-совместимый payload по схеме dispense_result.json.

        Returns:
            dict с полями amount, notes, note_count
        """
        return {
            "amount": self.amount,
            "notes": [
                {"denomination": d.value, "count": count}
                for d, count in self.notes.items()
            ],
            "note_count": self.note_count(),
        }

    # -------------------------------------------------------------------------
    # Mapping-протокол (read-only)
    # -------------------------------------------------------------------------

    def __getitem__(self, denomination: Denomination) -> int:
        return self.notes[denomination]

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __contains__(self, denomination: object) -> bool:
        return denomination in self.notes

    def items(self) -> Iterator[Tuple[Denomination, int]]:
        return iter(self.notes.items())

    def get(self, denomination: Denomination, default: int = 0) -> int:
        return self.notes.get(denomination, default)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DispenseResult):
            return self.amount == other.amount and dict(self.notes) == dict(other.notes)
        if isinstance(other, Mapping):
            return dict(self.notes) == dict(other)
        return NotImplemented
