"""File-backed store of the line's operators."""

from __future__ import annotations

import os
from pathlib import Path

from .records import Operator

_SEPARATOR = ";"


class OperatorRepository:
    """Operators kept in memory and saved to a ``;``-separated text file."""

    def __init__(self, path: str | os.PathLike[str] = "operador.txt") -> None:
        self.path = Path(path)
        if not self.path.exists():
            self.path.write_text("", encoding="utf-8")
        self._operators: list[Operator] | None = [
            self._parse(line)
            for line in self.path.read_text(encoding="utf-8-sig").splitlines()
        ]

    @staticmethod
    def _parse(line: str) -> Operator:
        fields = line.split(_SEPARATOR)
        if len(fields) < 5:
            raise ValueError(f"malformed operator record: {line!r}")
        return Operator(int(fields[0]), fields[1], fields[2], fields[3], fields[4])

    @property
    def _items(self) -> list[Operator]:
        if self._operators is None:
            raise RuntimeError("operator repository is closed")
        return self._operators

    def _save(self) -> None:
        lines = [
            _SEPARATOR.join((str(op.id), op.name, op.role, op.shift, op.location))
            for op in self._items
        ]
        self.path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    def all(self) -> list[Operator]:
        """Every operator, in file order."""
        return self._items

    def add(self, operator: Operator) -> bool:
        """Add the operator unless its id is taken; return whether it was added."""
        if self.exists(operator.id):
            return False
        self._items.append(operator)
        self._save()
        return True

    def exists(self, operator_id: int) -> bool:
        """Whether an operator with this id is stored."""
        return self.get(operator_id) is not None

    def get(self, operator_id: int) -> Operator | None:
        """The operator with this id, or None."""
        return next((op for op in self._items if op.id == operator_id), None)

    def search(self, operator_id: int = 0, name: str | None = None) -> list[Operator]:
        """Operators matching the id (0 for any) and containing the name (empty for any)."""
        return [
            op
            for op in self._items
            if (operator_id == 0 or op.id == operator_id) and (not name or name in op.name)
        ]

    def modify(
        self, operator_id: int, name: str, role: str, shift: str, location: str
    ) -> bool:
        """Update the operator with this id; return whether it was found."""
        operator = self.get(operator_id)
        if operator is None:
            return False
        operator.name = name
        operator.role = role
        operator.shift = shift
        operator.location = location
        self._save()
        return True

    def remove(self, operator_id: int) -> bool:
        """Delete the operator with this id; return whether it was found."""
        operator = self.get(operator_id)
        if operator is None:
            return False
        self._items.remove(operator)
        self._save()
        return True

    def close(self) -> None:
        """Release the in-memory list; further use raises RuntimeError."""
        self._operators = None