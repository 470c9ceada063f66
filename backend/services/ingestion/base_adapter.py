from abc import ABC, abstractmethod
from typing import Any


class BaseRowAdapter(ABC):
    def __init__(self, filename: str | None = None):
        self.filename = filename
        self.warnings: list[str] = []

    @abstractmethod
    def parse(self, content: str) -> list[dict[str, Any]]:
        """
        Must return the row table for `content`:
        [
            {"column": value, ...},
            ...
        ]
        Values are scalars only (str, int, float, bool or None).
        """
        ...
