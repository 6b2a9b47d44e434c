"""Result writer interfaces and implementations."""

from __future__ import annotations

import csv
import json
from abc import ABC, abstractmethod
from dataclasses import fields
from pathlib import Path
from typing import List, Sequence

from .models import Sneaker


class ResultWriter(ABC):
    """Base interface for output adapters."""

    @abstractmethod
    def write(self, records: Sequence[Sneaker]) -> None:
        """Persist records to desired sink."""


class PrintWriter(ResultWriter):
    def write(self, records: Sequence[Sneaker]) -> None:
        from pprint import pprint

        pprint([record.to_dict() for record in records])


class JsonWriter(ResultWriter):
    def __init__(self, path: str = "sneakers.json") -> None:
        self.path = Path(path)

    def write(self, records: Sequence[Sneaker]) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump([record.to_dict() for record in records], handle, ensure_ascii=False, indent=2)


class CsvWriter(ResultWriter):
    def __init__(self, path: str = "sneakers.csv") -> None:
        self.path = Path(path)

    def write(self, records: Sequence[Sneaker]) -> None:
        if not records:
            return
        with self.path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=_columns())
            writer.writeheader()
            for record in records:
                writer.writerow(record.to_dict())


def _columns() -> List[str]:
    return [field.name for field in fields(Sneaker)]


def build_writer(mode: str, path: str | None = None) -> ResultWriter:
    if mode == "json":
        return JsonWriter(path or "sneakers.json")
    if mode == "csv":
        return CsvWriter(path or "sneakers.csv")
    return PrintWriter()
