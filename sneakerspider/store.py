"""In-memory sneaker store."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .models import Sneaker


class SneakerStore:
    """Ordered, append-only collection of scraped records.

    Populated once during startup and then sealed. Reads take no lock; that is
    only sound while nothing writes after ``seal()``, so a refresh feature would
    need a read-write lock or a snapshot swap.
    """

    def __init__(self, records: Optional[Iterable[Sneaker]] = None) -> None:
        self._records: List[Sneaker] = []
        self._sealed = False
        if records:
            self.extend(records)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def append(self, sneaker: Sneaker) -> None:
        if self._sealed:
            raise RuntimeError("SneakerStore is sealed; records can no longer be added")
        self._records.append(sneaker)

    def extend(self, sneakers: Iterable[Sneaker]) -> None:
        for sneaker in sneakers:
            self.append(sneaker)

    def seal(self) -> None:
        self._sealed = True

    def all(self) -> List[Sneaker]:
        return list(self._records)

    def get(self, sneaker_id: int) -> Optional[Sneaker]:
        """Return the first record with ``sneaker_id`` (ids repeat across groups)."""
        for sneaker in self._records:
            if sneaker.id == sneaker_id:
                return sneaker
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Sneaker]:
        return iter(self._records)
