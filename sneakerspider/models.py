"""Shared dataclasses."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Sneaker:
    """One release entry scraped from the release calendar."""

    id: int = 0
    title: str = ""
    price: str = ""
    date: str = ""
    image: str = ""
    provider: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ReleaseSelectors:
    group: str = ".release-group__container"
    day: str = ".clg-releases__date__day"
    month: str = ".clg-releases__date__month"
    item: str = ".sneaker-release-item"
    title: str = ".sneaker-release__title"
    price: str = ".sneaker-release__option--price"
    image: str = ".sneaker-release__img-16x9 a img"
