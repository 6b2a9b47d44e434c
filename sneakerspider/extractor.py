"""Release calendar extraction."""

from __future__ import annotations

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .config import settings
from .models import ReleaseSelectors, Sneaker
from .store import SneakerStore


class ReleaseExtractor:
    """Turn a release calendar parse tree into ``Sneaker`` records.

    The page is walked in two scopes: every release group carries a day and a
    month, and every item inside a group becomes one record dated with them.
    Ids count items inside the current group, so they restart at 1 for every
    group and repeat across groups.
    """

    def __init__(
        self,
        selectors: Optional[ReleaseSelectors] = None,
        provider: Optional[str] = None,
        release_year: Optional[int] = None,
    ) -> None:
        self.selectors = selectors or ReleaseSelectors()
        self.provider = provider if provider is not None else settings.provider
        self.release_year = release_year if release_year is not None else settings.release_year

    def extract(self, document: Union[BeautifulSoup, Tag, str]) -> List[Sneaker]:
        if isinstance(document, str):
            document = BeautifulSoup(document, "lxml")

        records: List[Sneaker] = []
        groups = document.select(self.selectors.group)
        for group in groups:
            day = self._text(group, self.selectors.day)
            month = self._text(group, self.selectors.month)
            date = f"{day}/{month}/{self.release_year}"
            for index, item in enumerate(group.select(self.selectors.item)):
                records.append(self._build_record(item, index + 1, date))

        print(f"[Extractor] extracted {len(records)} sneakers from {len(groups)} release groups")
        return records

    def populate(self, document: Union[BeautifulSoup, Tag, str], store: SneakerStore) -> List[Sneaker]:
        records = self.extract(document)
        store.extend(records)
        return records

    def _build_record(self, item: Tag, sneaker_id: int, date: str) -> Sneaker:
        return Sneaker(
            id=sneaker_id,
            title=self._text(item, self.selectors.title),
            price=self._text(item, self.selectors.price).strip(),
            date=date,
            image=self._attr(item, self.selectors.image, "src"),
            provider=self.provider,
        )

    @staticmethod
    def _text(node: Tag, selector: str) -> str:
        # Text of every match, concatenated; no match gives "".
        return "".join(match.get_text() for match in node.select(selector))

    @staticmethod
    def _attr(node: Tag, selector: str, attr: str) -> str:
        match = node.select_one(selector)
        if match is None:
            return ""
        value = match.get(attr, "")
        if isinstance(value, list):
            return " ".join(value)
        return value
