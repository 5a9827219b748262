from __future__ import annotations

from typing import Iterable, List

from bs4 import Tag

from .document import Document
from .rules import PRODUCT_SELECTORS, union


class SelectorCascade:
    """
    Finds product card candidates with one unioned query.

    Results are in document order and each node appears once, whichever
    selectors it satisfies.
    """

    def __init__(self, selectors: Iterable[str] = PRODUCT_SELECTORS) -> None:
        self.selectors = tuple(selectors)
        self.query = union(self.selectors)

    def candidates(self, document: Document) -> List[Tag]:
        if not self.selectors:
            return []
        return document.select(self.query)
