from __future__ import annotations

import logging
from typing import Iterable

from bs4 import BeautifulSoup, Tag

from .document import Document
from .rules import IGNORE_SELECTORS, union

logger = logging.getLogger(__name__)


class NoiseFilter:
    """
    Hides navigation, footers, carts, filters and similar chrome.

    ``apply`` marks every matching subtree as excluded on the document;
    ``within_noise`` re-checks a candidate's ancestors against the same
    selectors.
    """

    def __init__(self, selectors: Iterable[str] = IGNORE_SELECTORS) -> None:
        self.selectors = tuple(selectors)
        self.query = union(self.selectors)

    def apply(self, document: Document) -> int:
        """Exclude all noise subtrees. Returns the number of subtree roots hidden."""
        if not self.selectors:
            return 0
        roots = document.soup.select(self.query)
        for root in roots:
            document.exclude(root)
        logger.debug("Noise filter hid %s subtrees on %s", len(roots), document.base_url)
        return len(roots)

    def within_noise(self, node: Tag) -> bool:
        if not self.selectors:
            return False
        for parent in node.parents:
            if isinstance(parent, BeautifulSoup):
                break
            if parent.css.match(self.query):
                return True
        return False
