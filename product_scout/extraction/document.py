from __future__ import annotations

import copy
from typing import Iterator, List, Optional, Set, Union

from bs4 import BeautifulSoup, Tag

from ..errors import ParseError


class Document:
    """
    A parsed page plus the URL it was requested from.

    The tree itself is never mutated. Nodes hidden by the noise filter are
    tracked by identity in an exclusion set and skipped by every query.
    """

    def __init__(self, soup: BeautifulSoup, base_url: str) -> None:
        self.soup = soup
        self.base_url = base_url
        self._excluded: Set[int] = set()

    @classmethod
    def parse(cls, markup: Union[str, bytes], base_url: str) -> "Document":
        try:
            soup = BeautifulSoup(markup, "html.parser")
        except Exception as exc:
            raise ParseError(f"Could not parse HTML from {base_url}: {exc!r}") from exc
        return cls(soup, base_url)

    # ---- Exclusion ----------------------------------------------------------

    def exclude(self, node: Tag) -> None:
        """Hide ``node`` and its whole subtree from later queries."""
        self._excluded.add(id(node))
        for child in node.descendants:
            if isinstance(child, Tag):
                self._excluded.add(id(child))

    def is_excluded(self, node: Tag) -> bool:
        return id(node) in self._excluded

    def clear_exclusions(self) -> None:
        self._excluded.clear()

    @property
    def excluded_count(self) -> int:
        return len(self._excluded)

    # ---- Queries ------------------------------------------------------------

    def iselect(self, selector: str, within: Optional[Tag] = None) -> Iterator[Tag]:
        scope = self.soup if within is None else within
        for node in scope.select(selector):
            if not self.is_excluded(node):
                yield node

    def select(self, selector: str, within: Optional[Tag] = None) -> List[Tag]:
        return list(self.iselect(selector, within))

    def select_one(self, selector: str, within: Optional[Tag] = None) -> Optional[Tag]:
        return next(self.iselect(selector, within), None)

    # ---- Node access --------------------------------------------------------

    def text(self, node: Optional[Tag]) -> str:
        """Trimmed text of ``node``, without strings from excluded subtrees."""
        if node is None:
            return ""
        return self._visible(node).get_text().strip()

    @staticmethod
    def attr(node: Optional[Tag], name: str) -> Optional[str]:
        if node is None:
            return None
        value = node.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return value or None

    def inner_html(self, node: Tag) -> str:
        """Markup inside ``node``, leaving out excluded subtrees."""
        return self._visible(node).decode_contents()

    def _visible(self, node: Tag) -> Tag:
        """``node`` itself, or a detached copy with excluded subtrees cut out."""
        hidden = [d for d in node.descendants if isinstance(d, Tag) and self.is_excluded(d)]
        if not hidden:
            return node

        # copy.copy deep-copies a Tag, so both walks visit nodes in the same order.
        clone = copy.copy(node)
        doomed = [
            twin
            for original, twin in zip(node.descendants, clone.descendants)
            if isinstance(original, Tag)
            and self.is_excluded(original)
            and not self.is_excluded(original.parent)
        ]
        for twin in doomed:
            twin.extract()
        return clone
