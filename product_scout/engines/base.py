from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict
from abc import ABC, abstractmethod

from ..models import ExtractionResult


@dataclass
class ScrapeReport:
    url: str
    result: ExtractionResult

    def to_payload(self, unique: bool = False) -> Dict[str, Any]:
        return self.result.to_payload(unique=unique)


class ScrapeEngine(ABC):
    """
    Abstract engine interface. Implementations own fetching one page and
    handing it to the extractor.
    """
    @abstractmethod
    async def scrape(self, url: str) -> ScrapeReport:  # pragma: no cover - interface
        ...
