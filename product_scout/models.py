from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

UNTITLED = "Untitled Product"
NO_PRICE = "Price not found"


@dataclass(frozen=True)
class ProductCandidate:
    """A product card accepted from the page, with defaults applied."""

    title: str
    price: str
    image: Optional[str] = None
    link: Optional[str] = None
    html: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "price": self.price,
            "image": self.image,
            "link": self.link,
            "html": self.html,
        }


@dataclass
class ExtractionResult:
    page_title: str
    products: List[ProductCandidate] = field(default_factory=list)
    unique_products: List[ProductCandidate] = field(default_factory=list)

    def to_payload(self, unique: bool = False) -> Dict[str, Any]:
        """
        Shape the result the way the HTTP surface returns it.
        ``unique`` picks the title-deduplicated sequence over the full one.
        """
        products = self.unique_products if unique else self.products
        return {
            "websiteTitle": self.page_title,
            "products": [p.to_dict() for p in products],
            "total": len(products),
        }
