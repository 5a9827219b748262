from __future__ import annotations

from typing import Dict, List

from ..models import ExtractionResult, ProductCandidate


class ResultAssembler:
    """
    Collects accepted products in document order alongside a title-keyed view.

    A repeated title replaces the stored product but keeps the slot of its
    first occurrence.
    """

    def __init__(self) -> None:
        self._products: List[ProductCandidate] = []
        self._by_title: Dict[str, ProductCandidate] = {}

    def add(self, product: ProductCandidate) -> None:
        self._products.append(product)
        self._by_title[product.title] = product

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> List[ProductCandidate]:
        return list(self._products)

    @property
    def unique_products(self) -> List[ProductCandidate]:
        return list(self._by_title.values())

    def build(self, page_title: str) -> ExtractionResult:
        return ExtractionResult(
            page_title=page_title,
            products=self.products,
            unique_products=self.unique_products,
        )
