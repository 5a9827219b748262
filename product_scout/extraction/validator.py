from __future__ import annotations

from typing import Optional

from ..models import NO_PRICE, UNTITLED, ProductCandidate
from .fields import CandidateFields
from .rules import DENYLIST_WORDS, MAX_TITLE_LENGTH, PRODUCT_COUNT_PATTERN


def rejection_reason(title: Optional[str], price: Optional[str]) -> Optional[str]:
    """Why a candidate is not a product, or None when it is acceptable."""
    if not title and not price:
        return "empty"
    if title:
        lowered = title.lower()
        for word in DENYLIST_WORDS:
            if word in lowered:
                return f"denylisted word {word!r}"
        if PRODUCT_COUNT_PATTERN.match(title):
            return "product count"
        if len(title) >= MAX_TITLE_LENGTH:
            return "title too long"
    return None


def is_acceptable(title: Optional[str], price: Optional[str]) -> bool:
    return rejection_reason(title, price) is None


def materialize(fields: CandidateFields, html: str = "") -> ProductCandidate:
    return ProductCandidate(
        title=fields.title or UNTITLED,
        price=fields.price or NO_PRICE,
        image=fields.image,
        link=fields.link,
        html=html,
    )
