"""
Per-field fallback chains. Each extractor returns ``None`` when nothing
matches; a miss never aborts the candidate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bs4 import Tag

from ..utils.urls import hostname_of, make_absolute_url
from .document import Document
from .rules import (
    BACKGROUND_IMAGE_SELECTOR,
    BACKGROUND_IMAGE_URL,
    IMAGE_ATTRIBUTES,
    PRICE_SELECTORS,
    TITLE_SELECTORS,
    union,
)

_TITLE_QUERY = union(TITLE_SELECTORS)
_PRICE_QUERY = union(PRICE_SELECTORS)


@dataclass(frozen=True)
class CandidateFields:
    title: Optional[str]
    price: Optional[str]
    image: Optional[str]
    link: Optional[str]


def extract_title(document: Document, node: Tag) -> Optional[str]:
    return document.text(document.select_one(_TITLE_QUERY, within=node)) or None


def extract_price(document: Document, node: Tag) -> Optional[str]:
    return document.text(document.select_one(_PRICE_QUERY, within=node)) or None


def find_image_source(document: Document, node: Tag) -> Optional[str]:
    """Raw image reference for a card, before URL normalization."""
    img = document.select_one("img", within=node)
    if img is not None:
        for name in IMAGE_ATTRIBUTES:
            value = document.attr(img, name)
            if value:
                return value
        # Lazy loaders use all sorts of names: data-lazy-src, srcset, ...
        for name in img.attrs:
            if "src" in name:
                value = document.attr(img, name)
                if value:
                    return value

    styled = document.select_one(BACKGROUND_IMAGE_SELECTOR, within=node)
    style = document.attr(styled, "style")
    if style:
        match = BACKGROUND_IMAGE_URL.search(style)
        if match and match.group(1):
            return match.group(1)
    return None


def extract_image(document: Document, node: Tag) -> Optional[str]:
    return make_absolute_url(find_image_source(document, node), document.base_url)


def extract_link(document: Document, node: Tag) -> Optional[str]:
    href = document.attr(document.select_one("a", within=node), "href")
    if not href:
        # closest() starts at the node itself, so a card that is an <a> links to itself.
        href = document.attr(node.css.closest("a"), "href")
    return make_absolute_url(href, document.base_url)


def extract_fields(document: Document, node: Tag) -> CandidateFields:
    return CandidateFields(
        title=extract_title(document, node),
        price=extract_price(document, node),
        image=extract_image(document, node),
        link=extract_link(document, node),
    )


def extract_page_title(document: Document) -> str:
    """<title> text, then og:site_name, then the request host."""
    title = "".join(node.get_text() for node in document.soup.select("title")).strip()
    if title:
        return title
    site_name = document.attr(
        document.soup.select_one('meta[property="og:site_name"]'), "content"
    )
    if site_name:
        return site_name
    return hostname_of(document.base_url)
