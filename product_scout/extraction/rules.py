"""
Static extraction rules shared by every scrape.

The product selectors are deliberately broad; the validator weeds out the
false positives they let through.
"""

from __future__ import annotations

import re

PRODUCT_SELECTORS = (
    'div[class*="product"]',
    'div[class*="item"]',
    'article[class*="product"]',
    ".product-item",
    ".product-card",
    ".product-box",
    "[data-product]",
    'li[class*="product"]',
    ".grid-item",
    ".collection-item",
    '[class*="productCard"]',
    '[class*="product-card"]',
    '[class*="productTile"]',
    '[class*="product-tile"]',
    ".item",
    "article",
    '[itemtype*="Product"]',
)

# Page chrome that never holds product cards.
IGNORE_SELECTORS = (
    "header",
    "footer",
    "nav",
    "menu",
    "#menu",
    ".menu",
    ".navigation",
    ".footer",
    ".cart",
    "#cart",
    ".checkout",
    ".customer-service",
    ".contact",
    ".opening-hours",
    ".filter",
    ".sorting",
    ".pagination",
    ".results-count",
)

# Case-insensitive substrings that mark a title as listing chrome (Dutch and English).
DENYLIST_WORDS = (
    "producten",
    "artikelen",
    "resultaten",
    "items",
    "results",
    "filter",
    "sort",
    "menu",
    "service",
    "contact",
    "openingstijden",
    "opening hours",
)

# "24 producten", "120 results", ...
PRODUCT_COUNT_PATTERN = re.compile(
    r"^\d+\s*(producten|artikelen|resultaten|items|results|products|articles)",
    re.IGNORECASE,
)

MAX_TITLE_LENGTH = 200

TITLE_SELECTORS = (
    '[class*="title"]',
    '[class*="name"]',
    "h2",
    "h3",
    "h4",
    '[itemprop="name"]',
)

PRICE_SELECTORS = (
    '[class*="price"]',
    ".price",
    "[data-price]",
    '[itemprop="price"]',
)

# Tried in order on the first <img> before scanning its remaining attributes.
IMAGE_ATTRIBUTES = ("src", "data-src")

BACKGROUND_IMAGE_SELECTOR = '[style*="background-image"]'
BACKGROUND_IMAGE_URL = re.compile(r"url\(['\"]?(.*?)['\"]?\)")


def union(selectors) -> str:
    """Join selectors into one query; matches come back in document order."""
    return ", ".join(selectors)
