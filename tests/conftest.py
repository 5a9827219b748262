"""
Shared fixtures for the test suite.
"""

import pytest

from product_scout.extraction.document import Document

SHOP_URL = "https://shop.test/products"

SHOP_PAGE = """
<html>
  <head><title>Test Shop</title></head>
  <body>
    <nav>
      <div class="product-item"><h3>Decoy</h3><span class="price">€1.00</span></div>
    </nav>
    <a href="/p/1">
      <article class="product">
        <h3>Red Mug</h3>
        <span class="price">€9.99</span>
        <img src="/mug.jpg">
      </article>
    </a>
  </body>
</html>
"""


@pytest.fixture
def shop_page():
    return SHOP_PAGE


@pytest.fixture
def make_document():
    """Build a Document from a markup snippet."""

    def _make(html, url="https://x.com/shop"):
        return Document.parse(html, url)

    return _make
