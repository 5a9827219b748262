"""
End-to-end tests for ProductExtractor on fixture pages.
"""

import pytest

from product_scout.errors import URLError
from product_scout.extraction.document import Document
from product_scout.extraction.extractor import ProductExtractor

SHOP_URL = "https://shop.test/products"

LISTING = """
<html>
  <head><meta property="og:site_name" content="Schoenen.test"></head>
  <body>
    <div class="results-count"><div class="item"><h3>48 producten</h3></div></div>
    <ul>
      <li class="product-tile"><a href="shoe-a"><img data-src="/img/a.jpg"></a>
        <h3>Shoe A</h3><span class="price">€ 10,00</span></li>
      <li class="product-tile"><h3>24 producten</h3></li>
      <li class="product-tile"><span class="price">€ 20,00</span></li>
      <li class="product-tile"><h3>Shoe A</h3><span class="price">€ 12,00</span></li>
      <li class="product-tile"><p>Nothing structured here</p></li>
    </ul>
    <footer><div class="product-card"><h3>Gift card</h3><span class="price">€ 25</span></div></footer>
  </body>
</html>
"""


@pytest.fixture
def extractor():
    return ProductExtractor()


def test_end_to_end_scenario(extractor, shop_page):
    result = extractor.extract(SHOP_URL, shop_page)

    assert result.page_title == "Test Shop"
    assert [(p.title, p.price, p.image, p.link) for p in result.products] == [
        ("Red Mug", "€9.99", "https://shop.test/mug.jpg", "https://shop.test/p/1"),
    ]
    assert "Red Mug" in result.products[0].html
    assert result.to_payload()["total"] == 1


def test_listing_page(extractor):
    result = extractor.extract(SHOP_URL, LISTING)

    assert result.page_title == "Schoenen.test"
    assert [(p.title, p.price) for p in result.products] == [
        ("Shoe A", "€ 10,00"),
        ("Untitled Product", "€ 20,00"),
        ("Shoe A", "€ 12,00"),
    ]
    first = result.products[0]
    assert first.image == "https://shop.test/img/a.jpg"
    assert first.link == "https://shop.test/products/shoe-a"
    assert result.products[1].link is None

    assert [(p.title, p.price) for p in result.unique_products] == [
        ("Shoe A", "€ 12,00"),
        ("Untitled Product", "€ 20,00"),
    ]


def test_noise_never_becomes_a_product(extractor):
    result = extractor.extract(SHOP_URL, LISTING)
    titles = {p.title for p in result.products}
    assert "Gift card" not in titles
    assert "48 producten" not in titles


def test_idempotent_on_same_document(extractor, shop_page):
    document = Document.parse(shop_page, SHOP_URL)
    first = extractor.extract_document(document)
    second = extractor.extract_document(document)
    assert first == second


def test_accepts_bytes(extractor, shop_page):
    result = extractor.extract(SHOP_URL, shop_page.encode("utf-8"))
    assert [p.title for p in result.products] == ["Red Mug"]


def test_empty_page_is_not_an_error(extractor):
    result = extractor.extract("https://shop.test/", "<html><body></body></html>")
    assert result.products == []
    assert result.unique_products == []
    assert result.page_title == "shop.test"


def test_malformed_url(extractor, shop_page):
    with pytest.raises(URLError):
        extractor.extract("shop.test/products", shop_page)


def test_nested_candidates_are_each_evaluated(extractor):
    html = """
    <div class="product-grid">
      <div class="product-card"><h3>Lamp</h3><span class="price">€30</span></div>
    </div>
    """
    result = extractor.extract(SHOP_URL, html)
    # The grid wrapper also matches and picks up its first card's fields.
    assert [(p.title, p.price) for p in result.products] == [("Lamp", "€30"), ("Lamp", "€30")]
    assert len(result.unique_products) == 1


def test_noise_inside_title_does_not_reject_card(extractor):
    html = '<article class="product"><h3>Mug<span class="filter">Filter by colour</span></h3></article>'
    result = extractor.extract(SHOP_URL, html)
    assert [(p.title, p.html) for p in result.products] == [("Mug", "<h3>Mug</h3>")]
