"""
Tests for result assembly and title deduplication.
"""

from product_scout.extraction.assembler import ResultAssembler
from product_scout.models import ProductCandidate


def _product(title, price):
    return ProductCandidate(title=title, price=price)


def test_dedup_keeps_first_position_and_last_value():
    assembler = ResultAssembler()
    assembler.add(_product("Shoe A", "€10"))
    assembler.add(_product("Boot B", "€20"))
    assembler.add(_product("Shoe A", "€12"))

    result = assembler.build("Shop")

    assert [p.price for p in result.products] == ["€10", "€20", "€12"]
    assert [(p.title, p.price) for p in result.unique_products] == [("Shoe A", "€12"), ("Boot B", "€20")]
    assert result.page_title == "Shop"
    assert len(assembler) == 3


def test_payload_shape():
    assembler = ResultAssembler()
    assembler.add(_product("Shoe A", "€10"))
    assembler.add(_product("Shoe A", "€12"))
    result = assembler.build("Shop")

    payload = result.to_payload()
    assert payload["websiteTitle"] == "Shop"
    assert payload["total"] == 2
    assert payload["products"][0]["price"] == "€10"

    unique = result.to_payload(unique=True)
    assert unique["total"] == 1
    assert unique["products"][0]["price"] == "€12"


def test_empty_result():
    result = ResultAssembler().build("Shop")
    assert result.products == []
    assert result.to_payload() == {"websiteTitle": "Shop", "products": [], "total": 0}
