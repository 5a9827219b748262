"""
Tests for the command line entry point.
"""

import json
from unittest.mock import AsyncMock

import pytest

from product_scout.engines.simple_engine import SimpleScrapeEngine
from product_scout.errors import FetchError
from product_scout.ui.cli import run_cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("SCRAPER_URLS", "SCRAPER_ENGINE", "SCRAPER_UNIQUE_PRODUCTS"):
        monkeypatch.delenv(name, raising=False)


def test_single_url(monkeypatch, capsys, shop_page):
    monkeypatch.setattr(SimpleScrapeEngine, "fetch", AsyncMock(return_value=shop_page))

    assert run_cli(["https://shop.test/products"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["url"] == "https://shop.test/products"
    assert output["websiteTitle"] == "Test Shop"
    assert [p["title"] for p in output["products"]] == ["Red Mug"]


def test_failed_url_sets_exit_code(monkeypatch, capsys, shop_page):
    fetch = AsyncMock(side_effect=[shop_page, FetchError("down")])
    monkeypatch.setattr(SimpleScrapeEngine, "fetch", fetch)

    assert run_cli(["https://shop.test/a", "https://shop.test/b"]) == 1

    output = json.loads(capsys.readouterr().out)
    assert output[0]["total"] == 1
    assert output[1] == {"url": "https://shop.test/b", "error": "Failed to scrape products"}


def test_missing_urls_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        run_cli([])
    assert excinfo.value.code == 2
