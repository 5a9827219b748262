from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any
import os
import json

from .version import CONFIG_SCHEMA_VERSION

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.5"
DEFAULT_ENGINE = "product_scout.engines.simple_engine:SimpleScrapeEngine"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ScrapeConfig:
    """
    Canonical configuration object passed throughout the system.
    Keep it dataclass-only (no heavy deps).
    """
    schema_version: int = CONFIG_SCHEMA_VERSION
    urls: List[str] = field(default_factory=list)
    request_timeout: float = 15.0
    retries: int = 0
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    # Dotted path for the engine so it can be swapped without code changes.
    engine: str = DEFAULT_ENGINE
    # Surface the title-deduplicated products instead of every accepted card.
    unique_products: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # ---------- Loaders ----------

    @classmethod
    def from_env(cls) -> "ScrapeConfig":
        """
        Build config from environment variables (all optional).
        """
        urls = os.getenv("SCRAPER_URLS", "")

        def _get(name: str, default: str) -> str:
            return os.getenv(name, default)

        return cls(
            urls=[u.strip() for u in urls.split(",") if u.strip()],
            request_timeout=float(_get("SCRAPER_REQUEST_TIMEOUT", "15.0")),
            retries=int(_get("SCRAPER_RETRIES", "0")),
            user_agent=_get("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT),
            accept=_get("SCRAPER_ACCEPT", DEFAULT_ACCEPT),
            accept_language=_get("SCRAPER_ACCEPT_LANGUAGE", DEFAULT_ACCEPT_LANGUAGE),
            engine=_get("SCRAPER_ENGINE", DEFAULT_ENGINE),
            unique_products=_get("SCRAPER_UNIQUE_PRODUCTS", "false").strip().lower() in _TRUTHY,
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "ScrapeConfig":
        """
        Load configuration from a JSON file. Supports schema migration for future versions.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        data = migrate_config(data)
        return cls(**data)

    # ---------- Validation ----------

    def validate(self, require_urls: bool = True) -> None:
        if require_urls and not self.urls:
            raise ValueError("urls cannot be empty; provide at least one URL.")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be > 0")
        if self.retries < 0:
            raise ValueError("retries must be >= 0")


def migrate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Migrate config dict to the latest schema version.
    Keep this pure and additive. Add migrations here as you bump schema.
    """
    raw = dict(raw)
    # Schema 0 files predate the rename of start_urls.
    if raw.get("schema_version", CONFIG_SCHEMA_VERSION) == 0 and "start_urls" in raw:
        raw["urls"] = raw.pop("start_urls")
    raw["schema_version"] = CONFIG_SCHEMA_VERSION
    return raw
