from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Dict, List

from ..config import ScrapeConfig
from ..errors import ScrapeError
from ..utils.logging import setup_logging
from ..utils.loader import load_symbol

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Extract product cards from e-commerce pages")
    p.add_argument("urls", nargs="*", help="Page URLs (space-separated)")
    p.add_argument("--config", type=str, help="Path to config JSON", default=None)
    p.add_argument("--engine", type=str, default=None, help="Engine dotted path (module:ClassName)")
    p.add_argument("--unique", action="store_true", default=None,
                   help="Print one product per distinct title")
    p.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    p.add_argument("--retries", type=int, default=None, help="Extra fetch attempts after a failure")
    p.add_argument("--log-level", type=str, default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    p.add_argument("--serve", action="store_true", help="Run REST API server instead of scraping")
    p.add_argument("--host", type=str, default="127.0.0.1", help="API host (when --serve)")
    p.add_argument("--port", type=int, default=8000, help="API port (when --serve)")
    return p


def _load_config(args: argparse.Namespace) -> ScrapeConfig:
    if args.config:
        cfg = ScrapeConfig.from_file(args.config)
    else:
        cfg = ScrapeConfig.from_env()

    if args.urls:
        cfg.urls = list(args.urls)
    if args.engine:
        cfg.engine = args.engine
    if args.unique:
        cfg.unique_products = True
    if args.timeout is not None:
        cfg.request_timeout = args.timeout
    if args.retries is not None:
        cfg.retries = args.retries

    cfg.validate()
    return cfg


def run_server(host: str, port: int) -> None:
    try:
        import uvicorn  # type: ignore
    except Exception as exc:  # pragma: no cover - optional dep
        raise SystemExit("To run the API, install dependencies: pip install fastapi uvicorn pydantic") from exc
    uvicorn.run("product_scout.apis.app:app", host=host, port=port, reload=True)


async def scrape_all(cfg: ScrapeConfig) -> List[Dict[str, Any]]:
    """Scrape each configured URL in turn; a failed URL yields an error entry."""
    engine = load_symbol(cfg.engine)(cfg)
    payloads: List[Dict[str, Any]] = []
    for url in cfg.urls:
        try:
            report = await engine.scrape(url)
        except ScrapeError as exc:
            logger.error("Scraping error for %s: %s", url, exc)
            payloads.append({"url": url, "error": "Failed to scrape products"})
            continue
        payloads.append({"url": report.url, **report.to_payload(unique=cfg.unique_products)})
    return payloads


def run_cli(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.serve:
        run_server(args.host, args.port)
        return 0

    try:
        cfg = _load_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    payloads = asyncio.run(scrape_all(cfg))
    output: Any = payloads[0] if len(payloads) == 1 else payloads
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 1 if any("error" in p for p in payloads) else 0
