from __future__ import annotations

from typing import Any, Dict, Optional
import logging

try:
    from fastapi import FastAPI, Request
    from fastapi.exception_handlers import request_validation_exception_handler
    from fastapi.exceptions import RequestValidationError
    from fastapi.responses import JSONResponse
    from pydantic import BaseModel
except Exception as exc:  # pragma: no cover - optional dependency
    raise RuntimeError(
        "FastAPI not installed. Install with `pip install fastapi pydantic uvicorn` "
        "or avoid using the API server."
    ) from exc

from ..config import ScrapeConfig
from ..engines.base import ScrapeEngine, ScrapeReport
from ..utils.loader import load_symbol
from ..version import __version__

logger = logging.getLogger(__name__)

app = FastAPI(title="product_scout API", version=__version__)


class ScrapeRequest(BaseModel):
    # Optional so a missing URL fails like a malformed one (HTTP 500), not with a 422.
    url: Optional[str] = None
    unique: Optional[bool] = None


class CollectionRequest(BaseModel):
    url: Optional[str] = None


# Error bodies for /scrape, keyed by method.
_SCRAPE_FAILURES = {
    "POST": "Failed to scrape products",
    "PUT": "Failed to scrape collection",
}


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError) -> Any:
    """Malformed /scrape bodies fail like any other scrape error, not with a 422."""
    message = _SCRAPE_FAILURES.get(request.method) if request.url.path == "/scrape" else None
    if message is None:
        return await request_validation_exception_handler(request, exc)
    logger.error("Invalid %s /scrape body: %s", request.method, exc.errors())
    return JSONResponse({"error": message}, status_code=500)


def build_engine(cfg: ScrapeConfig) -> ScrapeEngine:
    engine_cls = load_symbol(cfg.engine)
    return engine_cls(cfg)


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/scrape")
async def scrape(req: ScrapeRequest) -> Any:
    cfg = ScrapeConfig.from_env()
    try:
        cfg.urls = [req.url] if req.url else []
        cfg.validate()
        engine = build_engine(cfg)
        report: ScrapeReport = await engine.scrape(req.url)
    except Exception:
        # The caller only learns that extraction failed; the cause stays in the log.
        logger.exception("Scraping error for %r", req.url)
        return JSONResponse({"error": "Failed to scrape products"}, status_code=500)

    unique = cfg.unique_products if req.unique is None else req.unique
    return report.to_payload(unique=unique)


@app.put("/scrape")
async def scrape_collection(req: CollectionRequest) -> Any:
    """Placeholder for collection scraping; answers with an empty product list."""
    logger.info("Collection scraping requested for %r (not implemented)", req.url)
    return {"products": [], "total": 0}
