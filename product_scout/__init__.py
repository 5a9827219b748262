"""Heuristic product extraction for arbitrary e-commerce pages."""

from .version import __version__
from .models import ExtractionResult, ProductCandidate
from .extraction.extractor import ProductExtractor

__all__ = ["__version__", "ExtractionResult", "ProductCandidate", "ProductExtractor"]
