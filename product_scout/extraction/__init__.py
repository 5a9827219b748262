from .document import Document
from .extractor import ProductExtractor

__all__ = ["Document", "ProductExtractor"]
