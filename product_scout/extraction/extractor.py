from __future__ import annotations

import logging
from typing import Iterable, Union

from ..models import ExtractionResult
from ..utils.urls import validate_request_url
from .assembler import ResultAssembler
from .document import Document
from .fields import extract_fields, extract_page_title
from .matcher import SelectorCascade
from .noise import NoiseFilter
from .rules import IGNORE_SELECTORS, PRODUCT_SELECTORS
from .validator import materialize, rejection_reason

logger = logging.getLogger(__name__)


class ProductExtractor:
    """
    A generic, site-agnostic product extractor.

    Pipeline: noise filter -> selector cascade -> field extraction and
    validation per candidate -> result assembly.
    """

    def __init__(
        self,
        product_selectors: Iterable[str] = PRODUCT_SELECTORS,
        ignore_selectors: Iterable[str] = IGNORE_SELECTORS,
    ) -> None:
        self.noise = NoiseFilter(ignore_selectors)
        self.cascade = SelectorCascade(product_selectors)

    def extract(self, url: str, html: Union[str, bytes]) -> ExtractionResult:
        url = validate_request_url(url)
        return self.extract_document(Document.parse(html, url))

    def extract_document(self, document: Document) -> ExtractionResult:
        document.clear_exclusions()
        page_title = extract_page_title(document)
        self.noise.apply(document)

        assembler = ResultAssembler()
        candidates = self.cascade.candidates(document)
        for node in candidates:
            if self.noise.within_noise(node):
                continue
            fields = extract_fields(document, node)
            reason = rejection_reason(fields.title, fields.price)
            if reason:
                logger.debug("Rejected candidate <%s> (%s): %r", node.name, reason, fields.title)
                continue
            assembler.add(materialize(fields, document.inner_html(node)))

        logger.debug(
            "Accepted %s of %s candidates on %s", len(assembler), len(candidates), document.base_url
        )
        return assembler.build(page_title)
