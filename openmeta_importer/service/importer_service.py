from __future__ import annotations

import os
import time
from typing import Optional

from openmeta_importer.domain.errors import ExtractError
from openmeta_importer.domain.ports.Importer_interface import Importer_interface
from openmeta_importer.domain.schemas.import_data import OPENMETA_SCHEMA_TYPE, ImportRequest
from openmeta_importer.domain.schemas.result_data import ErrorEntry, ImportResult, MetaInfo
from openmeta_importer.domain.schemas.value_kind import kind_of
from openmeta_importer.lib.logger import get_logger
from .attribute_extractor_service import AttributeExtractorService


# Extension -> content type, standing in for the host's UTI lookup.
EXTENSION_TYPES = {
    ".openmetaschema": OPENMETA_SCHEMA_TYPE,
    ".plist": "com.apple.property-list",
}


def guess_content_type(path: str) -> Optional[str]:
    ext = os.path.splitext(path)[1].lower()
    return EXTENSION_TYPES.get(ext)


class ImporterService(Importer_interface):
    """Run one file through content-type routing and the attribute extractor.

    An injected ``extractor`` keeps the options it was built with; the
    request's ``allow_empty`` and ``dump_document`` then go unused and only
    ``content_types`` applies. Without one, an extractor is built per request.
    """

    def __init__(self, extractor: Optional[AttributeExtractorService] = None) -> None:
        self.logger = get_logger("importer")
        self.extractor = extractor

    def run(self, request: ImportRequest) -> ImportResult:
        t0 = time.perf_counter()
        content_type = request.content_type or guess_content_type(request.path)
        result = ImportResult(path=request.path, content_type=content_type, meta=MetaInfo(timings_ms={}))
        meta = result.meta

        supported = request.options.content_types
        if content_type is not None and content_type not in supported:
            self.logger.info("skip %s: content type %s not in %s", request.path, content_type, supported)
            result.error = ErrorEntry(
                code="unsupported_type",
                message=f"no importer for content type {content_type}",
            )
            meta.timings_ms["total"] = int((time.perf_counter() - t0) * 1000)
            return result

        extractor = self.extractor or AttributeExtractorService(request.options)

        t1 = time.perf_counter()
        try:
            attributes = extractor.load_attributes(request.path)
        except ExtractError as exc:
            self.logger.info("no attributes from %s (%s): %s", request.path, exc.code, exc)
            result.error = ErrorEntry(code=exc.code, message=str(exc))
        else:
            result.attributes = dict(attributes)
            result.kinds = {str(key): kind_of(value) for key, value in attributes.items()}
            result.imported = True
            self.logger.info("imported %d attribute(s) from %s", len(attributes), request.path)
        meta.timings_ms["extract"] = int((time.perf_counter() - t1) * 1000)

        total_ms = int((time.perf_counter() - t0) * 1000)
        meta.timings_ms["total"] = total_ms
        return result
