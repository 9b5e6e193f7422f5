"""Host-facing callback with the importer plugin's four-argument shape."""
from __future__ import annotations

from typing import Any, MutableMapping, Optional

from openmeta_importer.service.attribute_extractor_service import AttributeExtractorService
from openmeta_importer.service.settings_service import EnvSettings

_extractor: Optional[AttributeExtractorService] = None


def _get_extractor() -> AttributeExtractorService:
    global _extractor
    if _extractor is None:
        _extractor = AttributeExtractorService(EnvSettings().as_options())
    return _extractor


def get_metadata_for_file(
    this_interface: Any,
    attributes: MutableMapping[str, Any],
    content_type_uti: Optional[str],
    path_to_file: str,
) -> bool:
    """Pull the metadata in ``path_to_file`` into ``attributes``.

    ``this_interface`` and ``content_type_uti`` are part of the host contract
    only; the host has already routed the file here by its content type.
    Returns True if attributes were added, False if the file provided no data.
    """
    return _get_extractor().extract(path_to_file, attributes)
