from __future__ import annotations

import os
import plistlib
from typing import Any, Dict, MutableMapping, Optional, Tuple, Union

from openmeta_importer.domain.errors import (
    DecodeError,
    EmptyDocumentError,
    ExtractError,
    PathResolutionError,
    ShapeError,
    StreamOpenError,
)
from openmeta_importer.domain.ports.Attribute_extractor_provider import Attribute_extractor_provider
from openmeta_importer.domain.schemas.import_data import ImportOptions
from openmeta_importer.lib.logger import get_logger


def _invalid_value(value: Any, parents: Tuple[int, ...] = ()) -> Optional[str]:
    # binary plists can encode a null object (0x00) and self-referencing
    # containers; neither exists in CoreFoundation property lists
    if value is None:
        return "null object"
    if isinstance(value, (dict, list)):
        if id(value) in parents:
            return "cyclic reference"
        parents = parents + (id(value),)
        if isinstance(value, dict):
            if None in value:
                return "null key"
            items = list(value.values())
        else:
            items = value
        for item in items:
            reason = _invalid_value(item, parents)
            if reason:
                return reason
    return None


class AttributeExtractorService(Attribute_extractor_provider):
    """Copy the top-level pairs of a property-list document into a mapping.

    The document is one ``.openmetaschema`` file per application: a dictionary
    whose keys are the attribute names the application writes (``kOMUserTags``
    and friends) and whose values are representative of each attribute's type,
    e.g. an array of strings or a number. Values are handed over exactly as
    ``plistlib`` decodes them, XML and binary alike.

    Every failure collapses to ``extract`` returning False; ``load_attributes``
    raises the specific ``ExtractError`` subclass instead.
    """

    def __init__(self, options: Optional[ImportOptions] = None) -> None:
        self.options = options or ImportOptions()
        self.logger = get_logger("extractor")

    def extract(self, path: Union[str, os.PathLike], out: MutableMapping[str, Any]) -> bool:
        try:
            document = self.load_attributes(path)
        except ExtractError as exc:
            self.logger.debug("no attributes (%s): %s", exc.code, exc)
            return False

        out.update(document)
        return True

    def load_attributes(self, path: Union[str, os.PathLike]) -> Dict[str, Any]:
        file_path = self._resolve(path)

        try:
            with open(file_path, "rb") as stream:
                try:
                    document = plistlib.load(stream)
                except Exception as exc:
                    raise DecodeError(f"not a property list: {exc}", file_path) from exc
        except OSError as exc:
            raise StreamOpenError(f"cannot open: {exc.strerror or exc}", file_path) from exc

        if not isinstance(document, dict):
            raise ShapeError(f"root is {type(document).__name__}, expected dictionary", file_path)

        reason = _invalid_value(document)
        if reason:
            raise DecodeError(f"not a property list: {reason}", file_path)

        if not document and not self.options.allow_empty:
            raise EmptyDocumentError("document has no entries", file_path)

        if self.options.dump_document:
            self.logger.debug("%s: %r", file_path, document)
        return document

    @staticmethod
    def _resolve(path: Union[str, os.PathLike]) -> str:
        try:
            file_path = os.fsdecode(path)
        except TypeError as exc:
            raise PathResolutionError(f"not a filesystem path: {path!r}") from exc
        if not file_path:
            raise PathResolutionError("empty path")
        if "\0" in file_path:
            raise PathResolutionError("path contains NUL", file_path)
        return file_path
