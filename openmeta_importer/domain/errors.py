from __future__ import annotations

from typing import Optional


class ExtractError(Exception):
    """Base for every reason a document contributes no attributes."""

    code = "extract"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class PathResolutionError(ExtractError):
    code = "path"


class StreamOpenError(ExtractError):
    code = "open"


class DecodeError(ExtractError):
    code = "decode"


class ShapeError(ExtractError):
    """Decoded root is not a dictionary."""

    code = "shape"


class EmptyDocumentError(ExtractError):
    code = "empty"
