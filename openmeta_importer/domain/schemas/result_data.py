import base64
import datetime
import plistlib
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_serializer

from .value_kind import ValueKind


class ErrorEntry(BaseModel):
    code: Optional[str] = None
    message: str


class MetaInfo(BaseModel):
    timings_ms: Dict[str, int] = Field(default_factory=dict)


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, plistlib.UID):
        return value.data
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    return value


class ImportResult(BaseModel):
    path: str
    content_type: Optional[str] = None
    imported: bool = False

    # raw plistlib values; only the JSON form is converted
    attributes: Dict[Any, Any] = Field(default_factory=dict)
    kinds: Dict[str, ValueKind] = Field(default_factory=dict)

    meta: MetaInfo = Field(default_factory=MetaInfo)
    error: Optional[ErrorEntry] = None

    @field_serializer("attributes", when_used="json")
    def serialize_attributes(self, attributes: Dict[Any, Any]) -> Dict[str, Any]:
        return _jsonable(attributes)
