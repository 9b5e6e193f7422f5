from __future__ import annotations

import datetime
import plistlib
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    DATE = "date"
    DATA = "data"
    ARRAY = "array"
    DICTIONARY = "dictionary"
    UID = "uid"


def kind_of(value: Any) -> ValueKind:
    """Tag a decoded property-list value with its plist type.

    ``bool`` is checked before ``int`` since it is a subclass of it.
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.REAL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, datetime.datetime):
        return ValueKind.DATE
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.DATA
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.DICTIONARY
    if isinstance(value, plistlib.UID):
        return ValueKind.UID
    raise TypeError(f"not a property list value: {type(value).__name__}")
