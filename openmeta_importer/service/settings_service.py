from __future__ import annotations

import os
from typing import Any, List, Optional

from dotenv import find_dotenv, load_dotenv

from openmeta_importer.domain.ports.Settings_provider import Settings_provider
from openmeta_importer.domain.schemas.import_data import OPENMETA_SCHEMA_TYPE, ImportOptions


def _as_bool(v: object, default: bool = False) -> bool:
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes")


def _as_list(v: Optional[str], default: List[str]) -> List[str]:
    if v is None:
        return list(default)
    return [item.strip() for item in v.split(",") if item.strip()] or list(default)


class EnvSettings(Settings_provider):
    """Settings read from the process environment and an optional ``.env``."""

    def __init__(self, use_dotenv: bool = True) -> None:
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True))

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return os.getenv(key, default)

    def as_options(self) -> ImportOptions:
        return ImportOptions(
            allow_empty=_as_bool(self.get("OPENMETA_ALLOW_EMPTY"), False),
            dump_document=_as_bool(self.get("OPENMETA_DUMP_DOCUMENT"), True),
            content_types=_as_list(self.get("OPENMETA_CONTENT_TYPES"), [OPENMETA_SCHEMA_TYPE]),
        )
