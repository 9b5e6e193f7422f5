from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


OPENMETA_SCHEMA_TYPE = "com.openmeta.openmetaschema"


class ImportOptions(BaseModel):
    """Flags that control how a document is imported."""

    allow_empty: bool = False
    dump_document: bool = True
    content_types: List[str] = Field(default_factory=lambda: [OPENMETA_SCHEMA_TYPE])


class ImportRequest(BaseModel):
    """A single file handed to the importer, as the host would route it."""

    path: str
    content_type: Optional[str] = None
    options: ImportOptions = Field(default_factory=ImportOptions)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v:
            raise ValueError("import request requires a file path")
        return v
