import plistlib
import struct

import pytest


@pytest.fixture
def write_plist(tmp_path):
    def _write(value, name="sample.openmetaschema", fmt=plistlib.FMT_XML):
        path = tmp_path / name
        with open(path, "wb") as fh:
            plistlib.dump(value, fh, fmt=fmt)
        return path

    return _write


@pytest.fixture
def write_bplist(tmp_path):
    """Assemble a binary plist from raw objects; object 0 is the root."""

    def _write(objects, name="raw.openmetaschema"):
        body = b"bplist00"
        offsets = []
        for obj in objects:
            offsets.append(len(body))
            body += obj
        table_offset = len(body)
        body += bytes(offsets)
        body += struct.pack(">6xBBQQQ", 1, 1, len(objects), 0, table_offset)
        path = tmp_path / name
        path.write_bytes(body)
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also drops values a .env file loads mid-test
    for key in (
        "OPENMETA_ALLOW_EMPTY",
        "OPENMETA_DUMP_DOCUMENT",
        "OPENMETA_CONTENT_TYPES",
        "CONTENT_TYPE",
    ):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
