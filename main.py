from __future__ import annotations

import sys
from typing import List, Optional

from openmeta_importer.domain.schemas.import_data import ImportRequest
from openmeta_importer.service.importer_service import ImporterService
from openmeta_importer.service.settings_service import EnvSettings


def build_request(path: str, settings: EnvSettings) -> ImportRequest:
    return ImportRequest(
        path=path,
        content_type=settings.get("CONTENT_TYPE") or None,
        options=settings.as_options(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    # One file per call, like the host does
    if len(args) != 1 or not args[0]:
        print("Usage: python main.py <file>  # CONTENT_TYPE=<uti> to override the guessed type", file=sys.stderr)
        return 2

    settings = EnvSettings()
    result = ImporterService().run(build_request(args[0], settings))
    print(result.model_dump_json(indent=2), flush=True)
    return 0 if result.imported else 1


if __name__ == "__main__":
    sys.exit(main())
