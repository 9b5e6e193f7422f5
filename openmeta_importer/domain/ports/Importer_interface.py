from abc import ABC, abstractmethod

from openmeta_importer.domain.schemas.import_data import ImportRequest
from openmeta_importer.domain.schemas.result_data import ImportResult


class Importer_interface(ABC):
    @abstractmethod
    def run(self, request: ImportRequest) -> ImportResult:
        pass
