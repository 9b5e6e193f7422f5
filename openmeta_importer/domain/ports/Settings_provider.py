from abc import ABC, abstractmethod
from typing import Any, Optional

from openmeta_importer.domain.schemas.import_data import ImportOptions


class Settings_provider(ABC):
    @abstractmethod
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        pass

    @abstractmethod
    def as_options(self) -> ImportOptions:
        pass
