import os
from abc import ABC, abstractmethod
from typing import Any, Dict, MutableMapping, Union


class Attribute_extractor_provider(ABC):
    @abstractmethod
    def extract(self, path: Union[str, os.PathLike], out: MutableMapping[str, Any]) -> bool:
        """Merge the document's key/value pairs into ``out``.

        Returns False and leaves ``out`` untouched when the file yields no
        attributes, whatever the reason.
        """
        pass

    @abstractmethod
    def load_attributes(self, path: Union[str, os.PathLike]) -> Dict[str, Any]:
        """Decode the document at ``path`` or raise an ``ExtractError``."""
        pass
