"""Base interface for table loaders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class TableLoader(ABC):
    """Loader that parses one delimited file into typed records."""

    name: str

    @abstractmethod
    def read(self) -> Sequence[Any]:
        """Return typed records in file order."""
