from abc import ABC, abstractmethod
from typing import List

from plunder.domain.models.location import Level


class LevelRepository(ABC):
    @abstractmethod
    def list_levels(self) -> List[Level]:
        """Return a fresh, ordered copy of every level for a new session."""
        raise NotImplementedError
