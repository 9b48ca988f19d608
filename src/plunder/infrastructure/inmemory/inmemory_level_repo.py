from typing import Callable, List, Optional

from plunder.domain.models.location import Level
from plunder.domain.repositories import LevelRepository
from plunder.infrastructure.inmemory.default_levels import build_default_levels


class InMemoryLevelRepository(LevelRepository):
    def __init__(self, level_factory: Optional[Callable[[], List[Level]]] = None):
        self._level_factory = level_factory or build_default_levels

    def list_levels(self) -> List[Level]:
        levels = sorted(self._level_factory(), key=lambda level: level.number)
        numbers = [level.number for level in levels]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Duplicate level numbers in content: {numbers}")
        return levels
