import logging
import os

from rich.logging import RichHandler

from plunder.application.services.event_bus import EventBus
from plunder.application.services.game_service import GameService
from plunder.application.services.session_chronicle import register_event_logging
from plunder.infrastructure.inmemory.inmemory_level_repo import InMemoryLevelRepository

logger = logging.getLogger(__name__)

_VERBOSITY_LEVELS = {"compact", "normal", "debug"}


def _env_seed() -> int | None:
    raw = os.getenv("PLUNDER_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric PLUNDER_SEED=%r", raw)
        return None


def _env_verbosity() -> str:
    verbosity = os.getenv("PLUNDER_VERBOSITY", "compact").strip().lower()
    if verbosity not in _VERBOSITY_LEVELS:
        logger.warning("Unknown PLUNDER_VERBOSITY=%r, using compact", verbosity)
        return "compact"
    return verbosity


def configure_logging() -> None:
    level_name = os.getenv("PLUNDER_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    log_file = os.getenv("PLUNDER_LOG_FILE", "").strip()
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(show_path=False, rich_tracebacks=True)

    root = logging.getLogger("plunder")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False


def create_game_service() -> GameService:
    event_bus = EventBus()
    register_event_logging(event_bus)

    return GameService(
        level_repo=InMemoryLevelRepository(),
        event_bus=event_bus,
        base_seed=_env_seed(),
        verbosity=_env_verbosity(),
    )
