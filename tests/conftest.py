import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_plunder_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("PLUNDER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_plunder_logger():
    plunder_logger = logging.getLogger("plunder")
    handlers = list(plunder_logger.handlers)
    level = plunder_logger.level
    propagate = plunder_logger.propagate
    yield
    plunder_logger.handlers = handlers
    plunder_logger.setLevel(level)
    plunder_logger.propagate = propagate
