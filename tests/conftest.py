from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def restore_sqlchain_logger() -> Iterator[logging.Logger]:
    """Undo handler, level and propagation changes made by ``configure_logging``."""
    logger = logging.getLogger("sqlchain")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
