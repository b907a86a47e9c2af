import logging

import pytest

from mkproject.modules.scaffolding.infrastructure.observability import (
    ObservabilityService,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging() altera el root y el formato de eventos; se restaura tras cada test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("mkproject.events").setLevel(logging.NOTSET)
    ObservabilityService.PRETTY_PRINT = False
