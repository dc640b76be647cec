import logging
import sys
from pathlib import Path
from typing import Iterator, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from profilemutex.utils.color_support import color_support  # noqa: E402


class LoggerState:
    def __init__(self) -> None:
        self.logger = logging.getLogger()
        self.handlers = list(self.logger.handlers)
        self.level = self.logger.level
        self.force_color: Optional[bool] = getattr(color_support, "_force_color", None)

    def restore(self) -> None:
        # Close handlers added during the test to avoid resource leaks
        for handler in set(self.logger.handlers) - set(self.handlers):
            handler.close()

        self.logger.handlers.clear()
        for handler in self.handlers:
            self.logger.addHandler(handler)
        self.logger.setLevel(self.level)
        color_support.set_force_color(self.force_color)


@pytest.fixture
def logger_state() -> Iterator[LoggerState]:
    state = LoggerState()
    try:
        yield state
    finally:
        state.restore()
