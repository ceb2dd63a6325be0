import logging
from collections.abc import Iterator

import pytest


@pytest.fixture
def reset_sqlinterp_logger() -> Iterator[None]:
    root = logging.getLogger("sqlinterp")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
