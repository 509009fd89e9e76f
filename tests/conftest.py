import logging

import pytest

from shared_types.core.logger import _SourceFilter


@pytest.fixture(autouse=True)
def _drop_package_handler():
    # configure_root_logger binds a handler to the sys.stdout of the test that created it
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if any(isinstance(f, _SourceFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)
