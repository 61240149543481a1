import pytest
import structlog


@pytest.fixture
def logger():
    # pytest-structlog patches away structlog.configure, this keeps the
    # stdlib-like BoundLogger we use in production.
    structlog._config.configure(wrapper_class=structlog.BoundLogger)
    return structlog.get_logger()
