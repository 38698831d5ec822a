import pytest
from loguru import logger

from timed_runs.testing import FakeClock


@pytest.fixture
def fake_clock():
    clock = FakeClock()
    yield clock
    clock.reset()


@pytest.fixture
def log_messages():
    """Collect every loguru message emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
