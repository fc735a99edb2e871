from datetime import datetime, timezone
from itertools import count

import pytest

from config.settings import configure_logging
from modules.core.repositories.memory_repository import InMemoryModelRepository
from modules.models.factory import ModelFactory
from shared.infrastructure.bus import InMemoryObserver

FIXED_NOW = datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)
FIXED_HTTP_STAMP = "Sat, 17 Oct 2026 12:00:00 GMT"


@pytest.fixture(scope="session", autouse=True)
def _structured_logging():
    """Route structlog through stdlib so ``caplog`` sees every record."""
    configure_logging(cache_logger_on_first_use=False)


@pytest.fixture()
def id_generator():
    """Deterministic ids: ``id-1``, ``id-2``, ..."""
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture()
def factory(id_generator):
    return ModelFactory(
        generate_id=id_generator,
        clock=lambda: FIXED_NOW,
        timestamp_format="http",
    )


@pytest.fixture()
def observer():
    return InMemoryObserver()


@pytest.fixture()
def repository():
    return InMemoryModelRepository()


@pytest.fixture()
def fixed_stamp():
    return FIXED_HTTP_STAMP
