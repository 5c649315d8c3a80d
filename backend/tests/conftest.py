import pytest
from fastapi.testclient import TestClient

from fakes import FakeClock
from sugar_oracle.core.config import Settings
from sugar_oracle.main import create_app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(app_env="test", database_path="", log_level="INFO", stream_interval_seconds=0.01)


@pytest.fixture
def client(clock, settings):
    app = create_app(clock=clock, settings=settings)
    with TestClient(app) as c:
        yield c
