import os

# La app se crea al importar football_proxy.main
os.environ.setdefault("FOOTBALL_API_KEY", "test-key")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from football_proxy.core.cache import ResponseCache
from football_proxy.core.config import Settings
from football_proxy.main import create_app


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def default_body(path):
    """Cuerpo canónico según el sub-recurso pedido"""
    if path.endswith("/standings"):
        return {"competition": {"code": path.split("/")[2]}, "standings": [{"type": "TOTAL", "table": []}]}
    if path.endswith("/matches") and path.startswith("/competitions/"):
        return {"matches": [{"id": 1, "status": "FINISHED"}]}
    if path.endswith("/scorers"):
        return {"scorers": [{"player": {"name": "Haaland"}, "goals": 20}]}
    if path.startswith("/teams/"):
        return {"id": int(path.rsplit("/", 1)[1]), "name": "Ajax"}
    if path.startswith("/matches/"):
        return {"id": int(path.rsplit("/", 1)[1]), "homeTeam": {"name": "Ajax"}}
    return {}


class StubUpstream:
    """Sustituto de FootballDataClient que registra las llamadas"""

    base_url = "https://stub.football-data.test/v4"

    def __init__(self, errors=None, bodies=None):
        self.errors = errors or {}
        self.bodies = bodies or {}
        self.calls = []
        self.closed = False

    async def get(self, path):
        self.calls.append(path)
        if path in self.errors:
            raise self.errors[path]
        if path in self.bodies:
            return self.bodies[path]
        return default_body(path)

    async def aclose(self):
        self.closed = True


@pytest.fixture
def settings():
    return Settings(FOOTBALL_API_KEY="test-key", LOG_TO_FILE=False, _env_file=None)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResponseCache(clock=clock)


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def client(settings, cache, upstream):
    app = create_app(settings=settings, cache=cache, upstream=upstream)
    return TestClient(app)
