import os
import sys
import warnings

import pytest
from starlette.testclient import TestClient

# Allow importing the service-local package without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("ENV", "test")
os.environ.setdefault("OPENEXCHANGERATES_URL", "https://openexchangerates.test/api/latest.json")
os.environ.setdefault("FIXERIO_URL", "http://fixer.test/api/latest")
os.environ.setdefault("CORS_ALLOW_ORIGIN_REGEX", r"https?://.*")


@pytest.fixture(scope="session", autouse=True)
def _silence_warnings():
    warnings.filterwarnings("ignore", message=r".*on_event is deprecated.*", category=DeprecationWarning)


@pytest.fixture(scope="session")
def app():
    from exchanger.main import app as fastapi_app
    return fastapi_app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def fake_rates(monkeypatch):
    """Serve a fixed rate table from every provider and record the calls made."""
    from exchanger.adapters.base import RateProvider
    from exchanger.models import RateTable

    state = {"rates": {"USD": 1.0, "EUR": 0.9}, "calls": []}

    async def _fetch(self, from_ccy, to_ccy):
        state["calls"].append((self.name, self.api_key, from_ccy, to_ccy))
        return RateTable(rates=state["rates"])

    monkeypatch.setattr(RateProvider, "fetch_rates", _fetch)
    return state
