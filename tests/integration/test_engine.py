import pytest
from fastapi.testclient import TestClient

from dowell.engine import build_app
from modules.breakevencalc.core.inputs import CalculatorMode


@pytest.mark.integration
def test_root_redirects_to_calculator(settings_factory):
    client = TestClient(build_app(settings_factory()))
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/breakevencalc/"


@pytest.mark.integration
def test_mounted_calculator(settings_factory):
    client = TestClient(build_app(settings_factory(mount="/tools/breakeven")))
    assert client.get("/tools/breakeven/").status_code == 200
    data = client.post("/tools/breakeven/calc", data={"expected_years": "3"}).json()
    assert data["inputs"]["expected_years"] == "3"


@pytest.mark.integration
def test_healthz(settings_factory):
    client = TestClient(build_app(settings_factory(mode=CalculatorMode.LIVE)))
    assert client.get("/healthz").json() == {"status": "ok", "mode": "live"}
