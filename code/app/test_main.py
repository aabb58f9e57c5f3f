from fastapi.testclient import TestClient

from app.core.sample_payloads import SAMPLE_HOUSEHOLD, SAMPLE_REQUEST
from app.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_calculate():
    resp = client.post("/calculate", json=SAMPLE_REQUEST)
    assert resp.status_code == 200
    body = resp.json()
    assert [inv["total"] for inv in body["results"]["invalidity"]] == [684000, 2185200, 3023400]
    assert body["results"]["injury"] == 200000


def test_household():
    resp = client.post("/household", json=SAMPLE_HOUSEHOLD)
    assert resp.status_code == 200
    assert len(resp.json()["people"]) == 2


def test_pension_defaults():
    resp = client.get("/pension-defaults", params={"income": 30000})
    assert resp.status_code == 200
    assert [p["amount"] for p in resp.json()["pension_levels"]] == [8580, 10074, 14883]


def test_rejects_non_positive_income():
    assert client.post("/calculate", json={**SAMPLE_REQUEST, "income": 0}).status_code == 422
    assert client.get("/pension-defaults", params={"income": -1}).status_code == 422


def test_rejects_wrong_pension_count():
    resp = client.post("/calculate", json={**SAMPLE_REQUEST, "pension_levels": [1, 2]})
    assert resp.status_code == 422


def test_rejects_too_many_pension_levels():
    resp = client.post("/calculate", json={**SAMPLE_REQUEST, "pension_levels": [1, 2, 3, 4]})
    assert resp.status_code == 422
