from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.main import app
from finnish_pic import parse


@pytest.fixture(scope="module")
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> date:
    today = date(2015, 2, 2)
    monkeypatch.setattr("api.main._today", lambda: today)
    return today


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# /parse
# ---------------------------------------------------------------------------


def test_parse_valid(client: TestClient, fixed_today: date) -> None:
    r = client.post("/parse", json={"pic": "290200A717E"})
    assert r.status_code == 200
    data = r.json()
    assert data["valid"] is True
    assert data["sex"] == "male"
    assert data["date_of_birth"] == "2000-02-29"
    assert data["age_in_years"] == 14


def test_parse_bad_checksum_is_not_an_error(client: TestClient) -> None:
    r = client.post("/parse", json={"pic": "150295-1212"})
    assert r.status_code == 200
    assert r.json()["valid"] is False


def test_parse_invalid_format(client: TestClient) -> None:
    r = client.post("/parse", json={"pic": "311210A540n"})
    assert r.status_code == 422
    assert "Not valid PIC format" in r.json()["detail"]


def test_parse_invalid_date(client: TestClient) -> None:
    r = client.post("/parse", json={"pic": "290200-101P"})
    assert r.status_code == 422
    assert "no such date" in r.json()["detail"]


# ---------------------------------------------------------------------------
# /validate
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "pic, expected",
    [("010195+433X", True), ("290200-101P", False), ("", False)],
)
def test_validate(client: TestClient, pic: str, expected: bool) -> None:
    r = client.post("/validate", json={"pic": pic})
    assert r.status_code == 200
    assert r.json() == {"pic": pic, "valid": expected}


# ---------------------------------------------------------------------------
# /generate
# ---------------------------------------------------------------------------


def test_generate(client: TestClient, fixed_today: date) -> None:
    r = client.post("/generate", json={"age": 30})
    assert r.status_code == 200
    pic = r.json()["pic"]
    parsed = parse(pic, today=fixed_today)
    assert parsed.valid
    assert parsed.age_in_years == 30


@pytest.mark.parametrize("age", [0, 201])
def test_generate_invalid_age(client: TestClient, age: int) -> None:
    r = client.post("/generate", json={"age": age})
    assert r.status_code == 422
    assert "not between sensible age range" in r.json()["detail"]


def test_generate_missing_age(client: TestClient) -> None:
    r = client.post("/generate", json={})
    assert r.status_code == 422


# ---------------------------------------------------------------------------
# /scan
# ---------------------------------------------------------------------------


def test_scan(client: TestClient) -> None:
    r = client.post("/scan", json={"text": "Hetu: 131052-308T"})
    assert r.status_code == 200
    findings = r.json()["findings"]
    assert len(findings) == 1
    f = findings[0]
    assert f["text"] == "131052-308T"
    assert f["pii_type"] == "FINNISH_PIC"
    assert f["confidence"] == 0.95
    assert f["sex"] == "female"
    assert f["date_of_birth"] == "1952-10-13"
    assert {"start", "end"} <= f.keys()


# ---------------------------------------------------------------------------
# API key
# ---------------------------------------------------------------------------


def test_api_key_required_when_configured(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("api.main._API_KEY", "secret")
    r = client.post("/validate", json={"pic": "010195+433X"})
    assert r.status_code == 401
    r = client.post(
        "/validate", json={"pic": "010195+433X"}, headers={"X-API-Key": "secret"}
    )
    assert r.status_code == 200
    # health stays open
    assert client.get("/health").status_code == 200


def test_generate_unencodable_age(client: TestClient, fixed_today: date) -> None:
    r = client.post("/generate", json={"age": 200})
    assert r.status_code == 422
    assert "cannot encode" in r.json()["detail"]
