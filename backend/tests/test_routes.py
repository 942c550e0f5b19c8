import pytest
from fastapi.testclient import TestClient

from app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_identify(client):
    resp = client.post("/chords/identify", json={"notes": [9, 0, 4]})
    assert resp.status_code == 200
    assert resp.json() == {"root": 9, "type": "Minor", "label": "Am", "name": "Minor"}


def test_identify_rejects_empty_notes(client):
    resp = client.post("/chords/identify", json={"notes": []})
    assert resp.status_code == 422


def test_parse(client):
    resp = client.post("/chords/parse", json={"text": "Cmaj7"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["notes"] == [0, 4, 7, 11]
    assert body["chord"]["label"] == "Cmaj7"


def test_parse_failure(client):
    resp = client.post("/chords/parse", json={"text": "H7"})
    assert resp.status_code == 400


def test_transform(client):
    resp = client.post("/transform", json={"notes": [0, 4, 7], "transform": "P"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["notes"] == [0, 3, 7]
    assert body["label"] == "Cm"
    assert body["is_self_map"] is False
    assert body["displacement"]["dy"] == pytest.approx(-60.0)


def test_transform_custom_distance(client):
    resp = client.post(
        "/transform", json={"notes": [0, 4, 7], "transform": "P", "distance": 10},
    )
    assert resp.json()["displacement"]["dy"] == pytest.approx(-10.0)


def test_transform_self_map(client):
    resp = client.post("/transform", json={"notes": [0, 4, 8], "transform": "L"})
    body = resp.json()
    assert body["is_self_map"] is True
    assert body["notes"] == [0, 4, 8]


def test_transform_rejects_unknown_tag(client):
    resp = client.post("/transform", json={"notes": [0, 4, 7], "transform": "Q"})
    assert resp.status_code == 400


def test_reflect_notes(client):
    resp = client.post("/negative/notes", json={"notes": [0, 4, 7]})
    assert resp.status_code == 200
    assert resp.json() == {"key_root": 0, "notes": [0, 4, 7], "reflected": [7, 3, 0]}


def test_reflect_notes_reduces_key_root(client):
    resp = client.post("/negative/notes", json={"notes": [2, 6, 9], "key_root": 14})
    body = resp.json()
    assert body["key_root"] == 2
    assert body["reflected"] == [9, 5, 2]


def test_convert_progression(client):
    resp = client.post("/negative/progression", json={"progression": "C, G7"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["compact"] == "Cm  Dm7b5"
    assert len(body["entries"]) == 2


def test_convert_empty_progression(client):
    resp = client.post("/negative/progression", json={"progression": "  "})
    assert resp.status_code == 400


def test_presets(client):
    resp = client.get("/progressions/presets")
    assert resp.status_code == 200
    presets = resp.json()["presets"]
    assert len(presets) == 8
    assert presets[0]["chords"] == "Dm7 G7 Cmaj7"


def test_frequencies(client):
    resp = client.post("/frequencies", json={"notes": [9, 0]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["octave"] == 4
    assert body["frequencies"][0] == pytest.approx(440.0)
    assert body["frequencies"][1] == pytest.approx(261.6256, abs=1e-3)


def test_transform_rejects_empty_notes(client):
    resp = client.post("/transform", json={"notes": [], "transform": "P"})
    assert resp.status_code == 422
