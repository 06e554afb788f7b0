import pytest
from fastapi.testclient import TestClient

import app as app_module
from readings import CLOSING_NOTE


class StubGeminiClient:
    text = "Your path is bright."
    image = "data:image/jpeg;base64,SKETCH"
    calls = []
    created = 0

    def __init__(self, *args, **kwargs):
        StubGeminiClient.created += 1

    def generate_text(self, system_instruction, prompt):
        StubGeminiClient.calls.append(prompt)
        return self.text

    def generate_image(self, prompt):
        return self.image


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_PASSWORD", "moonlight")
    monkeypatch.setattr(app_module, "GeminiClient", StubGeminiClient)
    monkeypatch.setattr(app_module, "_gemini_client", None)
    StubGeminiClient.calls = []
    StubGeminiClient.created = 0
    return TestClient(app_module.app)


def test_login_success_and_failure(client):
    r = client.post("/api/login", json={"password": "moonlight"})
    assert r.status_code == 200
    assert r.json() == {"success": True}

    r = client.post("/api/login", json={"password": "sunshine"})
    assert r.status_code == 401
    assert r.json()["message"] == "The password you entered is incorrect."


@pytest.mark.parametrize("body", [{"password": ""}, {"password": 1234}, {}])
def test_login_rejects_empty_password(client, body):
    r = client.post("/api/login", json=body)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Password cannot be empty."}


def test_login_without_configured_password(client, monkeypatch):
    monkeypatch.delenv("APP_PASSWORD")
    r = client.post("/api/login", json={"password": "moonlight"})
    assert r.status_code == 500
    assert "Server configuration error" in r.json()["message"]


def test_login_only_accepts_post(client):
    r = client.get("/api/login")
    assert r.status_code == 405
    assert "POST" in r.headers["allow"]


def test_generate_only_accepts_post(client):
    r = client.get("/api/generate")
    assert r.status_code == 405
    assert "POST" in r.headers["allow"]


def test_generate_returns_reading(client):
    r = client.post("/api/generate", json={
        "name": "Ada",
        "age": 29,
        "gender": "Male",
        "prompt": "Will my band succeed?",
        "readingType": "CAREER TAROT OR PSYCHIC READING",
        "isPremium": True,
    })
    assert r.status_code == 200
    data = r.json()
    assert data == {"text": "Your path is bright." + CLOSING_NOTE}
    assert 'They are seeking a career reading regarding: "Will my band succeed?".' in StubGeminiClient.calls[0]
    assert "PREMIUM INSTRUCTIONS" in StubGeminiClient.calls[0]


def test_generate_soulmate_includes_image(client):
    r = client.post("/api/generate", json={"name": "Ada", "gender": "Male", "readingType": "SOULMATE TAROT READING"})
    assert r.status_code == 200
    assert r.json()["imageUrl"] == "data:image/jpeg;base64,SKETCH"


def test_generate_rejects_bad_payloads(client):
    r = client.post("/api/generate", content=b"", headers={"Content-Type": "application/json"})
    assert r.status_code == 400

    r = client.post("/api/generate", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid JSON payload"

    r = client.post("/api/generate", json={"name": "Ada", "gender": "Robot"})
    assert r.status_code == 400
    assert r.json()["message"].startswith("Payload validation failed")


def test_generate_reports_model_failure(client, monkeypatch):
    monkeypatch.setattr(StubGeminiClient, "text", "")
    r = client.post("/api/generate", json={"name": "Ada"})
    assert r.status_code == 500
    assert r.json() == {"message": "Gemini API Error: Received an empty or invalid response from the AI."}


def test_generate_reuses_one_client(client):
    for _ in range(2):
        assert client.post("/api/generate", json={"name": "Ada"}).status_code == 200
    assert StubGeminiClient.created == 1
    assert len(StubGeminiClient.calls) == 2


def test_generate_without_api_key(client, monkeypatch):
    import ai_client
    monkeypatch.setattr(app_module, "GeminiClient", ai_client.GeminiClient)
    monkeypatch.setattr(ai_client, "API_KEY", None)
    r = client.post("/api/generate", json={"name": "Ada"})
    assert r.status_code == 500
    assert r.json()["message"] == "API_KEY must be set in environment"


def test_reading_types_and_health(client):
    r = client.get("/api/reading-types")
    assert r.status_code == 200
    data = r.json()
    assert data["default"] == "GENERAL TAROT OR PSYCHIC READING"
    assert "SOULMATE TAROT READING" in data["readingTypes"]

    assert client.get("/health").json() == {"ok": True}


def test_debug_never_leaks_secrets(client):
    data = client.get("/debug").json()
    assert data["APP_PASSWORD_set"] is True
    assert "moonlight" not in str(data)


def test_index_serves_form(client):
    r = client.get("/")
    assert r.status_code == 200
    assert 'id="reading-form"' in r.text
    assert 'id="copy"' in r.text
    assert "Copied!" in r.text
