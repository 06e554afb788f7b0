import pytest
import requests

import ai_client
from ai_client import GeminiAPIError, GeminiClient


class FakeResponse:
    def __init__(self, status_code=200, data=None, text=None):
        self.status_code = status_code
        self._data = data
        self.text = text if text is not None else ("" if data is None else str(data))

    def json(self):
        if self._data is None:
            raise ValueError("no json")
        return self._data


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return self.response


def make_client(response):
    session = FakeSession(response)
    return GeminiClient(api_key="test-key", session=session), session


def test_requires_api_key(monkeypatch):
    monkeypatch.setattr(ai_client, "API_KEY", None)
    with pytest.raises(RuntimeError):
        GeminiClient()


def test_build_session_mounts_retry_adapter():
    session = ai_client._build_session()
    adapter = session.get_adapter("https://generativelanguage.googleapis.com")
    assert isinstance(adapter, requests.adapters.HTTPAdapter)
    assert 429 in adapter.max_retries.status_forcelist


def test_generate_text_sends_instruction_and_config():
    data = {"candidates": [{"content": {"parts": [{"text": "Hello "}, {"text": "Ada"}]}}]}
    client, session = make_client(FakeResponse(data=data))

    assert client.generate_text("be kind", "tell me") == "Hello Ada"

    call = session.calls[0]
    assert call["url"].endswith(f"/models/{ai_client.GEMINI_MODEL}:generateContent")
    assert call["headers"]["x-goog-api-key"] == "test-key"
    assert call["json"]["systemInstruction"] == {"parts": [{"text": "be kind"}]}
    assert call["json"]["contents"][0]["parts"][0]["text"] == "tell me"
    assert call["json"]["generationConfig"] == {"temperature": 0.8, "topP": 0.95}


def test_generate_text_without_candidates_returns_empty():
    client, _ = make_client(FakeResponse(data={"promptFeedback": {"blockReason": "SAFETY"}}))
    assert client.generate_text("sys", "prompt") == ""


def test_http_error_raises_with_service_message():
    body = {"error": {"code": 403, "message": "API key not valid"}}
    client, _ = make_client(FakeResponse(status_code=403, data=body))
    with pytest.raises(GeminiAPIError) as exc:
        client.generate_text("sys", "prompt")
    assert exc.value.status_code == 403
    assert "API key not valid" in str(exc.value)


def test_non_json_body_raises():
    client, _ = make_client(FakeResponse(status_code=200, data=None, text="<html>"))
    with pytest.raises(GeminiAPIError):
        client.generate_text("sys", "prompt")


def test_generate_image_returns_data_url():
    client, session = make_client(FakeResponse(data={"predictions": [{"bytesBase64Encoded": "QUJD", "mimeType": "image/jpeg"}]}))
    assert client.generate_image("a sketch") == "data:image/jpeg;base64,QUJD"
    call = session.calls[0]
    assert call["url"].endswith(f"/models/{ai_client.IMAGEN_MODEL}:predict")
    assert call["json"]["parameters"]["sampleCount"] == 1
    assert call["json"]["parameters"]["aspectRatio"] == "1:1"


def test_generate_image_without_bytes_raises():
    client, _ = make_client(FakeResponse(data={"predictions": []}))
    with pytest.raises(GeminiAPIError):
        client.generate_image("a sketch")


@pytest.mark.parametrize("status, body", [
    (200, []),
    (200, {"candidates": ["x"]}),
    (200, {"candidates": "x"}),
    (200, {"candidates": [{"content": ["x"]}]}),
    (500, ["oops"]),
    (400, {"error": "bad key"}),
])
def test_malformed_text_responses_raise_api_error(status, body):
    client, _ = make_client(FakeResponse(status_code=status, data=body))
    with pytest.raises(GeminiAPIError) as exc:
        client.generate_text("sys", "prompt")
    assert exc.value.status_code == status


def test_error_body_without_message_keeps_raw_text():
    client, _ = make_client(FakeResponse(status_code=400, data={"error": "bad key"}))
    with pytest.raises(GeminiAPIError) as exc:
        client.generate_text("sys", "prompt")
    assert str(exc.value).startswith("400 ")
    assert "bad key" in str(exc.value)


@pytest.mark.parametrize("body", [["x"], {"predictions": ["x"]}, {"predictions": {"bytesBase64Encoded": "QUJD"}}])
def test_malformed_image_responses_raise_api_error(body):
    client, _ = make_client(FakeResponse(data=body))
    with pytest.raises(GeminiAPIError):
        client.generate_image("a sketch")
