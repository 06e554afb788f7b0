import os
import logging
from typing import Dict, List, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger("gemini-client")

# Read the Gemini API key from environment; DO NOT hardcode in repo
API_KEY = os.environ.get("API_KEY")
if not API_KEY:
  logger.warning("API_KEY not set. Reading generation will fail unless provided at runtime.")

GEMINI_API_BASE = os.environ.get("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
IMAGEN_MODEL = os.environ.get("IMAGEN_MODEL", "imagen-3.0-generate-002")
GEMINI_TIMEOUT = float(os.environ.get("GEMINI_TIMEOUT", "60"))

TEMPERATURE = 0.8
TOP_P = 0.95

RETRYABLE_STATUS = {408, 425, 429, 500, 502, 503, 504}


class GeminiAPIError(RuntimeError):
  """The generative service answered with an error or with a body we cannot use."""

  def __init__(self, message: str, status_code: Optional[int] = None):
    super().__init__(message)
    self.status_code = status_code


def _build_session() -> requests.Session:
  s = requests.Session()
  retry = Retry(
    total=3,
    connect=3,
    read=3,
    status=3,
    backoff_factor=1,  # 1s, 2s, 4s
    status_forcelist=RETRYABLE_STATUS,
    allowed_methods=frozenset({'POST'}),
    raise_on_status=False,
  )
  adapter = HTTPAdapter(max_retries=retry)
  s.mount('https://', adapter)
  s.mount('http://', adapter)
  return s


def _expect_dict(value, what: str, status_code: Optional[int] = None) -> Dict:
  if not isinstance(value, dict):
    logger.error("Malformed Gemini %s: %.300r", what, value)
    raise GeminiAPIError(f"Malformed {what} from Gemini", status_code=status_code)
  return value


def _expect_list(value, what: str, status_code: Optional[int] = None) -> List:
  if not isinstance(value, list):
    logger.error("Malformed Gemini %s: %.300r", what, value)
    raise GeminiAPIError(f"Malformed {what} from Gemini", status_code=status_code)
  return value


class GeminiClient:
  """Thin client for the Gemini text and Imagen image endpoints.

  Calls go straight to the Generative Language REST API using the key from
  the environment, so no SDK is needed and secrets stay out of the repo.
  """

  def __init__(self, api_key: str = None, session: Optional[requests.Session] = None):
    self.api_key = api_key or API_KEY
    if not self.api_key:
      raise RuntimeError("API_KEY must be set in environment")
    self.base_url = GEMINI_API_BASE.rstrip("/")
    self.text_model = GEMINI_MODEL
    self.image_model = IMAGEN_MODEL
    self.session = session or _build_session()

  def _post(self, model: str, method: str, payload: Dict) -> Tuple[Dict, int]:
    url = f"{self.base_url}/models/{model}:{method}"
    headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}
    resp = self.session.post(url, headers=headers, json=payload, timeout=GEMINI_TIMEOUT)
    if resp.status_code >= 400:
      body = resp.text or '<no body>'
      logger.error("Gemini request failed: model=%s status=%s body=%s", model, resp.status_code, body[:1000])
      message = body[:300]
      try:
        error = resp.json()
      except ValueError:
        error = None
      if isinstance(error, dict) and isinstance(error.get("error"), dict):
        message = error["error"].get("message") or message
      raise GeminiAPIError(f"{resp.status_code} {message}", status_code=resp.status_code)
    try:
      data = resp.json()
    except ValueError:
      logger.error("Gemini returned non-JSON body: %s", (resp.text or '')[:500])
      raise GeminiAPIError("Gemini returned a non-JSON response", status_code=resp.status_code)
    return _expect_dict(data, "response body", resp.status_code), resp.status_code

  def generate_text(self, system_instruction: str, prompt: str) -> str:
    payload = {
      "systemInstruction": {"parts": [{"text": system_instruction}]},
      "contents": [{"role": "user", "parts": [{"text": prompt}]}],
      "generationConfig": {"temperature": TEMPERATURE, "topP": TOP_P},
    }
    logger.info("Requesting text from %s (prompt %d chars)", self.text_model, len(prompt))
    data, status = self._post(self.text_model, "generateContent", payload)
    candidates = _expect_list(data.get("candidates") or [], "candidates", status)
    if not candidates:
      feedback = data.get("promptFeedback") or {}
      logger.warning("No candidates returned; promptFeedback=%s", feedback)
      return ""
    candidate = _expect_dict(candidates[0], "candidate", status)
    content = _expect_dict(candidate.get("content") or {}, "candidate content", status)
    parts = _expect_list(content.get("parts") or [], "content parts", status)
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

  def generate_image(self, prompt: str) -> str:
    """Generate one square JPEG and return it as a data URL."""
    payload = {
      "instances": [{"prompt": prompt}],
      "parameters": {
        "sampleCount": 1,
        "aspectRatio": "1:1",
        "outputOptions": {"mimeType": "image/jpeg"},
      },
    }
    logger.info("Requesting image from %s", self.image_model)
    data, status = self._post(self.image_model, "predict", payload)
    predictions = _expect_list(data.get("predictions") or [], "predictions", status)
    image_b64 = _expect_dict(predictions[0], "prediction", status).get("bytesBase64Encoded") if predictions else None
    if not image_b64:
      raise GeminiAPIError("Image response did not contain any image bytes", status_code=status)
    return f"data:image/jpeg;base64,{image_b64}"
