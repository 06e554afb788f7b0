from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, FileResponse
import hmac
import os
import json
import logging
from ai_client import GeminiClient, API_KEY, GEMINI_MODEL, IMAGEN_MODEL
from models import LoginRequest, ReadingRequest
from prompts import READING_TYPES, DEFAULT_READING_TYPE
from readings import ReadingError, generate_reading

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("scarlett")

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

app = FastAPI(title="Scarlett's AI Psychic Readings")

_gemini_client = None


def get_gemini_client():
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client


def get_app_password():
    # Read per request so the password can be rotated without a restart.
    return os.environ.get("APP_PASSWORD")


async def _read_json(req: Request):
    body = await req.body()
    if not body:
        raise ValueError("Empty request body")
    return json.loads(body)


@app.post("/api/login")
async def api_login(req: Request):
    app_password = get_app_password()
    if not app_password:
        # Server misconfiguration; keep the details out of the response.
        logger.critical("APP_PASSWORD environment variable is not set.")
        return JSONResponse(status_code=500, content={
            "success": False,
            "message": "Server configuration error. Please contact the administrator.",
        })

    try:
        payload = await _read_json(req)
        login = LoginRequest(**payload)
    except Exception:
        logger.warning("Malformed login payload")
        login = LoginRequest()

    password = login.password
    if not isinstance(password, str) or len(password) == 0:
        return JSONResponse(status_code=400, content={"success": False, "message": "Password cannot be empty."})

    if hmac.compare_digest(password.encode("utf-8"), app_password.encode("utf-8")):
        logger.info("Login succeeded")
        return {"success": True}

    logger.warning("Login rejected: wrong password")
    return JSONResponse(status_code=401, content={"success": False, "message": "The password you entered is incorrect."})


@app.post("/api/generate")
async def api_generate(req: Request):
    try:
        payload = await _read_json(req)
    except Exception as e:
        logger.exception("Invalid JSON payload: %s", e)
        return JSONResponse(status_code=400, content={"message": "Invalid JSON payload"})

    try:
        reading_request = ReadingRequest(**payload)
    except Exception as e:
        logger.exception("Payload validation failed")
        return JSONResponse(status_code=400, content={"message": f"Payload validation failed: {e}"})

    try:
        result = generate_reading(reading_request, get_gemini_client())
    except ReadingError as e:
        return JSONResponse(status_code=500, content={"message": str(e)})
    except Exception as e:
        logger.exception("API Error")
        message = str(e) or "An unknown server error occurred."
        return JSONResponse(status_code=500, content={"message": message})

    return result.to_wire()


@app.get("/api/reading-types")
def reading_types():
    return {"readingTypes": list(READING_TYPES), "default": DEFAULT_READING_TYPE}


@app.get("/")
def index():
    return FileResponse(os.path.join(STATIC_DIR, "index.html"))


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/debug")
def debug_info():
    """Return runtime diagnostics helpful for checking deployment configuration.

    Secret values are never returned, only whether they are present.
    """
    return {
        "cwd": os.getcwd(),
        "API_KEY_set": bool(os.environ.get("API_KEY") or API_KEY),
        "APP_PASSWORD_set": bool(get_app_password()),
        "text_model": GEMINI_MODEL,
        "image_model": IMAGEN_MODEL,
        "reading_type_count": len(READING_TYPES),
    }
