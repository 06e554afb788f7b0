import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from ai_client import GeminiClient
from models import ReadingRequest, ReadingResponse
from prompts import build_prompt_details

logger = logging.getLogger("readings")

SOULMATE_READING = 'SOULMATE TAROT READING'
DEFAULT_SOULMATE_AGE = 30

CLOSING_NOTE = (
    "\n\n\nThank you for choosing my services. If you have a moment, I would appreciate it if you could "
    "leave a review to support my work.\n\nWith warmth and light,\nScarlett"
)

EMPTY_RESPONSE_MESSAGE = "Received an empty or invalid response from the AI."

# The sketch shows the partner the client is likely drawn to.
_SOULMATE_DESCRIPTORS = {
    'Female': 'a man',
    'Male': 'a woman',
    'Non-binary': 'a person with androgynous features',
}


class ReadingError(RuntimeError):
    pass


def soulmate_image_prompt(gender: str, age: Optional[int]) -> str:
    descriptor = _SOULMATE_DESCRIPTORS.get(gender, 'a person')
    return f"really amateur charcoal drawing {descriptor} portrait on paper, around {age or DEFAULT_SOULMATE_AGE} years old"


def _image_or_none(future: Optional[Future]) -> Optional[str]:
    if future is None:
        return None
    try:
        return future.result()
    except Exception:
        # a failed sketch never costs the client their reading
        logger.exception("Image generation failed")
        return None


def generate_reading(request: ReadingRequest, client: GeminiClient) -> ReadingResponse:
    """Ask the model for a reading (plus a soulmate sketch when relevant)."""
    system_instruction, full_prompt = build_prompt_details(request)
    logger.info("Generating %r reading (premium=%s)", request.reading_type, request.is_premium)

    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            image_future = None
            if request.reading_type == SOULMATE_READING:
                image_future = pool.submit(client.generate_image, soulmate_image_prompt(request.gender, request.age))
            text_future = pool.submit(client.generate_text, system_instruction, full_prompt)
            text = text_future.result()
            image_url = _image_or_none(image_future)

        if not isinstance(text, str) or not text.strip():
            raise ReadingError(EMPTY_RESPONSE_MESSAGE)
        return ReadingResponse(text=text.strip() + CLOSING_NOTE, image_url=image_url)
    except Exception as e:
        logger.exception("Error generating reading from Gemini API")
        raise ReadingError(f"Gemini API Error: {e}") from e
