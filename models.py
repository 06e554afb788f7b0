from typing import Any, Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

Gender = Literal['Male', 'Female', 'Non-binary', 'Prefer not to say']


class ReadingRequest(BaseModel):
    """Details a client submits through the reading form."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    age: Optional[int] = None
    gender: Gender = 'Prefer not to say'
    prompt: str = ''
    # Kept as a plain string: unknown types fall back to the default template.
    reading_type: str = Field('GENERAL TAROT OR PSYCHIC READING', alias='readingType')
    is_premium: bool = Field(False, alias='isPremium')


class ReadingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    image_url: Optional[str] = Field(None, alias='imageUrl')

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class LoginRequest(BaseModel):
    # Any JSON value is accepted here; the handler decides what is valid.
    password: Any = None


class PromptDetails(NamedTuple):
    system_instruction: str
    full_prompt: str
