from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToneId(str, Enum):
    PROFESSIONAL = "professional"
    WARM = "warm"
    ENTHUSIASTIC = "enthusiastic"


class TemplateId(str, Enum):
    FOLLOW_UP = "follow-up"
    WELCOME = "welcome"
    REMINDER = "reminder"


class Tone(BaseModel):
    """Phrasing fragments that give a composed email its voice."""

    model_config = ConfigDict(frozen=True)

    key: ToneId
    label: str
    description: str
    greeting: str = Field(..., description="Opening word(s), recipient name follows")
    connector: str = Field(..., description="Fallback intro sentence")
    closing: str = Field(..., description="Closing sentence, closing note is appended to it")
    signature: str = Field(..., description="Sign-off line, a comma is appended")
    highlight_heading: str = Field(..., description="Heading above the key points block")


class FieldValues(BaseModel):
    """
    Free-text input collected by the form.
    Every field is optional and defaults to the empty string.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    recipient: str = ""
    custom_subject: str = ""
    topic: str = ""
    context: str = ""
    key_points: str = Field("", description="Raw multi-line key points, one per line")
    action: str = ""
    date: str = ""
    closing_note: str = ""
    sender_name: str = ""
    sender_role: str = ""
    extra: str = Field("", description="Link, location or any extra detail")

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ComposeArgs(FieldValues):
    """FieldValues plus the resolved tone and the parsed key points."""

    tone: Tone
    key_points_list: List[str] = Field(default_factory=list)


class EmailTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: TemplateId
    title: str
    badge: str
    description: str
    subject: Callable[[ComposeArgs], str]
    body: Callable[[ComposeArgs], str]


class ComposeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str
    body: str
