from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ContactTopic(str, Enum):
    SALES = "sales"
    OTHER = "other"


TOPIC_LABELS = {
    ContactTopic.SALES: "Sales Inquiry",
    ContactTopic.OTHER: "General Inquiry",
}


class ContactMessage(BaseModel):
    """A general inquiry from the website contact form."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )

    # Presence is checked before parsing; values outside ContactTopic route
    # to the general inbox.
    topic: str
    name: str
    email: str
    message: str
    company: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    honeypot: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("hp", "honeypot")
    )

    @field_validator("company", "phone", "subject", "honeypot")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @property
    def is_sales(self) -> bool:
        return self.topic == ContactTopic.SALES.value

    @property
    def topic_label(self) -> str:
        return TOPIC_LABELS[ContactTopic.SALES if self.is_sales else ContactTopic.OTHER]


class ContactResponse(BaseModel):
    ok: bool = True
