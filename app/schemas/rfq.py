from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Unit(str, Enum):
    KG = "kg"
    TON = "ton"


class Incoterm(str, Enum):
    FOB = "FOB"
    CFR = "CFR"
    CIF = "CIF"
    EXW = "EXW"


class QuoteRequest(BaseModel):
    """
    A request for quote on one catalog product.

    Product identifiers come from the client and are used for display only;
    they are not checked against the catalog. ``unit`` and ``incoterm`` are
    expected to hold ``Unit`` / ``Incoterm`` values but are kept as submitted.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )

    product_slug: str = Field(alias="product")
    product_name: str = Field(alias="productName")
    product_reference_code: Optional[str] = Field(default=None, alias="productId2")
    company: str
    contact_name: str = Field(alias="contactName")
    email: str
    quantity: str
    unit: str
    incoterm: str
    destination: Optional[str] = None
    message: Optional[str] = None
    origin_url: Optional[str] = Field(default=None, alias="originUrl")

    @field_validator("product_reference_code", "destination", "message", "origin_url")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class QuoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    reference_id: str = Field(alias="referenceId")
