from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.schemas.rfq import Incoterm, Unit


class _CatalogModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RfqDefaults(_CatalogModel):
    unit: Unit


class ProductCatalogEntry(_CatalogModel):
    id: str
    id2: str
    slug: str
    name: str
    category: str
    summary: str
    hs_code: str
    origin_countries: List[str]
    specs: Dict[str, str]
    packaging: str
    moq_kg: int
    incoterms: List[Incoterm]
    lead_time_days: int
    images: List[str]
    datasheet_url: Optional[str] = None
    rfq_defaults: RfqDefaults
