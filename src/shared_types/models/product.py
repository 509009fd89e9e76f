from __future__ import annotations

from pydantic import Field

from shared_types.models.base import SharedModel
from shared_types.registry import register_shape


@register_shape(name="product")
class Product(SharedModel):
    id: str = Field(description="Opaque unique identifier.")
    name: str = Field(description="Display name.")
    price_in_cents: int = Field(description="Price in minor currency units.")
    vendor_id: str = Field(description="Identifier of the owning vendor.")
