from __future__ import annotations

from pydantic import ConfigDict, Field

from shared_types.models.base import SharedModel
from shared_types.registry import register_shape


@register_shape(name="user")
class User(SharedModel):
    """A user account as seen by every package.

    The shape is open: fields beyond ``id`` and ``email`` are kept as extras so
    producers can add fields before consumers know about them.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Opaque unique identifier.")
    email: str = Field(description="Address-shaped; format is not checked.")
