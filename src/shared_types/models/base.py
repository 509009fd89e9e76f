from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def _snake_to_camel(value: str) -> str:
    head, *rest = value.split("_")
    return head + "".join(word.capitalize() for word in rest)


class SharedModel(BaseModel):
    """Base for every shared shape.

    Attributes are snake_case in Python and camelCase on the wire. Field types
    are checked strictly, so ``"999"`` is not an integer and ``1`` is not a string.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=_snake_to_camel,
        strict=True,
    )
