from __future__ import annotations

from typing import Callable, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel

from shared_types.core.exceptions import ShapeRegistryError


class ShapeRegistry:
    """Maps a shape name such as ``"user"`` to its model class."""

    _registry: ClassVar[Dict[str, Type[BaseModel]]] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    @classmethod
    def register(
        cls,
        *,
        name: str,
        model_class: Type[BaseModel],
        overwrite: bool = False,
    ) -> None:
        key = cls._key(name)
        if not overwrite and key in cls._registry:
            existing = cls._registry[key]
            raise ShapeRegistryError(f"Shape already registered for name={key!r}: {existing}")
        cls._registry[key] = model_class

    @classmethod
    def get(cls, name: str) -> Type[BaseModel]:
        key = cls._key(name)
        try:
            return cls._registry[key]
        except KeyError as exc:
            known = ", ".join(sorted(cls._registry)) or "<none>"
            raise ShapeRegistryError(
                f"No shape registered for name={key!r} (known: {known})"
            ) from exc

    @classmethod
    def try_get(cls, name: str) -> Optional[Type[BaseModel]]:
        return cls._registry.get(cls._key(name))

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_shape(*, name: str, overwrite: bool = False) -> Callable[[Type[BaseModel]], Type[BaseModel]]:
    def decorator(model_class: Type[BaseModel]) -> Type[BaseModel]:
        ShapeRegistry.register(name=name, model_class=model_class, overwrite=overwrite)
        return model_class

    return decorator
