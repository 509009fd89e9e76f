from __future__ import annotations

from shared_types.registry import ShapeRegistry


_LOADED = False


def load_builtin_shapes(*, reload: bool = False) -> None:
    """Make sure the built-in shapes are registered.

    Importing the model modules registers them through ``@register_shape``. Once a
    module is imported its decorator never runs again, so after
    ``ShapeRegistry.clear()`` call with ``reload=True`` to register them directly.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    from shared_types.models.product import Product
    from shared_types.models.user import User

    if reload:
        ShapeRegistry.clear()

    ShapeRegistry.register(name="user", model_class=User, overwrite=True)
    ShapeRegistry.register(name="product", model_class=Product, overwrite=True)

    _LOADED = True
