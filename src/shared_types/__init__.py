"""shared_types.

Shared data contracts for the packages of the platform.

Other packages import these shapes by name so they agree on field names and
primitive types. Models are pydantic; the wire form uses camelCase names.
"""

from shared_types.core.exceptions import (
    ContractValidationError,
    DocumentLoadError,
    SharedTypesException,
    ShapeRegistryError,
)
from shared_types.models.product import Product
from shared_types.models.user import User
from shared_types.registry import ShapeRegistry, register_shape
from shared_types.validation import conforms, json_schema, missing_fields, parse, to_wire

__version__ = "0.1.0"

__all__ = [
    "ContractValidationError",
    "DocumentLoadError",
    "Product",
    "SharedTypesException",
    "ShapeRegistry",
    "ShapeRegistryError",
    "User",
    "conforms",
    "json_schema",
    "missing_fields",
    "parse",
    "register_shape",
    "to_wire",
]
