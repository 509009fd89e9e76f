"""
Exception classes for shared-types.

Everything raised on purpose by this package derives from SharedTypesException,
so consumers can catch one base class around contract checks.
"""

from typing import Any, Dict, List, Optional


class SharedTypesException(Exception):
    """Base exception class for all shared-types exceptions."""

    pass


class ContractValidationError(SharedTypesException):
    """
    Raised when a value does not conform to a shared shape.

    ``details["errors"]`` holds one entry per offending field, using wire
    (camelCase) field names so the report matches the document that failed.

    Example:
        >>> raise ContractValidationError(
        ...     reason="Value does not conform to shape 'product'",
        ...     details={"shape": "product", "errors": [{"field": "priceInCents", ...}]}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)

    @property
    def errors(self) -> List[Dict[str, Any]]:
        return list(self.details.get("errors", []))

    @property
    def fields(self) -> List[str]:
        """Wire names of the offending fields, in report order."""
        return [err["field"] for err in self.errors]


class ShapeRegistryError(SharedTypesException, RuntimeError):
    """Raised for an unknown shape name or a duplicate registration."""

    pass


class DocumentLoadError(SharedTypesException):
    """Raised when a document cannot be read or decoded."""

    pass
