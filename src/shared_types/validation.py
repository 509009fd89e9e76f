"""
Structural checks against the shared shapes.

A shape can be given as a model class (``User``) or as a registered name
(``"user"``). Values are mappings in wire form, JSON text, or model instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from shared_types.bootstrap import load_builtin_shapes
from shared_types.core.exceptions import ContractValidationError
from shared_types.core.logger import get_logger
from shared_types.registry import ShapeRegistry

logger = get_logger(__name__)

ShapeRef = Union[str, Type[BaseModel]]


def resolve_shape(shape: ShapeRef) -> Type[BaseModel]:
    if isinstance(shape, str):
        load_builtin_shapes()
        return ShapeRegistry.get(shape)
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape
    raise TypeError(f"shape must be a registered name or a model class, got {shape!r}")


def _shape_name(model_class: Type[BaseModel]) -> str:
    return model_class.__name__.lower()


def _wire_names(model_class: Type[BaseModel]) -> Dict[str, str]:
    return {name: info.alias or name for name, info in model_class.model_fields.items()}


def _to_contract_error(model_class: Type[BaseModel], exc: ValidationError) -> ContractValidationError:
    wire = _wire_names(model_class)
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc:
            loc[0] = wire.get(loc[0], loc[0])
        errors.append(
            {
                "field": ".".join(loc) or "<value>",
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return ContractValidationError(
        reason=f"Value does not conform to shape {_shape_name(model_class)!r}",
        details={"shape": _shape_name(model_class), "errors": errors},
    )


def parse(shape: ShapeRef, value: Any) -> BaseModel:
    """Validate ``value`` against ``shape`` and return the model instance.

    Raises:
        ContractValidationError: if the value is missing a field or a field has
            the wrong primitive type.
        ShapeRegistryError: if ``shape`` is an unknown name.
    """
    model_class = resolve_shape(shape)

    if isinstance(value, model_class):
        return value

    try:
        if isinstance(value, (str, bytes, bytearray)):
            instance = model_class.model_validate_json(value)
        elif isinstance(value, Mapping):
            instance = model_class.model_validate(dict(value))
        else:
            instance = model_class.model_validate(value)
    except ValidationError as exc:
        error = _to_contract_error(model_class, exc)
        logger.debug(f"{error.reason}: fields={error.fields}")
        raise error from exc

    logger.debug(f"Value conforms to shape {_shape_name(model_class)!r}")
    return instance


def conforms(shape: ShapeRef, value: Any) -> bool:
    """True when a structural type-checker would accept ``value`` as ``shape``."""
    try:
        parse(shape, value)
    except ContractValidationError:
        return False
    return True


def missing_fields(shape: ShapeRef, value: Mapping) -> List[str]:
    """Wire names of required fields absent from ``value``, in declaration order."""
    model_class = resolve_shape(shape)
    missing = []
    for name, info in model_class.model_fields.items():
        if not info.is_required():
            continue
        alias = info.alias or name
        if alias not in value and name not in value:
            missing.append(alias)
    return missing


def to_wire(instance: BaseModel) -> Dict[str, Any]:
    """Dump a model with wire (camelCase) names, extra fields included."""
    return instance.model_dump(by_alias=True, mode="json")


def json_schema(shape: ShapeRef) -> Dict[str, Any]:
    """JSON Schema of a shape, in wire names."""
    return resolve_shape(shape).model_json_schema(by_alias=True)


@dataclass
class ValidationReport:
    shape: str
    total: int = 0
    failures: List[Tuple[int, ContractValidationError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def passed(self) -> int:
        return self.total - len(self.failures)


def validate_records(shape: ShapeRef, records: Iterable[Any]) -> ValidationReport:
    """Check every record; collect failures instead of stopping at the first one."""
    model_class = resolve_shape(shape)
    report = ValidationReport(shape=_shape_name(model_class))
    for index, record in enumerate(records):
        report.total += 1
        try:
            parse(model_class, record)
        except ContractValidationError as exc:
            report.failures.append((index, exc))
    logger.debug(f"Checked {report.total} record(s) against {report.shape!r}: {len(report.failures)} failure(s)")
    return report
