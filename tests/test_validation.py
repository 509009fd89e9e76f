import json

import pytest

from shared_types.core.exceptions import ContractValidationError, ShapeRegistryError
from shared_types.models.product import Product
from shared_types.models.user import User
from shared_types.validation import (
    conforms,
    json_schema,
    missing_fields,
    parse,
    resolve_shape,
    to_wire,
    validate_records,
)

WIDGET = {"id": "p1", "name": "Widget", "priceInCents": 999, "vendorId": "v1"}


def test_parse_by_name_returns_model_instance():
    user = parse("user", {"id": "u1", "email": "a@example.com"})

    assert isinstance(user, User)
    assert user.email == "a@example.com"


def test_parse_by_class_and_name_agree():
    assert parse(Product, WIDGET) == parse("product", WIDGET)


def test_parse_accepts_json_text():
    product = parse("product", json.dumps(WIDGET))

    assert isinstance(product, Product)
    assert product.price_in_cents == 999


def test_parse_returns_existing_instance_unchanged():
    user = User(id="u1", email="a@example.com")

    assert parse("user", user) is user


def test_parse_reports_missing_fields_in_wire_names():
    with pytest.raises(ContractValidationError) as exc:
        parse("product", {"id": "p1", "name": "Widget"})

    assert exc.value.details["shape"] == "product"
    assert sorted(exc.value.fields) == ["priceInCents", "vendorId"]
    assert {err["type"] for err in exc.value.errors} == {"missing"}
    assert isinstance(exc.value.__cause__, Exception)


def test_parse_reports_wrong_primitive_type():
    with pytest.raises(ContractValidationError) as exc:
        parse("product", {**WIDGET, "priceInCents": "999"})

    assert exc.value.fields == ["priceInCents"]


def test_parse_accepts_json_bytes():
    user = parse("user", b'{"id": "u1", "email": "a@example.com"}')

    assert isinstance(user, User)
    assert user.id == "u1"


def test_parse_rejects_invalid_json_text():
    with pytest.raises(ContractValidationError) as exc:
        parse("user", "{not json")

    assert exc.value.fields == ["<value>"]


def test_parse_rejects_non_mapping():
    with pytest.raises(ContractValidationError):
        parse("user", 42)


def test_parse_unknown_shape_raises_registry_error():
    with pytest.raises(ShapeRegistryError, match="No shape registered"):
        parse("vendor", {"id": "v1"})


def test_resolve_shape_rejects_non_model_type():
    with pytest.raises(TypeError):
        resolve_shape(dict)


def test_shape_names_are_case_insensitive():
    assert resolve_shape("Product") is Product


def test_conforms_matches_structural_acceptance():
    assert conforms("user", {"id": "u1", "email": "a@example.com"})
    assert conforms("product", WIDGET)
    assert not conforms("user", {"id": "u1"})
    assert not conforms("product", {**WIDGET, "vendorId": 7})


@pytest.mark.parametrize("missing", ["id", "name", "priceInCents", "vendorId"])
def test_omitting_any_product_field_is_rejected(missing):
    data = {k: v for k, v in WIDGET.items() if k != missing}

    assert not conforms("product", data)
    assert missing_fields("product", data) == [missing]


def test_missing_fields_accepts_python_attribute_names():
    data = {"id": "p1", "name": "Widget", "price_in_cents": 1}

    assert missing_fields(Product, data) == ["vendorId"]


def test_missing_fields_empty_for_complete_record():
    assert missing_fields("user", {"id": "u1", "email": "a@example.com"}) == []


def test_to_wire_uses_camel_case_and_keeps_extras():
    user = parse("user", {"id": "u1", "email": "a@example.com", "locale": "fr"})
    product = parse("product", WIDGET)

    assert to_wire(user) == {"id": "u1", "email": "a@example.com", "locale": "fr"}
    assert to_wire(product) == WIDGET


def test_json_schema_uses_wire_names():
    schema = json_schema("product")

    assert set(schema["properties"]) == {"id", "name", "priceInCents", "vendorId"}
    assert sorted(schema["required"]) == ["id", "name", "priceInCents", "vendorId"]
    assert schema["properties"]["priceInCents"]["type"] == "integer"


def test_json_schema_describes_every_field():
    for shape in ("user", "product"):
        schema = json_schema(shape)
        assert all(prop.get("description") for prop in schema["properties"].values())


def test_json_schema_marks_user_as_open():
    schema = json_schema(User)

    assert schema.get("additionalProperties") is True
    assert sorted(schema["required"]) == ["email", "id"]


def test_validate_records_collects_every_failure():
    report = validate_records(
        "product",
        [WIDGET, {"id": "p2"}, {**WIDGET, "priceInCents": 1.5}],
    )

    assert report.shape == "product"
    assert report.total == 3
    assert report.passed == 1
    assert not report.ok
    assert [index for index, _ in report.failures] == [1, 2]


def test_validate_records_empty_is_ok():
    report = validate_records("user", [])

    assert report.ok
    assert report.total == 0
