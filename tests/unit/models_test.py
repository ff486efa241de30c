"""Unit tests for the type graph models."""

import pytest
from pydantic import ValidationError

from typespec_zod.models import (
    BooleanLiteralType,
    EnumType,
    ModelProperty,
    ModelType,
    Namespace,
    NumberLiteralType,
    ScalarType,
    UnionType,
    UnknownType,
)


def _prop(raw_type: dict) -> ModelProperty:
    return ModelProperty.model_validate({"name": "field", "type": raw_type})


class TestTypeNodeDiscrimination:
    def test_scalar_kind(self) -> None:
        assert isinstance(_prop({"kind": "Scalar", "name": "string"}).type, ScalarType)

    def test_model_kind(self) -> None:
        assert isinstance(_prop({"kind": "Model", "name": "Address"}).type, ModelType)

    def test_enum_kind(self) -> None:
        assert isinstance(_prop({"kind": "Enum", "name": "Status"}).type, EnumType)

    def test_union_kind(self) -> None:
        node = _prop({"kind": "Union", "variants": [{"type": {"kind": "Boolean", "value": True}}]}).type
        assert isinstance(node, UnionType)
        assert isinstance(node.variants[0].type, BooleanLiteralType)

    def test_number_literal_keeps_int(self) -> None:
        node = _prop({"kind": "Number", "value": 3}).type
        assert isinstance(node, NumberLiteralType)
        assert node.value == 3
        assert isinstance(node.value, int)

    def test_unrecognized_kind_becomes_unknown(self) -> None:
        node = _prop({"kind": "Tuple", "values": []}).type
        assert isinstance(node, UnknownType)
        assert node.kind == "Tuple"

    def test_missing_kind_becomes_unknown(self) -> None:
        assert isinstance(_prop({"name": "mystery"}).type, UnknownType)


class TestAliases:
    def test_accepts_camel_case_keys(self) -> None:
        scalar = ScalarType.model_validate(
            {"kind": "Scalar", "name": "int32", "baseScalar": {"kind": "Scalar", "name": "integer"}}
        )
        assert scalar.base_scalar is not None
        assert scalar.base_scalar.name == "integer"

    def test_accepts_snake_case_keys(self) -> None:
        model = ModelType.model_validate({"name": "Page", "template_parameters": ["T"], "user_defined": False})
        assert model.template_parameters == ("T",)
        assert model.user_defined is False


class TestDefaults:
    def test_model_defaults(self) -> None:
        model = ModelType(name="Empty")
        assert model.properties == ()
        assert model.indexer is None
        assert model.user_defined is True

    def test_property_is_required_by_default(self) -> None:
        assert _prop({"kind": "Scalar", "name": "string"}).optional is False

    def test_namespace_nests(self) -> None:
        ns = Namespace.model_validate({"name": "A", "namespaces": [{"name": "B"}]})
        assert ns.namespaces[0].name == "B"


def test_nodes_are_frozen() -> None:
    scalar = ScalarType(name="string")
    with pytest.raises(ValidationError):
        scalar.name = "boolean"  # type: ignore[misc]


def test_enum_requires_name() -> None:
    with pytest.raises(ValidationError):
        EnumType.model_validate({"members": []})
