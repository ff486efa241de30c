from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag
from pydantic.alias_generators import to_camel

_KNOWN_KINDS = frozenset({"Scalar", "Model", "Enum", "Union", "String", "Number", "Boolean"})


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ScalarType(_Node):
    kind: Literal["Scalar"] = "Scalar"
    name: str
    base_scalar: "ScalarType | None" = None


class ModelIndexer(_Node):
    key: ScalarType
    value: "TypeNode"


class ModelProperty(_Node):
    name: str
    type: "TypeNode"
    optional: bool = False


class ModelType(_Node):
    kind: Literal["Model"] = "Model"
    name: str = ""
    properties: tuple[ModelProperty, ...] = ()
    indexer: ModelIndexer | None = None
    template_parameters: tuple[str, ...] = ()
    user_defined: bool = True


class EnumMember(_Node):
    name: str
    value: str | int | float | None = None


class EnumType(_Node):
    kind: Literal["Enum"] = "Enum"
    name: str
    members: tuple[EnumMember, ...] = ()
    user_defined: bool = True


class UnionVariant(_Node):
    name: str | None = None
    type: "TypeNode"


class UnionType(_Node):
    kind: Literal["Union"] = "Union"
    name: str = ""
    variants: tuple[UnionVariant, ...] = ()


class StringLiteralType(_Node):
    kind: Literal["String"] = "String"
    value: str


class NumberLiteralType(_Node):
    kind: Literal["Number"] = "Number"
    value: int | float


class BooleanLiteralType(_Node):
    kind: Literal["Boolean"] = "Boolean"
    value: bool


class UnknownType(_Node):
    """Any node kind the emitter has no translation for (tuples, intrinsics, operations...)."""

    model_config = ConfigDict(extra="allow")

    kind: str = "Unknown"


def _node_kind(value: Any) -> str:
    kind = value.get("kind") if isinstance(value, dict) else getattr(value, "kind", None)
    return kind if kind in _KNOWN_KINDS else "Unknown"


TypeNode = Annotated[
    Union[
        Annotated[ScalarType, Tag("Scalar")],
        Annotated[ModelType, Tag("Model")],
        Annotated[EnumType, Tag("Enum")],
        Annotated[UnionType, Tag("Union")],
        Annotated[StringLiteralType, Tag("String")],
        Annotated[NumberLiteralType, Tag("Number")],
        Annotated[BooleanLiteralType, Tag("Boolean")],
        Annotated[UnknownType, Tag("Unknown")],
    ],
    Discriminator(_node_kind),
]


class Namespace(_Node):
    name: str = ""
    models: tuple[ModelType, ...] = ()
    enums: tuple[EnumType, ...] = ()
    namespaces: tuple["Namespace", ...] = ()


# necessary for recursive types
ScalarType.model_rebuild()
ModelIndexer.model_rebuild()
ModelProperty.model_rebuild()
ModelType.model_rebuild()
UnionVariant.model_rebuild()
Namespace.model_rebuild()
