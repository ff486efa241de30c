"""Translate TypeSpec type nodes into Zod schema expressions."""

import json
import math
import re
from collections.abc import Iterable, Sequence

from typespec_zod.core.scalars import UNKNOWN_SCHEMA, scalar_schema
from typespec_zod.models import (
    BooleanLiteralType,
    EnumType,
    ModelProperty,
    ModelType,
    NumberLiteralType,
    ScalarType,
    StringLiteralType,
    TypeNode,
    UnionType,
)

NEVER_SCHEMA = "z.never()"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def schema_name(type_name: str) -> str:
    return f"{type_name}Schema"


def string_literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def number_literal(value: int | float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def number_literal_schema(value: int | float) -> str:
    # z.literal(NaN) never matches, since NaN !== NaN
    if isinstance(value, float) and math.isnan(value):
        return "z.nan()"
    return f"z.literal({number_literal(value)})"


def property_key(name: str) -> str:
    return name if _IDENTIFIER_RE.match(name) else string_literal(name)


class SchemaTranslator:
    """Stateful translator for one generated document.

    ``model_names`` are the models that will be defined in the document. A reference
    to one of them that has not been marked as defined yet (a back-edge dropped while
    ordering, or a self-reference) is emitted as ``z.lazy(...)`` so the generated
    module never reads a ``const`` before its initialization. Models whose schema
    holds such a reference need an explicit type annotation, because TypeScript
    cannot infer the type of a ``const`` that refers to itself.
    """

    def __init__(self, model_names: Iterable[str] = ()) -> None:
        self._model_names = frozenset(model_names)
        self._defined: set[str] = set()
        self._lazy_used = False

    def mark_defined(self, name: str) -> None:
        self._defined.add(name)

    def model_object_schema(self, model: ModelType) -> tuple[str, bool]:
        """Return the object schema of a named model and whether it holds a lazy reference."""
        self._lazy_used = False
        body = self.object_schema(model.properties)
        return body, self._lazy_used

    def type_schema(self, node: TypeNode, depth: int = 0) -> str:
        if isinstance(node, ScalarType):
            return scalar_schema(node)
        if isinstance(node, ModelType):
            return self._model_type_schema(node, depth)
        if isinstance(node, EnumType):
            return schema_name(node.name)
        if isinstance(node, UnionType):
            return self._union_schema(node, depth)
        if isinstance(node, StringLiteralType):
            return f"z.literal({string_literal(node.value)})"
        if isinstance(node, NumberLiteralType):
            return number_literal_schema(node.value)
        if isinstance(node, BooleanLiteralType):
            return f"z.literal({'true' if node.value else 'false'})"
        return UNKNOWN_SCHEMA

    def property_schema(self, prop: ModelProperty, depth: int = 0) -> str:
        schema = self.type_schema(prop.type, depth)
        if prop.optional:
            schema += ".optional()"
        return schema

    def object_schema(self, properties: Sequence[ModelProperty], depth: int = 0) -> str:
        if not properties:
            return "z.object({})"
        indent = "\t" * (depth + 1)
        lines = [f"{indent}{property_key(p.name)}: {self.property_schema(p, depth + 1)}" for p in properties]
        closing = "\t" * depth
        return "z.object({\n" + ",\n".join(lines) + f"\n{closing}}})"

    def _model_type_schema(self, model: ModelType, depth: int) -> str:
        indexer = model.indexer
        if model.name == "Array" and indexer is not None:
            return f"z.array({self.type_schema(indexer.value, depth)})"
        if indexer is not None and indexer.key.name == "string":
            return f"z.record(z.string(), {self.type_schema(indexer.value, depth)})"
        if not model.name:
            return self.object_schema(model.properties, depth)
        return self._reference(model.name)

    def _reference(self, name: str) -> str:
        if name in self._model_names and name not in self._defined:
            self._lazy_used = True
            return f"z.lazy(() => {schema_name(name)})"
        return schema_name(name)

    def _union_schema(self, union: UnionType, depth: int) -> str:
        variants = union.variants
        if not variants:
            return NEVER_SCHEMA
        if len(variants) == 1:
            return self.type_schema(variants[0].type, depth)
        schemas = [self.type_schema(v.type, depth) for v in variants]
        return f"z.union([{', '.join(schemas)}])"
