from collections.abc import Sequence

from typespec_zod.core.dependencies import topological_sort
from typespec_zod.core.translate import (
    NEVER_SCHEMA,
    SchemaTranslator,
    number_literal_schema,
    schema_name,
    string_literal,
)
from typespec_zod.models import EnumType, ModelType

ZOD_IMPORT = 'import { z } from "zod";'


def metadata_header(package_name: str | None = None, package_version: str | None = None) -> str:
    if not package_name and not package_version:
        return ""
    lines = ["/**"]
    if package_name:
        lines.append(f" * Package: {package_name}")
    if package_version:
        lines.append(f" * Version: {package_version}")
    lines.append(" */")
    return "\n".join(lines)


def enum_schema(enum_type: EnumType) -> str:
    """String-valued enums become ``z.enum``; enums with numeric members become a union of literals."""
    name = schema_name(enum_type.name)
    if not enum_type.members:
        return f"export const {name} = {NEVER_SCHEMA};"

    values = [m.value if m.value is not None else m.name for m in enum_type.members]
    if all(isinstance(v, str) for v in values):
        quoted = ", ".join(string_literal(v) for v in values)  # type: ignore[arg-type]
        return f"export const {name} = z.enum([{quoted}]);"

    literals = [
        f"z.literal({string_literal(v)})" if isinstance(v, str) else number_literal_schema(v) for v in values
    ]
    if len(literals) == 1:
        return f"export const {name} = {literals[0]};"
    return f"export const {name} = z.union([{', '.join(literals)}]);"


def model_schema(model: ModelType, translator: SchemaTranslator) -> str:
    body, recursive = translator.model_object_schema(model)
    translator.mark_defined(model.name)
    annotation = ": z.ZodType<any>" if recursive else ""
    return f"export const {schema_name(model.name)}{annotation} = {body};"


def generate_zod_schemas(
    models: Sequence[ModelType],
    enums: Sequence[EnumType],
    package_name: str | None = None,
    package_version: str | None = None,
) -> str:
    """Render the complete ``schemas.ts`` module.

    Sections are the import line, the optional package comment, enum schemas in
    collection order and model schemas in dependency order, separated by blank
    lines. Empty sections are left out entirely.
    """
    sorted_models = topological_sort(models, enums)
    translator = SchemaTranslator(m.name for m in sorted_models)

    sections = [ZOD_IMPORT, metadata_header(package_name, package_version)]
    sections.extend(enum_schema(e) for e in enums)
    sections.extend(model_schema(m, translator) for m in sorted_models)

    return "\n\n".join(s for s in sections if s) + "\n"
