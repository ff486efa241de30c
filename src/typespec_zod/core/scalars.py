from collections.abc import Mapping
from types import MappingProxyType

from typespec_zod.models import ScalarType

UNKNOWN_SCHEMA = "z.unknown()"

_STRING = "z.string()"
_NUMBER = "z.number()"
_BOOLEAN = "z.boolean()"
_DATE = "z.date()"

SCALAR_SCHEMAS: Mapping[str, str] = MappingProxyType(
    {
        "string": _STRING,
        "int8": _NUMBER,
        "int16": _NUMBER,
        "int32": _NUMBER,
        "int64": _NUMBER,
        "uint8": _NUMBER,
        "uint16": _NUMBER,
        "uint32": _NUMBER,
        "uint64": _NUMBER,
        "integer": _NUMBER,
        "safeint": _NUMBER,
        "float": _NUMBER,
        "float32": _NUMBER,
        "float64": _NUMBER,
        "decimal": _NUMBER,
        "decimal128": _NUMBER,
        "numeric": _NUMBER,
        "boolean": _BOOLEAN,
        "plainDate": _DATE,
        "plainTime": _DATE,
        "utcDateTime": _DATE,
        "offsetDateTime": _DATE,
        "duration": _STRING,
        "url": "z.string().url()",
        "bytes": "z.instanceof(Uint8Array)",
    }
)


def resolve_root_scalar(scalar: ScalarType) -> ScalarType:
    """Follow the base-scalar chain (``scalar Email extends string``) to its primitive."""
    root = scalar
    while root.base_scalar is not None:
        root = root.base_scalar
    return root


def scalar_schema(scalar: ScalarType) -> str:
    return SCALAR_SCHEMAS.get(resolve_root_scalar(scalar).name, UNKNOWN_SCHEMA)
