import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from typespec_zod.models import EnumType, ModelType, Namespace

logger = logging.getLogger(__name__)

_Declaration = TypeVar("_Declaration", ModelType, EnumType)


class TypeGraphError(ValueError):
    """Raised when a type graph document cannot be read at all."""


def _list_field(raw: dict[str, Any], key: str, path: str) -> list[Any]:
    items = raw.get(key) or []
    if not isinstance(items, list):
        logger.warning("Ignoring %s of %s: expected a list", key, path)
        return []
    return items


def _validate_each(items: list[Any], node_type: type[_Declaration], path: str) -> tuple[_Declaration, ...]:
    valid: list[_Declaration] = []
    for index, item in enumerate(items):
        try:
            valid.append(node_type.model_validate(item))
        except ValidationError as exc:
            name = item.get("name") if isinstance(item, dict) else None
            logger.warning(
                "Skipping malformed %s %s in %s (%d validation errors)",
                node_type.__name__,
                name if isinstance(name, str) and name else f"#{index}",
                path,
                exc.error_count(),
            )
    return tuple(valid)


def parse_namespace(raw: Any, path: str = "<global>") -> Namespace | None:
    """Validate one namespace and its children, dropping only what is malformed.

    Each model and enum is validated on its own, and nested namespaces are parsed
    before their parent's declarations, so one bad node never hides its valid
    siblings or children. Returns None only when ``raw`` is not an object.
    """
    if not isinstance(raw, dict):
        logger.warning("Skipping namespace %s: expected an object, got %s", path, type(raw).__name__)
        return None

    parsed: list[Namespace] = []
    for index, child in enumerate(_list_field(raw, "namespaces", path)):
        child_name = child.get("name") if isinstance(child, dict) else None
        child_path = f"{path}.{child_name}" if isinstance(child_name, str) and child_name else f"{path}[{index}]"
        child_namespace = parse_namespace(child, child_path)
        if child_namespace is not None:
            parsed.append(child_namespace)

    name = raw.get("name") or ""
    if not isinstance(name, str):
        logger.warning("Ignoring non-string name of namespace %s", path)
        name = ""

    return Namespace(
        name=name,
        models=_validate_each(_list_field(raw, "models", path), ModelType, path),
        enums=_validate_each(_list_field(raw, "enums", path), EnumType, path),
        namespaces=tuple(parsed),
    )


def load_type_graph_from_source(source: str) -> Namespace:
    try:
        raw = json.loads(source)
    except json.JSONDecodeError as exc:
        raise TypeGraphError(f"Type graph is not valid JSON: {exc}") from None

    root = parse_namespace(raw)
    if root is None:
        raise TypeGraphError("Global namespace of the type graph must be a JSON object.")
    return root


def load_type_graph(path: str | Path) -> Namespace:
    graph_path = Path(path)
    try:
        source = graph_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Type graph not found: {path}") from None

    return load_type_graph_from_source(source)
