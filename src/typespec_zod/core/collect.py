"""Collect user-authored model and enum declarations from a namespace tree."""

import logging
from dataclasses import dataclass

from typespec_zod.models import EnumType, ModelType, Namespace

logger = logging.getLogger(__name__)

INTRINSIC_MODEL_NAMES: frozenset[str] = frozenset({"Array", "Record"})
INTRINSIC_NAMESPACES: frozenset[str] = frozenset({"TypeSpec", "Reflection"})


@dataclass(frozen=True)
class CollectedTypes:
    models: tuple[ModelType, ...]
    enums: tuple[EnumType, ...]

    @property
    def is_empty(self) -> bool:
        return not self.models and not self.enums

    @property
    def model_names(self) -> frozenset[str]:
        return frozenset(m.name for m in self.models)

    @property
    def enum_names(self) -> frozenset[str]:
        return frozenset(e.name for e in self.enums)


def is_intrinsic_model(model: ModelType) -> bool:
    return model.name in INTRINSIC_MODEL_NAMES


def is_intrinsic_namespace(namespace: Namespace) -> bool:
    return namespace.name in INTRINSIC_NAMESPACES


def is_template_declaration(model: ModelType) -> bool:
    """Templated declarations with unbound parameters have no concrete shape to emit."""
    return bool(model.template_parameters)


def collect_types(root: Namespace) -> CollectedTypes:
    """Walk ``root`` depth-first and return the models and enums worth emitting.

    Declaration order is preserved: a namespace's own models and enums come before
    those of its nested namespaces. Names are unique in the result; the first
    declaration wins and later duplicates are skipped.
    """
    models: dict[str, ModelType] = {}
    enums: dict[str, EnumType] = {}

    def _collect(namespace: Namespace) -> None:
        if is_intrinsic_namespace(namespace):
            logger.debug("Skipping intrinsic namespace %s", namespace.name)
            return

        for model in namespace.models:
            if is_intrinsic_model(model) or not model.user_defined or not model.name:
                continue
            if is_template_declaration(model):
                logger.debug("Skipping template declaration %s", model.name)
                continue
            if model.name in models:
                logger.warning("Duplicate model name %s in namespace %r; keeping the first", model.name, namespace.name)
                continue
            models[model.name] = model

        for enum_type in namespace.enums:
            if not enum_type.user_defined:
                continue
            if enum_type.name in enums:
                logger.warning(
                    "Duplicate enum name %s in namespace %r; keeping the first", enum_type.name, namespace.name
                )
                continue
            enums[enum_type.name] = enum_type

        for child in namespace.namespaces:
            _collect(child)

    _collect(root)
    logger.info("Collected %d model(s) and %d enum(s)", len(models), len(enums))
    return CollectedTypes(models=tuple(models.values()), enums=tuple(enums.values()))
