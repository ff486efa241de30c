import logging
from collections.abc import Iterator, Sequence

from typespec_zod.core.collect import is_intrinsic_model
from typespec_zod.models import EnumType, ModelType, TypeNode, UnionType

logger = logging.getLogger(__name__)


def model_dependencies(model: ModelType) -> tuple[str, ...]:
    """Return the model and enum names referenced by ``model``'s properties.

    Names are de-duplicated in first-reference order so that ordering stays
    deterministic across runs. The model's own name is never included.
    """
    dependencies: dict[str, None] = {}

    def _extract(node: TypeNode) -> None:
        if isinstance(node, ModelType):
            if node.name and not is_intrinsic_model(node):
                dependencies[node.name] = None
            if node.indexer is not None:
                _extract(node.indexer.value)
            if not node.name:
                for prop in node.properties:
                    _extract(prop.type)
        elif isinstance(node, EnumType):
            if node.name:
                dependencies[node.name] = None
        elif isinstance(node, UnionType):
            for variant in node.variants:
                _extract(variant.type)

    for prop in model.properties:
        _extract(prop.type)

    dependencies.pop(model.name, None)
    return tuple(dependencies)


def topological_sort(models: Sequence[ModelType], enums: Sequence[EnumType] = ()) -> list[ModelType]:
    """Order ``models`` so that every model follows the models it depends on.

    Depth-first with an explicit stack, so long dependency chains never hit the
    recursion limit: a model is appended after all of its dependencies. Enums and names
    outside ``models`` are ignored. An edge that leads back into the active path
    closes a cycle and is dropped, so the result is only best-effort for cyclic
    graphs but always terminates and lists every model exactly once.
    """
    enum_names = {e.name for e in enums}
    model_map: dict[str, ModelType] = {}
    for model in models:
        model_map.setdefault(model.name, model)

    visited: set[str] = set()
    visiting: set[str] = set()
    ordered: list[ModelType] = []

    def _visit(start: str) -> None:
        if start in visited or start in enum_names or start not in model_map:
            return

        visiting.add(start)
        stack: list[tuple[str, Iterator[str]]] = [(start, iter(model_dependencies(model_map[start])))]
        while stack:
            name, pending = stack[-1]
            for dependency in pending:
                if dependency in visited or dependency in enum_names or dependency not in model_map:
                    continue
                if dependency in visiting:
                    logger.debug("Dependency cycle: dropping edge %s -> %s", name, dependency)
                    continue
                visiting.add(dependency)
                stack.append((dependency, iter(model_dependencies(model_map[dependency]))))
                break
            else:
                stack.pop()
                visiting.discard(name)
                visited.add(name)
                ordered.append(model_map[name])

    for model in models:
        _visit(model.name)

    return ordered
