import logging
from pathlib import Path

from typespec_zod.core.artifacts import generate_package_artifacts
from typespec_zod.core.collect import collect_types
from typespec_zod.core.document import generate_zod_schemas
from typespec_zod.core.options import EmitterOptions
from typespec_zod.core.ports.emitter import FileEmitter
from typespec_zod.models import Namespace

logger = logging.getLogger(__name__)


def run_emit(root: Namespace, emitter: FileEmitter, options: EmitterOptions | None = None) -> list[str]:
    """Generate Zod schemas for every user-defined type under ``root``.

    Returns the emitted paths in write order; empty when there was nothing to emit,
    in which case ``emitter`` is never called.
    """
    options = options or EmitterOptions()
    collected = collect_types(root)
    if collected.is_empty:
        logger.info("No user-defined models or enums found; nothing to emit")
        return []

    output_dir = Path(options.output_dir)
    files = {
        options.output_file: generate_zod_schemas(
            collected.models,
            collected.enums,
            options.package_name,
            options.package_version,
        )
    }

    if options.emits_package:
        assert options.package_name is not None and options.package_version is not None
        files.update(
            generate_package_artifacts(
                options.package_name,
                options.package_version,
                collected.models,
                collected.enums,
                options.output_file,
            )
        )

    written: list[str] = []
    for name, content in files.items():
        path = str(output_dir / name)
        emitter.emit_file(path, content)
        written.append(path)
    return written
