import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemEmitter:
    """Write generated files to disk, creating parent directories as needed.

    Implements the ``FileEmitter`` protocol. Relative paths resolve against ``base_dir``.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def resolve(self, path: str) -> Path:
        return self._base_dir / path

    def emit_file(self, path: str, content: str) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps output byte-identical across platforms
        with target.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        logger.info("Wrote %s (%d bytes)", target, len(content.encode("utf-8")))
