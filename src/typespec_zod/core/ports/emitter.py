from typing import Protocol


class FileEmitter(Protocol):
    def emit_file(self, path: str, content: str) -> None: ...
