from dataclasses import dataclass, field


@dataclass
class InMemoryEmitter:
    """Collects emitted files instead of writing them. Implements ``FileEmitter``."""

    files: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def emit_file(self, path: str, content: str) -> None:
        self.files[path] = content
        self.writes.append(path)
