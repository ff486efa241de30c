from typespec_zod.emitters.filesystem import FileSystemEmitter
from typespec_zod.emitters.memory import InMemoryEmitter

__all__ = [
    "FileSystemEmitter",
    "InMemoryEmitter",
]
