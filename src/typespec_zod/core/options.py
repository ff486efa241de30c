import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_OUTPUT_DIR = "tsp-output/typespec-zod-emitter"
DEFAULT_OUTPUT_FILE = "schemas.ts"


class EmitterOptions(BaseModel):
    """Emitter options, keyed the way they appear under ``options`` in ``tspconfig.yaml``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    output_dir: str = Field(DEFAULT_OUTPUT_DIR, alias="output-dir")
    output_file: str = Field(DEFAULT_OUTPUT_FILE, alias="output-file")
    package_name: str | None = Field(None, alias="package-name")
    package_version: str | None = Field(None, alias="package-version")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @property
    def emits_package(self) -> bool:
        """Package artifacts are generated only when both name and version are set."""
        return bool(self.package_name and self.package_version)

    def merged(self, **overrides: str | None) -> "EmitterOptions":
        values = {**self.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
        return EmitterOptions.model_validate(values)


def load_options(path: str | Path) -> EmitterOptions:
    options_path = Path(path)
    try:
        raw = json.loads(options_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FileNotFoundError(f"Options file not found: {path}") from None
    return EmitterOptions.model_validate(raw)
