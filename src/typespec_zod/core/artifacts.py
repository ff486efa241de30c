"""Companion files that turn the generated schemas into a publishable npm package."""

import json
from collections.abc import Sequence
from pathlib import PurePosixPath
from typing import Any

from typespec_zod.core.document import ZOD_IMPORT
from typespec_zod.core.options import DEFAULT_OUTPUT_FILE
from typespec_zod.core.translate import schema_name
from typespec_zod.models import EnumType, ModelType

ZOD_PEER_RANGE = "^3.0.0"

_NPM_IGNORE_ENTRIES = (
    "tsconfig.json",
    "*.tsp",
    "tsp-output/",
    "node_modules/",
    "*.log",
    ".DS_Store",
)


def _to_json(value: dict[str, Any]) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def _module_stem(output_file: str) -> str:
    return f"./{PurePosixPath(output_file).with_suffix('')}"


def generate_package_json(package_name: str, package_version: str, output_file: str = DEFAULT_OUTPUT_FILE) -> str:
    stem = _module_stem(output_file)
    return _to_json(
        {
            "name": package_name,
            "version": package_version,
            "type": "module",
            "main": f"{stem}.js",
            "types": f"{stem}.d.ts",
            "exports": {
                ".": {
                    "types": f"{stem}.d.ts",
                    "default": f"{stem}.js",
                },
            },
            "peerDependencies": {
                "zod": ZOD_PEER_RANGE,
            },
        }
    )


def generate_readme(package_name: str, models: Sequence[ModelType], enums: Sequence[EnumType]) -> str:
    schema_list = [f"- `{schema_name(e.name)}` - Enum for {e.name}" for e in enums]
    schema_list += [f"- `{schema_name(m.name)}` - {m.name} model" for m in models]

    example = models[0].name if models else enums[0].name if enums else "Example"
    example_schema = schema_name(example)
    schemas = "\n".join(schema_list)

    return f"""# {package_name}

Auto-generated Zod schemas from TypeSpec definitions.

## Installation

```bash
npm install {package_name} zod
```

## Usage

```typescript
import {{ {example_schema} }} from "{package_name}";
{ZOD_IMPORT}

// Validate data
const data = {{
  // your data here
}};

const validated = {example_schema}.parse(data);

// Type inference
type {example} = z.infer<typeof {example_schema}>;
```

## Available Schemas

{schemas}

## Generated by

This package was generated by typespec-zod.
"""


def generate_tsconfig(output_file: str = DEFAULT_OUTPUT_FILE) -> str:
    return _to_json(
        {
            "compilerOptions": {
                "target": "ES2020",
                "module": "ESNext",
                "moduleResolution": "bundler",
                "declaration": True,
                "declarationMap": True,
                "sourceMap": True,
                "outDir": ".",
                "rootDir": ".",
                "strict": True,
                "esModuleInterop": True,
                "skipLibCheck": True,
                "forceConsistentCasingInFileNames": True,
            },
            "include": [output_file],
            "exclude": ["node_modules"],
        }
    )


def generate_npmignore() -> str:
    return "\n".join(_NPM_IGNORE_ENTRIES) + "\n"


def generate_package_artifacts(
    package_name: str,
    package_version: str,
    models: Sequence[ModelType],
    enums: Sequence[EnumType],
    output_file: str = DEFAULT_OUTPUT_FILE,
) -> dict[str, str]:
    """Return ``{file name: content}`` for every companion file, in write order."""
    return {
        "package.json": generate_package_json(package_name, package_version, output_file),
        "README.md": generate_readme(package_name, models, enums),
        "tsconfig.json": generate_tsconfig(output_file),
        ".npmignore": generate_npmignore(),
    }
