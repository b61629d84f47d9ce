import json
from typing import Any

import yaml

# ----------------------------
# Output formatting
# ----------------------------


def output_result(result: Any, fmt: str = "text") -> None:
    """
    Print a command result.
    - json / yaml dump the structure as-is
    - text prints one "key: value" line per entry, lists indented below
    """
    if fmt == "json":
        print(json.dumps(result, indent=2))
        return

    if fmt == "yaml":
        print(yaml.safe_dump(result, sort_keys=False), end="")
        return

    if not isinstance(result, dict):
        print(result)
        return

    _print_mapping(result, indent="")


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _print_mapping(mapping: dict[str, Any], indent: str) -> None:
    for key, value in mapping.items():
        if isinstance(value, dict):
            print(f"{indent}{key}:")
            _print_mapping(value, indent + "  ")
        elif isinstance(value, list):
            print(f"{indent}{key}:")
            for item in value:
                print(f"{indent}  - {_format_scalar(item)}")
        else:
            print(f"{indent}{key}: {_format_scalar(value)}")
