import json
from typing import Any

import yaml

# ----------------------------
# Parsing utilities
# ----------------------------


def load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_yaml(path: str) -> list[Any]:
    with open(path, encoding="utf-8") as f:
        # skip empty documents
        return [doc for doc in yaml.safe_load_all(f) if doc]


def normalize_items(data: Any) -> list[dict[str, Any]]:
    if isinstance(data, list):
        items: list[dict[str, Any]] = []
        for entry in data:
            items.extend(normalize_items(entry))
        return items
    if not isinstance(data, dict):
        raise ValueError(f"Expected a Kubernetes object, got {type(data).__name__}")
    if data.get("kind") == "List" or str(data.get("kind", "")).endswith("List"):
        items = data.get("items") or []
        if not isinstance(items, list):
            raise ValueError(f"List items must be a list, got {type(items).__name__}")
        for item in items:
            if not isinstance(item, dict):
                raise ValueError(
                    f"List items must be Kubernetes objects, got {type(item).__name__}"
                )
        return list(items)
    return [data]
