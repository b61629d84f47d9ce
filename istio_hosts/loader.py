import glob
import logging
import os
from typing import Any

from istio_hosts import registry
from istio_hosts.model import load_json, load_yaml, normalize_items
from istio_hosts.objects import IstioObject

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")

# ----------------------------
# Object loader
# ----------------------------


def validate_object(obj: IstioObject, source: str = "<input>") -> None:
    if not obj.kind:
        raise ValueError(f"Object in {source} is missing 'kind'")
    if not obj.name:
        raise ValueError(f"{obj.kind} in {source} is missing 'metadata.name'")

    gv = registry.group_version_for_kind(obj.kind)
    if gv is None:
        logger.info("Unknown kind %s in %s, keeping untyped spec", obj.kind, source)
        return
    if obj.api_version and obj.api_version != gv.api_version:
        raise ValueError(
            f"{obj.kind} {obj.name} in {source} has apiVersion "
            f"'{obj.api_version}', expected '{gv.api_version}'"
        )


def _read_documents(path: str) -> list[Any]:
    if path.endswith(_YAML_SUFFIXES):
        return load_yaml(path)
    return [load_json(path)]


def load_file(path: str) -> list[IstioObject]:
    objects: list[IstioObject] = []
    for doc in _read_documents(path):
        try:
            items = [IstioObject.from_dict(item) for item in normalize_items(doc)]
        except ValueError as e:
            raise ValueError(f"Malformed document in {path}: {e}") from e
        for obj in items:
            validate_object(obj, source=path)
            objects.append(obj)
    logger.debug("Loaded %d objects from %s", len(objects), path)
    return objects


def load_objects(path: str) -> list[IstioObject]:
    """
    Load Istio objects from a file, or from every JSON/YAML file in a folder.
    """
    if not os.path.isdir(path):
        return load_file(path)

    files: list[str] = []
    for pattern in ("*.json", "*.yaml", "*.yml"):
        files.extend(glob.glob(os.path.join(path, pattern)))

    objects: list[IstioObject] = []
    for file in sorted(files):
        objects.extend(load_file(file))
    return objects
