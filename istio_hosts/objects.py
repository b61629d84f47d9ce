from dataclasses import dataclass, field
from typing import Any

from istio_hosts import registry
from istio_hosts.model import normalize_items

_ROUTE_SECTIONS = ("http", "tcp", "tls")


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


@dataclass
class IstioObject:
    """
    Istio config object as served by the Kubernetes API.

    Kinds listed in the registry are "known"; anything else (other CRDs)
    is kept with its spec untouched.
    """

    api_version: str
    kind: str
    metadata: dict[str, Any] = field(default_factory=dict)
    spec: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IstioObject":
        if not isinstance(data, dict):
            raise ValueError(f"Expected a Kubernetes object, got {type(data).__name__}")
        metadata = data.get("metadata") or {}
        spec = data.get("spec") or {}
        if not isinstance(metadata, dict):
            raise ValueError("metadata must be a mapping")
        if not isinstance(spec, dict):
            raise ValueError(f"spec of {data.get('kind')} must be a mapping")
        if not isinstance(data.get("kind", ""), str):
            raise ValueError("kind must be a string")
        return cls(
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
            metadata=metadata,
            spec=spec,
        )

    @property
    def known(self) -> bool:
        return registry.is_known_kind(self.kind)

    @property
    def name(self) -> str:
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> str:
        return self.metadata.get("namespace", "")

    @property
    def object_id(self) -> str:
        return f"{self.kind.lower()}:{self.namespace}/{self.name}"

    def hosts(self) -> list[str]:
        """
        Hostnames referenced by the spec, in order of appearance.
        """
        found: list[str] = []

        hosts = self.spec.get("hosts")
        if isinstance(hosts, list):
            found.extend(h for h in hosts if isinstance(h, str) and h)

        host = self.spec.get("host")
        if isinstance(host, str) and host:
            found.append(host)

        # VirtualService route destinations
        for section in _ROUTE_SECTIONS:
            for route_rule in _as_list(self.spec.get(section)):
                if not isinstance(route_rule, dict):
                    continue
                for route in _as_list(route_rule.get("route")):
                    if not isinstance(route, dict):
                        continue
                    destination = route.get("destination")
                    if not isinstance(destination, dict):
                        continue
                    dest_host = destination.get("host")
                    if isinstance(dest_host, str) and dest_host:
                        found.append(dest_host)

        return list(dict.fromkeys(found))

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": self.metadata,
            "spec": self.spec,
        }


@dataclass
class IstioObjectList:
    api_version: str = ""
    kind: str = "List"
    items: list[IstioObject] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IstioObjectList":
        return cls(
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", "List"),
            items=[IstioObject.from_dict(item) for item in normalize_items(data)],
        )


def _of_kind(objects: list[IstioObject], kind: str) -> list[IstioObject]:
    return [o for o in objects if o.kind == kind]


def _dump(objects: list[IstioObject]) -> list[dict[str, Any]]:
    return [o.to_dict() for o in objects]


@dataclass
class IstioDetails:
    """
    All Istio objects related to a Service, grouped by kind.
    """

    virtual_services: list[IstioObject] = field(default_factory=list)
    destination_rules: list[IstioObject] = field(default_factory=list)
    service_entries: list[IstioObject] = field(default_factory=list)
    gateways: list[IstioObject] = field(default_factory=list)

    @classmethod
    def from_objects(cls, objects: list[IstioObject]) -> "IstioDetails":
        return cls(
            virtual_services=_of_kind(objects, registry.VIRTUAL_SERVICE_TYPE),
            destination_rules=_of_kind(objects, registry.DESTINATION_RULE_TYPE),
            service_entries=_of_kind(objects, registry.SERVICE_ENTRY_TYPE),
            gateways=_of_kind(objects, registry.GATEWAY_TYPE),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            registry.VIRTUAL_SERVICES: _dump(self.virtual_services),
            registry.DESTINATION_RULES: _dump(self.destination_rules),
            registry.SERVICE_ENTRIES: _dump(self.service_entries),
            registry.GATEWAYS: _dump(self.gateways),
        }


@dataclass
class MTLSDetails:
    """
    Istio objects carrying non-local mTLS configuration.
    """

    destination_rules: list[IstioObject] = field(default_factory=list)
    mesh_policies: list[IstioObject] = field(default_factory=list)
    service_mesh_policies: list[IstioObject] = field(default_factory=list)
    policies: list[IstioObject] = field(default_factory=list)

    @classmethod
    def from_objects(cls, objects: list[IstioObject]) -> "MTLSDetails":
        return cls(
            destination_rules=_of_kind(objects, registry.DESTINATION_RULE_TYPE),
            mesh_policies=_of_kind(objects, registry.MESH_POLICY_TYPE),
            service_mesh_policies=_of_kind(objects, registry.SERVICE_MESH_POLICY_TYPE),
            policies=_of_kind(objects, registry.POLICY_TYPE),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            registry.DESTINATION_RULES: _dump(self.destination_rules),
            registry.MESH_POLICIES: _dump(self.mesh_policies),
            registry.SERVICE_MESH_POLICIES: _dump(self.service_mesh_policies),
            registry.POLICIES: _dump(self.policies),
        }


@dataclass
class RBACDetails:
    cluster_rbac_configs: list[IstioObject] = field(default_factory=list)
    service_mesh_rbac_configs: list[IstioObject] = field(default_factory=list)
    service_roles: list[IstioObject] = field(default_factory=list)
    service_role_bindings: list[IstioObject] = field(default_factory=list)
    authorization_policies: list[IstioObject] = field(default_factory=list)

    @classmethod
    def from_objects(cls, objects: list[IstioObject]) -> "RBACDetails":
        return cls(
            cluster_rbac_configs=_of_kind(objects, registry.CLUSTER_RBAC_CONFIG_TYPE),
            service_mesh_rbac_configs=_of_kind(
                objects, registry.SERVICE_MESH_RBAC_CONFIG_TYPE
            ),
            service_roles=_of_kind(objects, registry.SERVICE_ROLE_TYPE),
            service_role_bindings=_of_kind(objects, registry.SERVICE_ROLE_BINDING_TYPE),
            authorization_policies=_of_kind(
                objects, registry.AUTHORIZATION_POLICY_TYPE
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            registry.CLUSTER_RBAC_CONFIGS: _dump(self.cluster_rbac_configs),
            registry.SERVICE_MESH_RBAC_CONFIGS: _dump(self.service_mesh_rbac_configs),
            registry.SERVICE_ROLES: _dump(self.service_roles),
            registry.SERVICE_ROLE_BINDINGS: _dump(self.service_role_bindings),
            registry.AUTHORIZATION_POLICIES: _dump(self.authorization_policies),
        }
