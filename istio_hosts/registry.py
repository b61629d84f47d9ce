from dataclasses import dataclass
from types import MappingProxyType

# ----------------------------
# Kubernetes controllers
# ----------------------------

CRON_JOB_TYPE = "CronJob"
DEPLOYMENT_TYPE = "Deployment"
DEPLOYMENT_CONFIG_TYPE = "DeploymentConfig"
JOB_TYPE = "Job"
POD_TYPE = "Pod"
REPLICATION_CONTROLLER_TYPE = "ReplicationController"
REPLICA_SET_TYPE = "ReplicaSet"
SERVICE_TYPE = "Service"
STATEFUL_SET_TYPE = "StatefulSet"

# ----------------------------
# Networking
# ----------------------------

DESTINATION_RULES = "destinationrules"
DESTINATION_RULE_TYPE = "DestinationRule"
DESTINATION_RULE_TYPE_LIST = "DestinationRuleList"

GATEWAYS = "gateways"
GATEWAY_TYPE = "Gateway"
GATEWAY_TYPE_LIST = "GatewayList"

SIDECARS = "sidecars"
SIDECAR_TYPE = "Sidecar"
SIDECAR_TYPE_LIST = "SidecarList"

SERVICE_ENTRIES = "serviceentries"
SERVICE_ENTRY_TYPE = "ServiceEntry"
SERVICE_ENTRY_TYPE_LIST = "ServiceEntryList"

VIRTUAL_SERVICES = "virtualservices"
VIRTUAL_SERVICE_TYPE = "VirtualService"
VIRTUAL_SERVICE_TYPE_LIST = "VirtualServiceList"

# ----------------------------
# Quotas
# ----------------------------

QUOTA_SPECS = "quotaspecs"
QUOTA_SPEC_TYPE = "QuotaSpec"
QUOTA_SPEC_TYPE_LIST = "QuotaSpecList"

QUOTA_SPEC_BINDINGS = "quotaspecbindings"
QUOTA_SPEC_BINDING_TYPE = "QuotaSpecBinding"
QUOTA_SPEC_BINDING_TYPE_LIST = "QuotaSpecBindingList"

# ----------------------------
# Authentication policies
# ----------------------------

POLICIES = "policies"
POLICY_TYPE = "Policy"
POLICY_TYPE_LIST = "PolicyList"

MESH_POLICIES = "meshpolicies"
MESH_POLICY_TYPE = "MeshPolicy"
MESH_POLICY_TYPE_LIST = "MeshPolicyList"

SERVICE_MESH_POLICIES = "servicemeshpolicies"
SERVICE_MESH_POLICY_TYPE = "ServiceMeshPolicy"
SERVICE_MESH_POLICY_TYPE_LIST = "ServiceMeshPolicyList"

# ----------------------------
# Rbac
# ----------------------------

CLUSTER_RBAC_CONFIGS = "clusterrbacconfigs"
CLUSTER_RBAC_CONFIG_TYPE = "ClusterRbacConfig"
CLUSTER_RBAC_CONFIG_TYPE_LIST = "ClusterRbacConfigList"

RBAC_CONFIGS = "rbacconfigs"
RBAC_CONFIG_TYPE = "RbacConfig"
RBAC_CONFIG_TYPE_LIST = "RbacConfigList"

SERVICE_ROLES = "serviceroles"
SERVICE_ROLE_TYPE = "ServiceRole"
SERVICE_ROLE_TYPE_LIST = "ServiceRoleList"

SERVICE_ROLE_BINDINGS = "servicerolebindings"
SERVICE_ROLE_BINDING_TYPE = "ServiceRoleBinding"
SERVICE_ROLE_BINDING_TYPE_LIST = "ServiceRoleBindingList"

SERVICE_MESH_RBAC_CONFIGS = "servicemeshrbacconfigs"
SERVICE_MESH_RBAC_CONFIG_TYPE = "ServiceMeshRbacConfig"
SERVICE_MESH_RBAC_CONFIG_TYPE_LIST = "ServiceMeshRbacConfigList"

# ----------------------------
# Authorization policies
# ----------------------------

AUTHORIZATION_POLICIES = "authorizationpolicies"
AUTHORIZATION_POLICY_TYPE = "AuthorizationPolicy"
AUTHORIZATION_POLICY_TYPE_LIST = "AuthorizationPolicyList"

# ----------------------------
# Config: rules, adapters, templates
# ----------------------------

RULES = "rules"
RULE_TYPE = "rule"
RULE_TYPE_LIST = "ruleList"

ADAPTERS = "adapters"
ADAPTER_TYPE = "adapter"
ADAPTER_TYPE_LIST = "adapterList"

HANDLERS = "handlers"
HANDLER_TYPE = "handler"
HANDLER_TYPE_LIST = "handlerList"

INSTANCES = "instances"
INSTANCE_TYPE = "instance"
INSTANCE_TYPE_LIST = "instanceList"

TEMPLATES = "templates"
TEMPLATE_TYPE = "template"
TEMPLATE_TYPE_LIST = "templateList"


@dataclass(frozen=True)
class GroupVersion:
    group: str
    version: str

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}"


@dataclass(frozen=True)
class KindEntry:
    """
    Singular object kind paired with the kind of its list wrapper.
    """

    object_kind: str
    collection_kind: str


# ----------------------------
# Group versions
# ----------------------------

CONFIG_GROUP_VERSION = GroupVersion("config.istio.io", "v1alpha2")
API_CONFIG_VERSION = CONFIG_GROUP_VERSION.api_version

NETWORKING_GROUP_VERSION = GroupVersion("networking.istio.io", "v1alpha3")
API_NETWORKING_VERSION = NETWORKING_GROUP_VERSION.api_version

AUTHENTICATION_GROUP_VERSION = GroupVersion("authentication.istio.io", "v1alpha1")
API_AUTHENTICATION_VERSION = AUTHENTICATION_GROUP_VERSION.api_version

RBAC_GROUP_VERSION = GroupVersion("rbac.istio.io", "v1alpha1")
API_RBAC_VERSION = RBAC_GROUP_VERSION.api_version

MAISTRA_AUTHENTICATION_GROUP_VERSION = GroupVersion("authentication.maistra.io", "v1")
API_MAISTRA_AUTHENTICATION_VERSION = MAISTRA_AUTHENTICATION_GROUP_VERSION.api_version

MAISTRA_RBAC_GROUP_VERSION = GroupVersion("rbac.maistra.io", "v1")
API_MAISTRA_RBAC_VERSION = MAISTRA_RBAC_GROUP_VERSION.api_version

SECURITY_GROUP_VERSION = GroupVersion("security.istio.io", "v1beta1")
API_SECURITY_VERSION = SECURITY_GROUP_VERSION.api_version

# ----------------------------
# Kinds per group version
# ----------------------------

NETWORKING_TYPES = (
    KindEntry(GATEWAY_TYPE, GATEWAY_TYPE_LIST),
    KindEntry(VIRTUAL_SERVICE_TYPE, VIRTUAL_SERVICE_TYPE_LIST),
    KindEntry(DESTINATION_RULE_TYPE, DESTINATION_RULE_TYPE_LIST),
    KindEntry(SERVICE_ENTRY_TYPE, SERVICE_ENTRY_TYPE_LIST),
    KindEntry(SIDECAR_TYPE, SIDECAR_TYPE_LIST),
)

CONFIG_TYPES = (
    KindEntry(RULE_TYPE, RULE_TYPE_LIST),
    # Quota specs depend on the quota template but are not templates themselves
    KindEntry(QUOTA_SPEC_TYPE, QUOTA_SPEC_TYPE_LIST),
    KindEntry(QUOTA_SPEC_BINDING_TYPE, QUOTA_SPEC_BINDING_TYPE_LIST),
)

AUTHENTICATION_TYPES = (
    KindEntry(POLICY_TYPE, POLICY_TYPE_LIST),
    KindEntry(MESH_POLICY_TYPE, MESH_POLICY_TYPE_LIST),
)

MAISTRA_AUTHENTICATION_TYPES = (
    KindEntry(SERVICE_MESH_POLICY_TYPE, SERVICE_MESH_POLICY_TYPE_LIST),
)

SECURITY_TYPES = (
    KindEntry(AUTHORIZATION_POLICY_TYPE, AUTHORIZATION_POLICY_TYPE_LIST),
)

ADAPTER_TYPES = (
    KindEntry(ADAPTER_TYPE, ADAPTER_TYPE_LIST),
    KindEntry(HANDLER_TYPE, HANDLER_TYPE_LIST),
)

TEMPLATE_TYPES = (
    KindEntry(INSTANCE_TYPE, INSTANCE_TYPE_LIST),
    KindEntry(TEMPLATE_TYPE, TEMPLATE_TYPE_LIST),
)

RBAC_TYPES = (
    KindEntry(CLUSTER_RBAC_CONFIG_TYPE, CLUSTER_RBAC_CONFIG_TYPE_LIST),
    KindEntry(RBAC_CONFIG_TYPE, RBAC_CONFIG_TYPE_LIST),
    KindEntry(SERVICE_ROLE_TYPE, SERVICE_ROLE_TYPE_LIST),
    KindEntry(SERVICE_ROLE_BINDING_TYPE, SERVICE_ROLE_BINDING_TYPE_LIST),
)

MAISTRA_RBAC_TYPES = (
    KindEntry(SERVICE_MESH_RBAC_CONFIG_TYPE, SERVICE_MESH_RBAC_CONFIG_TYPE_LIST),
)

# ----------------------------
# Lookup tables
# ----------------------------

GROUP_VERSIONS: MappingProxyType[str, GroupVersion] = MappingProxyType(
    {
        "config": CONFIG_GROUP_VERSION,
        "networking": NETWORKING_GROUP_VERSION,
        "authentication": AUTHENTICATION_GROUP_VERSION,
        "rbac": RBAC_GROUP_VERSION,
        "maistra_authentication": MAISTRA_AUTHENTICATION_GROUP_VERSION,
        "maistra_rbac": MAISTRA_RBAC_GROUP_VERSION,
        "security": SECURITY_GROUP_VERSION,
    }
)

DOMAIN_TYPES: MappingProxyType[str, tuple[KindEntry, ...]] = MappingProxyType(
    {
        "config": CONFIG_TYPES,
        "networking": NETWORKING_TYPES,
        "authentication": AUTHENTICATION_TYPES,
        "rbac": RBAC_TYPES,
        "maistra_authentication": MAISTRA_AUTHENTICATION_TYPES,
        "maistra_rbac": MAISTRA_RBAC_TYPES,
        "security": SECURITY_TYPES,
        "adapters": ADAPTER_TYPES,
        "templates": TEMPLATE_TYPES,
    }
)

# Adapters and templates are served from the config group
_DOMAIN_GROUP = {
    "adapters": "config",
    "templates": "config",
}

# Used to fetch Istio action details, so only handlers (adapters) and
# instances (templates) are covered. One entry per adapter/template.
ADAPTER_PLURALS: MappingProxyType[str, str] = MappingProxyType(
    {
        ADAPTER_TYPE: ADAPTERS,
        HANDLER_TYPE: HANDLERS,
    }
)

TEMPLATE_PLURALS: MappingProxyType[str, str] = MappingProxyType(
    {
        INSTANCE_TYPE: INSTANCES,
        TEMPLATE_TYPE: TEMPLATES,
    }
)

PLURAL_TYPE: MappingProxyType[str, str] = MappingProxyType(
    {
        # Networking
        GATEWAYS: GATEWAY_TYPE,
        VIRTUAL_SERVICES: VIRTUAL_SERVICE_TYPE,
        DESTINATION_RULES: DESTINATION_RULE_TYPE,
        SERVICE_ENTRIES: SERVICE_ENTRY_TYPE,
        SIDECARS: SIDECAR_TYPE,
        # Main config files
        RULES: RULE_TYPE,
        QUOTA_SPECS: QUOTA_SPEC_TYPE,
        QUOTA_SPEC_BINDINGS: QUOTA_SPEC_BINDING_TYPE,
        # Adapters
        ADAPTERS: ADAPTER_TYPE,
        HANDLERS: HANDLER_TYPE,
        # Templates
        INSTANCES: INSTANCE_TYPE,
        TEMPLATES: TEMPLATE_TYPE,
        # Policies
        POLICIES: POLICY_TYPE,
        MESH_POLICIES: MESH_POLICY_TYPE,
        SERVICE_MESH_POLICIES: SERVICE_MESH_POLICY_TYPE,
        # Rbac
        CLUSTER_RBAC_CONFIGS: CLUSTER_RBAC_CONFIG_TYPE,
        RBAC_CONFIGS: RBAC_CONFIG_TYPE,
        SERVICE_ROLES: SERVICE_ROLE_TYPE,
        SERVICE_ROLE_BINDINGS: SERVICE_ROLE_BINDING_TYPE,
        SERVICE_MESH_RBAC_CONFIGS: SERVICE_MESH_RBAC_CONFIG_TYPE,
        # Authorization policies
        AUTHORIZATION_POLICIES: AUTHORIZATION_POLICY_TYPE,
    }
)


def _build_kind_index() -> MappingProxyType[str, GroupVersion]:
    index: dict[str, GroupVersion] = {}
    for domain, entries in DOMAIN_TYPES.items():
        gv = GROUP_VERSIONS[_DOMAIN_GROUP.get(domain, domain)]
        for entry in entries:
            index[entry.object_kind] = gv
    return MappingProxyType(index)


KIND_GROUP_VERSION = _build_kind_index()


# ----------------------------
# Lookups
# ----------------------------


def kind_for_plural(plural: str) -> str | None:
    return PLURAL_TYPE.get(plural)


def plural_for_kind(kind: str) -> str | None:
    """
    Plural REST resource name for an adapter or template kind.
    Other kinds are not covered and return None.
    """
    return ADAPTER_PLURALS.get(kind) or TEMPLATE_PLURALS.get(kind)


def group_version(domain: str) -> GroupVersion | None:
    return GROUP_VERSIONS.get(domain)


def kinds_for(domain: str) -> tuple[KindEntry, ...]:
    return DOMAIN_TYPES.get(domain, ())


def group_version_for_kind(kind: str) -> GroupVersion | None:
    return KIND_GROUP_VERSION.get(kind)


def is_known_kind(kind: str) -> bool:
    return kind in KIND_GROUP_VERSION
