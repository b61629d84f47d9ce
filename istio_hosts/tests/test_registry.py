import pytest

from istio_hosts import registry


@pytest.mark.parametrize(
    "plural, kind",
    [
        ("gateways", "Gateway"),
        ("virtualservices", "VirtualService"),
        ("destinationrules", "DestinationRule"),
        ("serviceentries", "ServiceEntry"),
        ("sidecars", "Sidecar"),
        ("rules", "rule"),
        ("quotaspecs", "QuotaSpec"),
        ("quotaspecbindings", "QuotaSpecBinding"),
        ("adapters", "adapter"),
        ("handlers", "handler"),
        ("instances", "instance"),
        ("templates", "template"),
        ("policies", "Policy"),
        ("meshpolicies", "MeshPolicy"),
        ("servicemeshpolicies", "ServiceMeshPolicy"),
        ("clusterrbacconfigs", "ClusterRbacConfig"),
        ("rbacconfigs", "RbacConfig"),
        ("serviceroles", "ServiceRole"),
        ("servicerolebindings", "ServiceRoleBinding"),
        ("servicemeshrbacconfigs", "ServiceMeshRbacConfig"),
        ("authorizationpolicies", "AuthorizationPolicy"),
    ],
)
def test_kind_for_plural(plural, kind):
    assert registry.kind_for_plural(plural) == kind


def test_plural_table_is_complete():
    assert len(registry.PLURAL_TYPE) == 21


def test_kind_for_unknown_plural():
    assert registry.kind_for_plural("deployments") is None
    assert registry.kind_for_plural("VirtualServices") is None


@pytest.mark.parametrize(
    "kind, plural",
    [
        ("adapter", "adapters"),
        ("handler", "handlers"),
        ("instance", "instances"),
        ("template", "templates"),
    ],
)
def test_plural_for_adapter_and_template_kinds(kind, plural):
    assert registry.plural_for_kind(kind) == plural


@pytest.mark.parametrize("kind", ["VirtualService", "rule", "Handler", "unknown"])
def test_plural_only_defined_for_adapters_and_templates(kind):
    assert registry.plural_for_kind(kind) is None


@pytest.mark.parametrize(
    "domain, group, version",
    [
        ("config", "config.istio.io", "v1alpha2"),
        ("networking", "networking.istio.io", "v1alpha3"),
        ("authentication", "authentication.istio.io", "v1alpha1"),
        ("rbac", "rbac.istio.io", "v1alpha1"),
        ("maistra_authentication", "authentication.maistra.io", "v1"),
        ("maistra_rbac", "rbac.maistra.io", "v1"),
        ("security", "security.istio.io", "v1beta1"),
    ],
)
def test_group_versions(domain, group, version):
    gv = registry.group_version(domain)

    assert gv.group == group
    assert gv.version == version
    assert gv.api_version == f"{group}/{version}"


def test_api_version_constants():
    assert registry.API_NETWORKING_VERSION == "networking.istio.io/v1alpha3"
    assert registry.API_CONFIG_VERSION == "config.istio.io/v1alpha2"
    assert registry.API_SECURITY_VERSION == "security.istio.io/v1beta1"
    assert registry.API_MAISTRA_RBAC_VERSION == "rbac.maistra.io/v1"


def test_unknown_domain():
    assert registry.group_version("apps") is None
    assert registry.kinds_for("apps") == ()


def test_list_kinds():
    networking = {e.object_kind: e.collection_kind for e in registry.kinds_for("networking")}

    assert networking == {
        "Gateway": "GatewayList",
        "VirtualService": "VirtualServiceList",
        "DestinationRule": "DestinationRuleList",
        "ServiceEntry": "ServiceEntryList",
        "Sidecar": "SidecarList",
    }
    assert registry.kinds_for("config")[0] == registry.KindEntry("rule", "ruleList")
    assert [e.collection_kind for e in registry.kinds_for("templates")] == [
        "instanceList",
        "templateList",
    ]


def test_group_version_for_kind():
    assert registry.group_version_for_kind("Sidecar") == registry.NETWORKING_GROUP_VERSION
    assert registry.group_version_for_kind("handler") == registry.CONFIG_GROUP_VERSION
    assert registry.group_version_for_kind("instance") == registry.CONFIG_GROUP_VERSION
    assert (
        registry.group_version_for_kind("ServiceMeshRbacConfig")
        == registry.MAISTRA_RBAC_GROUP_VERSION
    )
    assert registry.group_version_for_kind("Deployment") is None


def test_every_plural_maps_to_a_registered_kind():
    for kind in registry.PLURAL_TYPE.values():
        assert registry.is_known_kind(kind), kind


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        registry.PLURAL_TYPE["pods"] = "Pod"
