import pytest

from istio_hosts.objects import (
    IstioDetails,
    IstioObject,
    IstioObjectList,
    MTLSDetails,
    RBACDetails,
)


def _obj(kind, name="x", namespace="bookinfo", spec=None, api_version=""):
    return IstioObject.from_dict(
        {
            "apiVersion": api_version,
            "kind": kind,
            "metadata": {"name": name, "namespace": namespace},
            "spec": spec or {},
        }
    )


class TestIstioObject:
    def test_from_dict(self):
        obj = _obj(
            "VirtualService",
            name="reviews",
            spec={"hosts": ["reviews"]},
            api_version="networking.istio.io/v1alpha3",
        )

        assert obj.known
        assert obj.name == "reviews"
        assert obj.namespace == "bookinfo"
        assert obj.object_id == "virtualservice:bookinfo/reviews"
        assert obj.to_dict()["apiVersion"] == "networking.istio.io/v1alpha3"

    def test_unknown_kind_keeps_untyped_spec(self):
        obj = _obj("TrafficShadow", spec={"percent": 10, "nested": {"a": [1, 2]}})

        assert not obj.known
        assert obj.spec == {"percent": 10, "nested": {"a": [1, 2]}}

    def test_missing_metadata_and_spec(self):
        obj = IstioObject.from_dict({"kind": "Gateway"})

        assert obj.metadata == {}
        assert obj.spec == {}
        assert obj.name == ""
        assert obj.hosts() == []

    def test_spec_must_be_mapping(self):
        with pytest.raises(ValueError):
            IstioObject.from_dict({"kind": "Gateway", "spec": ["hosts"]})

    def test_hosts_from_virtual_service_routes(self):
        obj = _obj(
            "VirtualService",
            spec={
                "hosts": ["reviews", ""],
                "http": [
                    {
                        "route": [
                            {"destination": {"host": "reviews", "subset": "v1"}},
                            {"destination": {"host": "ratings"}},
                        ]
                    }
                ],
                "tcp": [{"route": [{"destination": {"host": "mongo.db"}}]}],
                "tls": [{"match": [{"sniHosts": ["x"]}]}],
            },
        )

        assert obj.hosts() == ["reviews", "ratings", "mongo.db"]

    def test_host_from_destination_rule(self):
        obj = _obj("DestinationRule", spec={"host": "reviews.bookinfo.svc.cluster.local"})

        assert obj.hosts() == ["reviews.bookinfo.svc.cluster.local"]


def test_object_list_from_dict():
    data = {
        "apiVersion": "networking.istio.io/v1alpha3",
        "kind": "GatewayList",
        "items": [
            {"kind": "Gateway", "metadata": {"name": "gw1"}},
            {"kind": "Gateway", "metadata": {"name": "gw2"}},
        ],
    }

    objects = IstioObjectList.from_dict(data)

    assert objects.kind == "GatewayList"
    assert [o.name for o in objects.items] == ["gw1", "gw2"]


def test_details_group_objects_by_kind():
    objects = [
        _obj("VirtualService", "vs"),
        _obj("DestinationRule", "dr"),
        _obj("ServiceEntry", "se"),
        _obj("Gateway", "gw"),
        _obj("MeshPolicy", "default"),
        _obj("Policy", "p"),
        _obj("ServiceRole", "role"),
        _obj("AuthorizationPolicy", "deny"),
        _obj("TrafficShadow", "shadow"),
    ]

    istio = IstioDetails.from_objects(objects)
    mtls = MTLSDetails.from_objects(objects)
    rbac = RBACDetails.from_objects(objects)

    assert [o.name for o in istio.virtual_services] == ["vs"]
    assert [o.name for o in istio.gateways] == ["gw"]
    assert [o.name for o in mtls.destination_rules] == ["dr"]
    assert [o.name for o in mtls.mesh_policies] == ["default"]
    assert mtls.service_mesh_policies == []
    assert [o.name for o in rbac.service_roles] == ["role"]
    assert [o.name for o in rbac.authorization_policies] == ["deny"]


def test_details_to_dict_field_names():
    istio = IstioDetails.from_objects([_obj("ServiceEntry", "se")])
    mtls = MTLSDetails()
    rbac = RBACDetails()

    assert list(istio.to_dict()) == [
        "virtualservices",
        "destinationrules",
        "serviceentries",
        "gateways",
    ]
    assert istio.to_dict()["serviceentries"][0]["metadata"]["name"] == "se"
    assert list(mtls.to_dict()) == [
        "destinationrules",
        "meshpolicies",
        "servicemeshpolicies",
        "policies",
    ]
    assert list(rbac.to_dict()) == [
        "clusterrbacconfigs",
        "servicemeshrbacconfigs",
        "serviceroles",
        "servicerolebindings",
        "authorizationpolicies",
    ]


def test_hosts_skip_malformed_routes():
    obj = _obj(
        "VirtualService",
        spec={
            "http": [
                {"route": [{"destination": "reviews"}, {"destination": {"host": "ratings"}}]},
                {"route": "reviews"},
            ],
            "tcp": "mongo",
        },
    )

    assert obj.hosts() == ["ratings"]


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError, match="got str"):
        IstioObject.from_dict("oops")
