import pytest

from ocloud.exceptions import UnknownResourceError
from ocloud.resources import (
    RESOURCE_TYPES,
    Bucket,
    Cluster,
    Instance,
    LoadBalancer,
    Policy,
    Subnet,
    get_resource_type,
)
from ocloud.resources.base import fmt_number, pick_str

INSTANCE_PAYLOAD = {
    "id": "ocid1.instance.oc1..aaaa1111",
    "display-name": "Web-01",
    "lifecycle-state": "RUNNING",
    "shape": "VM.Standard.E4.Flex",
    "shape-config": {"vcpus": 2, "memory-in-gbs": 16.0},
    "primary-ip": "10.0.1.15",
    "hostname": "web01",
    "subnet-name": "app-subnet",
    "freeform-tags": {"env": "prod"},
    "defined-tags": {"ops": {"team": "core"}},
}


def test_instance_from_cli_payload() -> None:
    inst = Instance.from_payload(INSTANCE_PAYLOAD)
    assert inst.ocid == "ocid1.instance.oc1..aaaa1111"
    assert inst.display_name == "Web-01"
    assert inst.vcpus == 2
    assert inst.memory_gb == 16.0

    doc = inst.to_indexable()
    assert doc["Name"] == "web-01"
    assert doc["PrimaryIP"] == "10.0.1.15"
    assert doc["TagsKV"] == "env:prod ops.team:core"
    assert doc["TagsVal"] == "prod core"


def test_payload_keys_accept_snake_and_camel_case() -> None:
    assert pick_str({"display_name": "a"}, "display-name") == "a"
    assert pick_str({"displayName": "b"}, "display-name") == "b"
    assert pick_str({"lifecycle-state": None, "lifecycleState": "UP"}, "lifecycle-state") == "UP"


def test_cluster_collects_node_pools() -> None:
    cluster = Cluster.from_payload(
        {
            "id": "ocid1.cluster.oc1..cccc",
            "name": "prod-oke",
            "kubernetes-version": "v1.29.1",
            "endpoints": {"private-endpoint": "10.0.0.10:6443"},
            "node-pools": [
                {"name": "pool-a", "node-shape": "VM.Standard.E4.Flex", "node-config-details": {"size": 3}},
                {"name": "pool-b", "node-shape": "VM.Standard.E4.Flex", "node-config-details": {"size": 2}},
            ],
        }
    )
    assert cluster.node_pool_names == ["pool-a", "pool-b"]
    assert cluster.node_shapes == ["VM.Standard.E4.Flex"]
    assert cluster.node_count == "5"
    doc = cluster.to_indexable()
    assert doc["NodePools"] == "pool-a pool-b"
    assert doc["PrivEndpoint"] == "10.0.0.10:6443"


def test_load_balancer_flattens_addresses_and_hostnames() -> None:
    lb = LoadBalancer.from_payload(
        {
            "id": "ocid1.loadbalancer.oc1..llll",
            "display-name": "public-lb",
            "is-private": False,
            "ip-addresses": [{"ip-address": "129.1.2.3", "is-public": True}],
            "hostnames": {"api": {"name": "api", "hostname": "api.example.com"}},
            "certificates": {"api-cert": {}},
        }
    )
    assert lb.type == "Public"
    assert lb.ip_addresses == ["129.1.2.3"]
    assert lb.hostnames == ["api.example.com"]
    assert lb.ssl_certificates == ["api-cert"]


def test_policy_statements_and_bucket_name() -> None:
    policy = Policy.from_payload({"id": "p1", "name": "Admins", "statements": ["Allow group A to manage all-resources"]})
    assert policy.statement_count == 1
    assert "manage all-resources" in policy.to_indexable()["Statements"]

    bucket = Bucket.from_payload({"name": "logs", "namespace": "ns1", "is-read-only": "false"})
    assert bucket.display_name == "logs"
    assert bucket.to_indexable()["IsReadOnly"] == "false"
    assert bucket.encryption == "Oracle-managed"


def test_subnet_cells_follow_columns() -> None:
    subnet = Subnet.from_payload(
        {"display-name": "app", "cidr-block": "10.0.1.0/24", "prohibit-public-ip-on-vnic": True}
    )
    rt = get_resource_type("subnet")
    assert subnet.cells(rt.columns) == ["app", "10.0.1.0/24", "No", "", ""]


@pytest.mark.parametrize("key", sorted(RESOURCE_TYPES))
def test_every_searchable_field_is_projected(key: str) -> None:
    rt = get_resource_type(key)
    record = rt.from_payload({})
    doc = record.to_indexable()
    assert set(rt.fields.searchable) <= set(doc)
    assert set(rt.fields.boosted) <= set(rt.fields.searchable)
    assert isinstance(record.to_dict(), dict)


def test_lookup_is_case_insensitive_and_rejects_unknown_keys() -> None:
    assert get_resource_type(" Instance ").key == "instance"
    with pytest.raises(UnknownResourceError):
        get_resource_type("satellite")
    with pytest.raises(ValueError):
        get_resource_type("")


def test_fmt_number() -> None:
    assert fmt_number(None) == ""
    assert fmt_number(4.0) == "4"
    assert fmt_number(2.5) == "2.5"
