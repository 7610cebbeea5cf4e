"""Registry of resource types keyed by their CLI/MCP name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from ocloud.exceptions import UnknownResourceError
from ocloud.resources import compute, database, identity, network, storage
from ocloud.resources.base import Columns
from ocloud.search.base_search import FieldDeclaration


@dataclass(frozen=True)
class ResourceType:
    """Everything needed to list, search, and render one resource domain."""

    key: str
    title: str
    record_cls: type
    fields: FieldDeclaration
    columns: Columns

    def from_payload(self, data: Mapping[str, Any]) -> Any:
        return self.record_cls.from_payload(data)


_TYPES: List[ResourceType] = [
    ResourceType("instance", "Instances", compute.Instance, compute.INSTANCE_FIELDS, compute.INSTANCE_COLUMNS),
    ResourceType("image", "Images", compute.Image, compute.IMAGE_FIELDS, compute.IMAGE_COLUMNS),
    ResourceType("oke", "OKE Clusters", compute.Cluster, compute.CLUSTER_FIELDS, compute.CLUSTER_COLUMNS),
    ResourceType(
        "autonomousdb",
        "Autonomous Databases",
        database.AutonomousDatabase,
        database.AUTONOMOUSDB_FIELDS,
        database.AUTONOMOUSDB_COLUMNS,
    ),
    ResourceType(
        "heatwave",
        "HeatWave Databases",
        database.HeatWaveDatabase,
        database.HEATWAVE_FIELDS,
        database.HEATWAVE_COLUMNS,
    ),
    ResourceType(
        "cachecluster",
        "Cache Clusters",
        database.CacheCluster,
        database.CACHECLUSTER_FIELDS,
        database.CACHECLUSTER_COLUMNS,
    ),
    ResourceType("vcn", "VCNs", network.Vcn, network.VCN_FIELDS, network.VCN_COLUMNS),
    ResourceType("subnet", "Subnets", network.Subnet, network.SUBNET_FIELDS, network.SUBNET_COLUMNS),
    ResourceType(
        "loadbalancer",
        "Load Balancers",
        network.LoadBalancer,
        network.LOADBALANCER_FIELDS,
        network.LOADBALANCER_COLUMNS,
    ),
    ResourceType("bucket", "Buckets", storage.Bucket, storage.BUCKET_FIELDS, storage.BUCKET_COLUMNS),
    ResourceType(
        "compartment",
        "Compartments",
        identity.Compartment,
        identity.COMPARTMENT_FIELDS,
        identity.COMPARTMENT_COLUMNS,
    ),
    ResourceType("policy", "Policies", identity.Policy, identity.POLICY_FIELDS, identity.POLICY_COLUMNS),
]

RESOURCE_TYPES: Dict[str, ResourceType] = {t.key: t for t in _TYPES}


def get_resource_type(key: str) -> ResourceType:
    """Look up a resource type by key (case-insensitive).

    Raises
    ------
    UnknownResourceError
        If ``key`` is not registered.
    """
    rt = RESOURCE_TYPES.get((key or "").strip().lower())
    if rt is None:
        raise UnknownResourceError(
            f"Unknown resource type '{key}'. Known types: {', '.join(sorted(RESOURCE_TYPES))}"
        )
    return rt
