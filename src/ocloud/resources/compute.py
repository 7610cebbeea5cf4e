"""Compute domain records: instances, images, and Kubernetes (OKE) clusters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ocloud.resources.base import (
    Columns,
    Resource,
    fmt_number,
    pick,
    pick_dict,
    pick_float,
    pick_int,
    pick_list,
    pick_str,
)
from ocloud.search.base_search import FieldDeclaration, join_values, normalize
from ocloud.search.tags import tag_fields


@dataclass(slots=True)
class Instance(Resource):
    """A compute instance, optionally enriched with network and image details."""

    ocid: str
    display_name: str
    state: str = ""
    shape: str = ""
    image_id: str = ""
    region: str = ""
    availability_domain: str = ""
    fault_domain: str = ""
    vcpus: Optional[int] = None
    memory_gb: Optional[float] = None
    time_created: str = ""
    primary_ip: str = ""
    hostname: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    vcn_id: str = ""
    vcn_name: str = ""
    image_name: str = ""
    image_os: str = ""
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Instance":
        shape_config = pick_dict(data, "shape-config")
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            state=pick_str(data, "lifecycle-state"),
            shape=pick_str(data, "shape"),
            image_id=pick_str(data, "image-id"),
            region=pick_str(data, "region"),
            availability_domain=pick_str(data, "availability-domain"),
            fault_domain=pick_str(data, "fault-domain"),
            vcpus=pick_int(shape_config, "vcpus"),
            memory_gb=pick_float(shape_config, "memory-in-gbs"),
            time_created=pick_str(data, "time-created"),
            primary_ip=pick_str(data, "primary-ip", "private-ip"),
            hostname=pick_str(data, "hostname", "hostname-label"),
            subnet_id=pick_str(data, "subnet-id"),
            subnet_name=pick_str(data, "subnet-name"),
            vcn_id=pick_str(data, "vcn-id"),
            vcn_name=pick_str(data, "vcn-name"),
            image_name=pick_str(data, "image-name"),
            image_os=pick_str(data, "image-os", "operating-system"),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "Hostname": normalize(self.hostname),
            "PrimaryIP": normalize(self.primary_ip),
            "ImageName": normalize(self.image_name),
            "ImageOS": normalize(self.image_os),
            "Shape": normalize(self.shape),
            "OCID": normalize(self.ocid),
            "VcnName": normalize(self.vcn_name),
            "SubnetName": normalize(self.subnet_name),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


INSTANCE_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "Hostname", "PrimaryIP", "ImageName", "ImageOS",
        "Shape", "OCID", "VcnName", "SubnetName",
        "TagsKV", "TagsVal",
    ),
    boosted=("Name", "Hostname"),
)

INSTANCE_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("Shape", "shape"),
    ("State", "state"),
    ("Primary IP", "primary_ip"),
    ("Subnet", "subnet_name"),
    ("OCID", "ocid"),
)


@dataclass(slots=True)
class Image(Resource):
    """A compute image."""

    ocid: str
    display_name: str
    operating_system: str = ""
    operating_system_version: str = ""
    launch_mode: str = ""
    state: str = ""
    time_created: str = ""

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Image":
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            operating_system=pick_str(data, "operating-system"),
            operating_system_version=pick_str(data, "operating-system-version"),
            launch_mode=pick_str(data, "launch-mode"),
            state=pick_str(data, "lifecycle-state"),
            time_created=pick_str(data, "time-created"),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OperatingSystem": normalize(self.operating_system),
            "OSVersion": normalize(self.operating_system_version),
            "OCID": normalize(self.ocid),
            "LaunchMode": normalize(self.launch_mode),
        }


IMAGE_FIELDS = FieldDeclaration(
    searchable=("Name", "OperatingSystem", "OSVersion", "OCID", "LaunchMode"),
    boosted=("Name", "OperatingSystem", "OSVersion"),
)

IMAGE_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("OS", "operating_system"),
    ("Version", "operating_system_version"),
    ("Launch Mode", "launch_mode"),
    ("OCID", "ocid"),
)


@dataclass(slots=True)
class NodePool(Resource):
    """A node pool inside an OKE cluster."""

    ocid: str
    display_name: str
    kubernetes_version: str = ""
    node_shape: str = ""
    node_count: Optional[int] = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "NodePool":
        size = pick(data, "node-config-details", default={}) or {}
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "name", "display-name"),
            kubernetes_version=pick_str(data, "kubernetes-version"),
            node_shape=pick_str(data, "node-shape"),
            node_count=pick_int(size, "size") if size else pick_int(data, "node-count"),
        )


@dataclass(slots=True)
class Cluster(Resource):
    """An OKE (Kubernetes) cluster with its node pools."""

    ocid: str
    display_name: str
    kubernetes_version: str = ""
    vcn_id: str = ""
    state: str = ""
    private_endpoint: str = ""
    public_endpoint: str = ""
    time_created: str = ""
    node_pools: List[NodePool] = field(default_factory=list)
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Cluster":
        endpoints = pick_dict(data, "endpoints")
        metadata = pick_dict(data, "metadata")
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "name", "display-name"),
            kubernetes_version=pick_str(data, "kubernetes-version"),
            vcn_id=pick_str(data, "vcn-id"),
            state=pick_str(data, "lifecycle-state"),
            private_endpoint=pick_str(endpoints, "private-endpoint"),
            public_endpoint=pick_str(endpoints, "public-endpoint"),
            time_created=pick_str(metadata, "time-created") or pick_str(data, "time-created"),
            node_pools=[
                NodePool.from_payload(np)
                for np in pick_list(data, "node-pools")
                if isinstance(np, Mapping)
            ],
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    @property
    def node_pool_names(self) -> List[str]:
        return [np.display_name for np in self.node_pools]

    @property
    def node_shapes(self) -> List[str]:
        return list(dict.fromkeys(np.node_shape for np in self.node_pools if np.node_shape))

    @property
    def node_count(self) -> str:
        counts = [np.node_count for np in self.node_pools if np.node_count is not None]
        return fmt_number(sum(counts)) if counts else ""

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OCID": normalize(self.ocid),
            "K8sVersion": normalize(self.kubernetes_version),
            "State": normalize(self.state),
            "VcnOCID": normalize(self.vcn_id),
            "PrivEndpoint": normalize(self.private_endpoint),
            "PubEndpoint": normalize(self.public_endpoint),
            "NodePools": join_values(self.node_pool_names),
            "NodeShapes": join_values(self.node_shapes),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


CLUSTER_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "OCID", "K8sVersion", "State", "VcnOCID",
        "PrivEndpoint", "PubEndpoint", "NodePools", "NodeShapes", "TagsKV", "TagsVal",
    ),
    boosted=("Name", "NodePools", "NodeShapes"),
)

CLUSTER_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("Version", "kubernetes_version"),
    ("State", "state"),
    ("Node Pools", "node_pool_names"),
    ("Nodes", "node_count"),
    ("OCID", "ocid"),
)
