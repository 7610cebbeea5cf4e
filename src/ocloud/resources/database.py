"""Database domain records: Autonomous Database, HeatWave MySQL, and OCI Cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ocloud.resources.base import (
    Columns,
    Resource,
    fmt_number,
    names_of,
    pick_dict,
    pick_float,
    pick_int,
    pick_list,
    pick_str,
)
from ocloud.search.base_search import FieldDeclaration, join_values, normalize
from ocloud.search.tags import tag_fields


@dataclass(slots=True)
class AutonomousDatabase(Resource):
    ocid: str
    display_name: str
    state: str = ""
    db_version: str = ""
    workload: str = ""
    license_model: str = ""
    compute_model: str = ""
    ocpu_count: Optional[float] = None
    ecpu_count: Optional[float] = None
    cpu_core_count: Optional[int] = None
    storage_tb: Optional[int] = None
    storage_gb: Optional[int] = None
    vcn_id: str = ""
    vcn_name: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    private_endpoint: str = ""
    private_endpoint_ip: str = ""
    private_endpoint_label: str = ""
    whitelisted_ips: List[str] = field(default_factory=list)
    nsg_ids: List[str] = field(default_factory=list)
    nsg_names: List[str] = field(default_factory=list)
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "AutonomousDatabase":
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name", "db-name"),
            state=pick_str(data, "lifecycle-state"),
            db_version=pick_str(data, "db-version"),
            workload=pick_str(data, "db-workload"),
            license_model=pick_str(data, "license-model"),
            compute_model=pick_str(data, "compute-model"),
            ocpu_count=pick_float(data, "ocpu-count"),
            ecpu_count=pick_float(data, "compute-count", "ecpu-count"),
            cpu_core_count=pick_int(data, "cpu-core-count"),
            storage_tb=pick_int(data, "data-storage-size-in-tbs"),
            storage_gb=pick_int(data, "data-storage-size-in-gbs"),
            vcn_id=pick_str(data, "vcn-id"),
            vcn_name=pick_str(data, "vcn-name"),
            subnet_id=pick_str(data, "subnet-id"),
            subnet_name=pick_str(data, "subnet-name"),
            private_endpoint=pick_str(data, "private-endpoint"),
            private_endpoint_ip=pick_str(data, "private-endpoint-ip"),
            private_endpoint_label=pick_str(data, "private-endpoint-label"),
            whitelisted_ips=[str(ip) for ip in pick_list(data, "whitelisted-ips")],
            nsg_ids=[str(n) for n in pick_list(data, "nsg-ids")],
            nsg_names=names_of(pick_list(data, "nsg-names", "nsgs")),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OCID": normalize(self.ocid),
            "State": normalize(self.state),
            "DbVersion": normalize(self.db_version),
            "Workload": normalize(self.workload),
            "LicenseModel": normalize(self.license_model),
            "ComputeModel": normalize(self.compute_model),
            "OcpuCount": fmt_number(self.ocpu_count),
            "EcpuCount": fmt_number(self.ecpu_count),
            "CpuCoreCount": fmt_number(self.cpu_core_count),
            "StorageTB": fmt_number(self.storage_tb),
            "StorageGB": fmt_number(self.storage_gb),
            "VcnID": normalize(self.vcn_id),
            "VcnName": normalize(self.vcn_name),
            "SubnetId": normalize(self.subnet_id),
            "SubnetName": normalize(self.subnet_name),
            "PrivateEndpoint": normalize(self.private_endpoint),
            "PrivateEndpointIp": normalize(self.private_endpoint_ip),
            "PrivateEndpointLbl": normalize(self.private_endpoint_label),
            "WhitelistedIps": join_values(self.whitelisted_ips),
            "NsgNames": join_values(self.nsg_names),
            "NsgIds": join_values(self.nsg_ids),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


AUTONOMOUSDB_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "OCID", "State", "DbVersion", "Workload", "LicenseModel",
        "ComputeModel", "OcpuCount", "EcpuCount", "CpuCoreCount", "StorageTB", "StorageGB",
        "VcnID", "VcnName", "SubnetId", "SubnetName",
        "PrivateEndpoint", "PrivateEndpointIp", "PrivateEndpointLbl",
        "WhitelistedIps", "NsgNames", "NsgIds",
        "TagsKV", "TagsVal",
    ),
    boosted=("Name", "OCID", "VcnName", "SubnetName"),
)

AUTONOMOUSDB_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("State", "state"),
    ("Workload", "workload"),
    ("Version", "db_version"),
    ("Private IP", "private_endpoint_ip"),
    ("OCID", "ocid"),
)


@dataclass(slots=True)
class HeatWaveDatabase(Resource):
    """A MySQL HeatWave DB system."""

    ocid: str
    display_name: str
    state: str = ""
    description: str = ""
    mysql_version: str = ""
    shape_name: str = ""
    storage_gb: Optional[int] = None
    database_mode: str = ""
    access_mode: str = ""
    vcn_id: str = ""
    vcn_name: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    hostname_label: str = ""
    ip_address: str = ""
    nsg_ids: List[str] = field(default_factory=list)
    nsg_names: List[str] = field(default_factory=list)
    cluster_size: Optional[int] = None
    availability_domain: str = ""
    fault_domain: str = ""
    crash_recovery: str = ""
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "HeatWaveDatabase":
        storage = pick_dict(data, "data-storage")
        heatwave = pick_dict(data, "heat-wave-cluster")
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            state=pick_str(data, "lifecycle-state"),
            description=pick_str(data, "description"),
            mysql_version=pick_str(data, "mysql-version"),
            shape_name=pick_str(data, "shape-name"),
            storage_gb=(
                pick_int(storage, "data-storage-size-in-gbs")
                if storage
                else pick_int(data, "data-storage-size-in-gbs")
            ),
            database_mode=pick_str(data, "database-mode"),
            access_mode=pick_str(data, "access-mode"),
            vcn_id=pick_str(data, "vcn-id"),
            vcn_name=pick_str(data, "vcn-name"),
            subnet_id=pick_str(data, "subnet-id"),
            subnet_name=pick_str(data, "subnet-name"),
            hostname_label=pick_str(data, "hostname-label"),
            ip_address=pick_str(data, "ip-address"),
            nsg_ids=[str(n) for n in pick_list(data, "nsg-ids")],
            nsg_names=names_of(pick_list(data, "nsg-names", "nsgs")),
            cluster_size=pick_int(heatwave, "cluster-size"),
            availability_domain=pick_str(data, "availability-domain"),
            fault_domain=pick_str(data, "fault-domain"),
            crash_recovery=pick_str(data, "crash-recovery"),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OCID": normalize(self.ocid),
            "State": normalize(self.state),
            "Description": normalize(self.description),
            "MysqlVersion": normalize(self.mysql_version),
            "ShapeName": normalize(self.shape_name),
            "StorageGB": fmt_number(self.storage_gb),
            "DatabaseMode": normalize(self.database_mode),
            "AccessMode": normalize(self.access_mode),
            "VcnID": normalize(self.vcn_id),
            "VcnName": normalize(self.vcn_name),
            "SubnetId": normalize(self.subnet_id),
            "SubnetName": normalize(self.subnet_name),
            "HostnameLabel": normalize(self.hostname_label),
            "IpAddress": normalize(self.ip_address),
            "NsgNames": join_values(self.nsg_names),
            "NsgIds": join_values(self.nsg_ids),
            "ClusterSize": fmt_number(self.cluster_size),
            "AvailabilityDomain": normalize(self.availability_domain),
            "FaultDomain": normalize(self.fault_domain),
            "CrashRecovery": normalize(self.crash_recovery),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


HEATWAVE_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "OCID", "State", "Description", "MysqlVersion", "ShapeName",
        "StorageGB", "DatabaseMode", "AccessMode",
        "VcnID", "VcnName", "SubnetId", "SubnetName",
        "HostnameLabel", "IpAddress",
        "NsgNames", "NsgIds",
        "ClusterSize", "AvailabilityDomain", "FaultDomain", "CrashRecovery",
        "TagsKV", "TagsVal",
    ),
    boosted=("Name", "OCID", "VcnName", "SubnetName", "IpAddress"),
)

HEATWAVE_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("State", "state"),
    ("MySQL", "mysql_version"),
    ("Shape", "shape_name"),
    ("IP", "ip_address"),
    ("OCID", "ocid"),
)


@dataclass(slots=True)
class CacheCluster(Resource):
    """An OCI Cache (Redis/Valkey) cluster."""

    ocid: str
    display_name: str
    state: str = ""
    software_version: str = ""
    cluster_mode: str = ""
    node_count: Optional[int] = None
    shard_count: Optional[int] = None
    node_memory_gb: Optional[float] = None
    primary_fqdn: str = ""
    primary_endpoint_ip: str = ""
    replicas_fqdn: str = ""
    replicas_endpoint_ip: str = ""
    discovery_fqdn: str = ""
    discovery_endpoint_ip: str = ""
    vcn_id: str = ""
    vcn_name: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    nsg_ids: List[str] = field(default_factory=list)
    nsg_names: List[str] = field(default_factory=list)
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "CacheCluster":
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            state=pick_str(data, "lifecycle-state"),
            software_version=pick_str(data, "software-version"),
            cluster_mode=pick_str(data, "cluster-mode"),
            node_count=pick_int(data, "node-count"),
            shard_count=pick_int(data, "shard-count"),
            node_memory_gb=pick_float(data, "node-memory-in-gbs"),
            primary_fqdn=pick_str(data, "primary-fqdn"),
            primary_endpoint_ip=pick_str(data, "primary-endpoint-ip-address"),
            replicas_fqdn=pick_str(data, "replicas-fqdn"),
            replicas_endpoint_ip=pick_str(data, "replicas-endpoint-ip-address"),
            discovery_fqdn=pick_str(data, "discovery-fqdn"),
            discovery_endpoint_ip=pick_str(data, "discovery-endpoint-ip-address"),
            vcn_id=pick_str(data, "vcn-id"),
            vcn_name=pick_str(data, "vcn-name"),
            subnet_id=pick_str(data, "subnet-id"),
            subnet_name=pick_str(data, "subnet-name"),
            nsg_ids=[str(n) for n in pick_list(data, "nsg-ids")],
            nsg_names=names_of(pick_list(data, "nsg-names", "nsgs")),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    def to_indexable(self) -> Dict[str, str]:
        # Zero counts are treated as unknown.
        return {
            "ID": normalize(self.ocid),
            "DisplayName": normalize(self.display_name),
            "State": normalize(self.state),
            "SoftwareVersion": normalize(self.software_version),
            "ClusterMode": normalize(self.cluster_mode),
            "NodeCount": fmt_number(self.node_count or None),
            "ShardCount": fmt_number(self.shard_count or None),
            "NodeMemoryInGBs": f"{self.node_memory_gb:.0f}" if self.node_memory_gb else "",
            "PrimaryFqdn": normalize(self.primary_fqdn),
            "PrimaryEndpointIpAddress": normalize(self.primary_endpoint_ip),
            "ReplicasFqdn": normalize(self.replicas_fqdn),
            "ReplicasEndpointIpAddress": normalize(self.replicas_endpoint_ip),
            "DiscoveryFqdn": normalize(self.discovery_fqdn),
            "DiscoveryEndpointIpAddress": normalize(self.discovery_endpoint_ip),
            "VcnID": normalize(self.vcn_id),
            "VcnName": normalize(self.vcn_name),
            "SubnetId": normalize(self.subnet_id),
            "SubnetName": normalize(self.subnet_name),
            "NsgNames": join_values(self.nsg_names),
            "NsgIds": join_values(self.nsg_ids),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


CACHECLUSTER_FIELDS = FieldDeclaration(
    searchable=(
        "ID", "DisplayName", "State", "SoftwareVersion", "ClusterMode",
        "NodeCount", "ShardCount", "NodeMemoryInGBs",
        "PrimaryFqdn", "PrimaryEndpointIpAddress",
        "ReplicasFqdn", "ReplicasEndpointIpAddress",
        "DiscoveryFqdn", "DiscoveryEndpointIpAddress",
        "VcnID", "VcnName", "SubnetId", "SubnetName",
        "NsgNames", "NsgIds",
        "TagsKV", "TagsVal",
    ),
    boosted=("DisplayName", "ID", "VcnName", "SubnetName", "PrimaryFqdn"),
)

CACHECLUSTER_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("State", "state"),
    ("Version", "software_version"),
    ("Mode", "cluster_mode"),
    ("Primary FQDN", "primary_fqdn"),
    ("OCID", "ocid"),
)
