"""Networking domain records: VCNs, subnets, and load balancers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from ocloud.resources.base import (
    Columns,
    Resource,
    names_of,
    pick,
    pick_bool,
    pick_dict,
    pick_list,
    pick_str,
)
from ocloud.search.base_search import FieldDeclaration, join_values, normalize
from ocloud.search.tags import tag_fields


@dataclass(slots=True)
class Vcn(Resource):
    """A virtual cloud network with the names of its attached resources."""

    ocid: str
    display_name: str
    state: str = ""
    cidr_blocks: List[str] = field(default_factory=list)
    dns_label: str = ""
    domain_name: str = ""
    time_created: str = ""
    gateways: List[str] = field(default_factory=list)
    subnets: List[str] = field(default_factory=list)
    nsgs: List[str] = field(default_factory=list)
    route_tables: List[str] = field(default_factory=list)
    security_lists: List[str] = field(default_factory=list)
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Vcn":
        cidrs = pick_list(data, "cidr-blocks") or pick_list(data, "cidr-block")
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            state=pick_str(data, "lifecycle-state"),
            cidr_blocks=[str(c) for c in cidrs],
            dns_label=pick_str(data, "dns-label"),
            domain_name=pick_str(data, "vcn-domain-name", "domain-name"),
            time_created=pick_str(data, "time-created"),
            gateways=names_of(pick_list(data, "gateways")),
            subnets=names_of(pick_list(data, "subnets")),
            nsgs=names_of(pick_list(data, "nsgs", "network-security-groups")),
            route_tables=names_of(pick_list(data, "route-tables")),
            security_lists=names_of(pick_list(data, "security-lists")),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OCID": normalize(self.ocid),
            "State": normalize(self.state),
            "CIDRs": join_values(self.cidr_blocks),
            "DnsLabel": normalize(self.dns_label),
            "DomainName": normalize(self.domain_name),
            "Gateways": join_values(self.gateways),
            "Subnets": join_values(self.subnets),
            "NSGs": join_values(self.nsgs),
            "RouteTables": join_values(self.route_tables),
            "SecLists": join_values(self.security_lists),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


VCN_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "OCID", "State", "CIDRs", "DnsLabel", "DomainName", "TagsKV", "TagsVal",
        "Gateways", "Subnets", "NSGs", "RouteTables", "SecLists",
    ),
    boosted=("Name", "OCID", "DnsLabel", "DomainName", "TagsKV", "TagsVal"),
)

VCN_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("State", "state"),
    ("CIDRs", "cidr_blocks"),
    ("DNS Label", "dns_label"),
    ("OCID", "ocid"),
)


@dataclass(slots=True)
class Subnet(Resource):
    ocid: str
    display_name: str
    cidr: str = ""
    vcn_id: str = ""
    vcn_name: str = ""
    state: str = ""
    dns_label: str = ""
    domain_name: str = ""
    prohibit_public_ip: bool = False
    route_table_id: str = ""
    security_list_ids: List[str] = field(default_factory=list)
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Subnet":
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            cidr=pick_str(data, "cidr-block", "cidr"),
            vcn_id=pick_str(data, "vcn-id"),
            vcn_name=pick_str(data, "vcn-name"),
            state=pick_str(data, "lifecycle-state"),
            dns_label=pick_str(data, "dns-label"),
            domain_name=pick_str(data, "subnet-domain-name"),
            prohibit_public_ip=bool(pick_bool(data, "prohibit-public-ip-on-vnic")),
            route_table_id=pick_str(data, "route-table-id"),
            security_list_ids=[str(s) for s in pick_list(data, "security-list-ids")],
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    @property
    def public_ip(self) -> str:
        return "No" if self.prohibit_public_ip else "Yes"

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OCID": normalize(self.ocid),
            "CIDR": normalize(self.cidr),
            "VcnName": normalize(self.vcn_name),
            "DnsLabel": normalize(self.dns_label),
            "DomainName": normalize(self.domain_name),
        }


SUBNET_FIELDS = FieldDeclaration(
    searchable=("Name", "OCID", "CIDR", "VcnName", "DnsLabel", "DomainName"),
    boosted=("Name", "OCID", "CIDR"),
)

SUBNET_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("CIDR", "cidr"),
    ("Public IP", "public_ip"),
    ("DNS Label", "dns_label"),
    ("Subnet Domain", "domain_name"),
)


@dataclass(slots=True)
class LoadBalancer(Resource):
    """A flexible or network load balancer."""

    ocid: str
    display_name: str
    state: str = ""
    type: str = ""
    shape: str = ""
    vcn_name: str = ""
    ip_addresses: List[str] = field(default_factory=list)
    hostnames: List[str] = field(default_factory=list)
    ssl_certificates: List[str] = field(default_factory=list)
    subnets: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "LoadBalancer":
        ips: List[str] = []
        for entry in pick_list(data, "ip-addresses"):
            if isinstance(entry, Mapping):
                addr = pick_str(entry, "ip-address")
            else:
                addr = str(entry)
            if addr:
                ips.append(addr)
        is_private = pick_bool(data, "is-private")
        lb_type = pick_str(data, "type")
        if not lb_type and is_private is not None:
            lb_type = "Private" if is_private else "Public"
        hostnames = pick(data, "hostnames", default={})
        if isinstance(hostnames, Mapping):
            hostnames = list(hostnames.values())
        certificates = pick(data, "certificates", default={})
        if isinstance(certificates, Mapping):
            certificates = list(certificates.keys())
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "display-name"),
            state=pick_str(data, "lifecycle-state"),
            type=lb_type,
            shape=pick_str(data, "shape-name", "shape"),
            vcn_name=pick_str(data, "vcn-name"),
            ip_addresses=ips,
            hostnames=_hostname_values(hostnames),
            ssl_certificates=names_of(certificates or []),
            subnets=names_of(pick_list(data, "subnet-names") or pick_list(data, "subnet-ids")),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "OCID": normalize(self.ocid),
            "Type": normalize(self.type),
            "State": normalize(self.state),
            "VcnName": normalize(self.vcn_name),
            "Shape": normalize(self.shape),
            "IPAddresses": join_values(self.ip_addresses),
            "Hostnames": join_values(self.hostnames),
            "SSLCertificates": join_values(self.ssl_certificates),
            "Subnets": join_values(self.subnets),
        }


def _hostname_values(entries: Any) -> List[str]:
    out: List[str] = []
    for entry in entries or []:
        if isinstance(entry, Mapping):
            value = pick_str(entry, "hostname", "name")
        else:
            value = str(entry)
        if value:
            out.append(value)
    return out


LOADBALANCER_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "OCID", "Type", "State", "VcnName", "Shape",
        "IPAddresses", "Hostnames", "SSLCertificates", "Subnets",
    ),
    boosted=("Name", "OCID", "Hostnames"),
)

LOADBALANCER_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("State", "state"),
    ("Type", "type"),
    ("Shape", "shape"),
    ("IPs", "ip_addresses"),
    ("OCID", "ocid"),
)
