"""Typed OCI resource records and the registry that ties them to search fields."""

from .compute import Cluster, Image, Instance, NodePool
from .database import AutonomousDatabase, CacheCluster, HeatWaveDatabase
from .identity import Compartment, Policy
from .network import LoadBalancer, Subnet, Vcn
from .storage import Bucket
from .registry import RESOURCE_TYPES, ResourceType, get_resource_type

__all__ = [
    "AutonomousDatabase",
    "Bucket",
    "CacheCluster",
    "Cluster",
    "Compartment",
    "HeatWaveDatabase",
    "Image",
    "Instance",
    "LoadBalancer",
    "NodePool",
    "Policy",
    "RESOURCE_TYPES",
    "ResourceType",
    "Subnet",
    "Vcn",
    "get_resource_type",
]
