"""Domain records for the supported resource kinds."""

from resource_search.domain.resources import (
    AutonomousDatabase,
    Bucket,
    CacheCluster,
    Cluster,
    Compartment,
    HeatWaveDatabase,
    Image,
    Instance,
    LoadBalancer,
    NodePool,
    Policy,
    TaggedResource,
    Vcn,
    VcnChild,
)


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
    "TaggedResource",
    "Vcn",
    "VcnChild",
]
