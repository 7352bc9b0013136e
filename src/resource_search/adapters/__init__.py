"""Indexable adapters: one per searchable resource kind."""

from resource_search.adapters.base import FieldDeclaration, IndexableAdapter
from resource_search.adapters.compute import ClusterAdapter, ImageAdapter, InstanceAdapter
from resource_search.adapters.database import AutonomousDatabaseAdapter, CacheClusterAdapter, HeatWaveDatabaseAdapter
from resource_search.adapters.fields import extract_tag_values, flatten_tags, join_lower, lower_or_empty
from resource_search.adapters.identity import CompartmentAdapter, PolicyAdapter
from resource_search.adapters.network import LoadBalancerAdapter, VcnAdapter
from resource_search.adapters.storage import BucketAdapter


__all__ = [
    "AutonomousDatabaseAdapter",
    "BucketAdapter",
    "CacheClusterAdapter",
    "ClusterAdapter",
    "CompartmentAdapter",
    "FieldDeclaration",
    "HeatWaveDatabaseAdapter",
    "ImageAdapter",
    "IndexableAdapter",
    "InstanceAdapter",
    "LoadBalancerAdapter",
    "PolicyAdapter",
    "VcnAdapter",
    "extract_tag_values",
    "flatten_tags",
    "join_lower",
    "lower_or_empty",
]
