"""Cloud resource records the search engine can be pointed at.

These are plain value objects handed over by resource-listing collaborators.
The engine never reads them directly; adapters in ``resource_search.adapters``
flatten them into searchable fields.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaggedResource(BaseModel):
    """Base for resources carrying freeform and namespaced (defined) tags."""

    model_config = ConfigDict(frozen=True)

    freeform_tags: dict[str, str] = Field(default_factory=dict)
    defined_tags: dict[str, dict[str, Any]] = Field(default_factory=dict)


class Image(BaseModel):
    """Compute image."""

    model_config = ConfigDict(frozen=True)

    ocid: str = ""
    display_name: str = ""
    time_created: datetime | None = None
    operating_system: str = ""
    operating_system_version: str = ""
    launch_mode: str = ""


class Instance(TaggedResource):
    """Compute instance enriched with its image and primary VNIC details."""

    ocid: str = ""
    display_name: str = ""
    hostname: str = ""
    primary_ip: str = ""
    image_name: str = ""
    image_os: str = ""
    shape: str = ""
    vcn_name: str = ""
    subnet_name: str = ""


class NodePool(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    node_shape: str = ""


class Cluster(TaggedResource):
    """Kubernetes (OKE) cluster with its node pools."""

    ocid: str = ""
    display_name: str = ""
    kubernetes_version: str = ""
    state: str = ""
    vcn_ocid: str = ""
    private_endpoint: str = ""
    public_endpoint: str = ""
    node_pools: list[NodePool] = Field(default_factory=list)


class Policy(TaggedResource):
    """IAM policy."""

    id: str = ""
    name: str = ""
    description: str = ""
    statements: list[str] = Field(default_factory=list)


class Compartment(TaggedResource):
    ocid: str = ""
    display_name: str = ""
    description: str = ""
    lifecycle_state: str = ""


class AutonomousDatabase(TaggedResource):
    """Autonomous database with resolved network names."""

    id: str = ""
    name: str = ""
    lifecycle_state: str = ""
    db_version: str = ""
    db_workload: str = ""
    license_model: str = ""
    compute_model: str = ""
    ocpu_count: float | None = None
    ecpu_count: float | None = None
    cpu_core_count: int | None = None
    data_storage_size_in_tbs: int | None = None
    data_storage_size_in_gbs: int | None = None
    vcn_id: str = ""
    vcn_name: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    private_endpoint: str = ""
    private_endpoint_ip: str = ""
    private_endpoint_label: str = ""
    whitelisted_ips: list[str] = Field(default_factory=list)
    nsg_names: list[str] = Field(default_factory=list)
    nsg_ids: list[str] = Field(default_factory=list)


class HeatWaveDatabase(TaggedResource):
    """MySQL HeatWave DB system with resolved network names."""

    id: str = ""
    display_name: str = ""
    lifecycle_state: str = ""
    description: str = ""
    mysql_version: str = ""
    shape_name: str = ""
    data_storage_size_in_gbs: int | None = None
    database_mode: str = ""
    access_mode: str = ""
    vcn_id: str = ""
    vcn_name: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    hostname_label: str = ""
    ip_address: str = ""
    nsg_names: list[str] = Field(default_factory=list)
    nsg_ids: list[str] = Field(default_factory=list)
    heatwave_cluster_size: int | None = None
    availability_domain: str = ""
    fault_domain: str = ""
    crash_recovery: str = ""


class CacheCluster(TaggedResource):
    """OCI Cache (Redis) cluster and its endpoints."""

    id: str = ""
    display_name: str = ""
    lifecycle_state: str = ""
    software_version: str = ""
    cluster_mode: str = ""
    node_count: int = 0
    shard_count: int = 0
    node_memory_in_gbs: float = 0.0
    primary_fqdn: str = ""
    primary_endpoint_ip_address: str = ""
    replicas_fqdn: str = ""
    replicas_endpoint_ip_address: str = ""
    discovery_fqdn: str = ""
    discovery_endpoint_ip_address: str = ""
    vcn_id: str = ""
    vcn_name: str = ""
    subnet_id: str = ""
    subnet_name: str = ""
    nsg_names: list[str] = Field(default_factory=list)
    nsg_ids: list[str] = Field(default_factory=list)


class Bucket(TaggedResource):
    """Object storage bucket."""

    ocid: str = ""
    name: str = ""
    namespace: str = ""
    storage_tier: str = ""
    visibility: str = ""
    encryption: str = ""
    versioning: str = ""
    replication_enabled: bool = False
    is_read_only: bool = False


class VcnChild(BaseModel):
    """Named resource attached to a VCN (gateway, subnet, NSG, route table, security list)."""

    model_config = ConfigDict(frozen=True)

    display_name: str = ""


class Vcn(TaggedResource):
    """Virtual cloud network with the names of its attached resources."""

    ocid: str = ""
    display_name: str = ""
    lifecycle_state: str = ""
    cidr_blocks: list[str] = Field(default_factory=list)
    dns_label: str = ""
    domain_name: str = ""
    gateways: list[VcnChild] = Field(default_factory=list)
    subnets: list[VcnChild] = Field(default_factory=list)
    nsgs: list[VcnChild] = Field(default_factory=list)
    route_tables: list[VcnChild] = Field(default_factory=list)
    security_lists: list[VcnChild] = Field(default_factory=list)


class LoadBalancer(BaseModel):
    """Load balancer with its resolved VCN, subnet and certificate names."""

    model_config = ConfigDict(frozen=True)

    ocid: str = ""
    name: str = ""
    state: str = ""
    type: str = ""
    shape: str = ""
    ip_addresses: list[str] = Field(default_factory=list)
    hostnames: list[str] = Field(default_factory=list)
    ssl_certificates: list[str] = Field(default_factory=list)
    subnets: list[str] = Field(default_factory=list)
    vcn_id: str = ""
    vcn_name: str = ""
