"""Adapters for autonomous, HeatWave and cache databases."""

from __future__ import annotations

from resource_search.adapters.base import IndexableAdapter
from resource_search.adapters.fields import extract_tag_values, flatten_tags, join_lower, lower_or_empty
from resource_search.domain.resources import AutonomousDatabase, CacheCluster, HeatWaveDatabase
from resource_search.search.index import IndexValue


class AutonomousDatabaseAdapter(IndexableAdapter[AutonomousDatabase]):
    """Sizing values are rendered as text (``"2"``, ``"1.5"``) so they can be searched."""

    def to_indexable(self, record: AutonomousDatabase) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.name),
            "ocid": lower_or_empty(record.id),
            "state": lower_or_empty(record.lifecycle_state),
            "db_version": lower_or_empty(record.db_version),
            "workload": lower_or_empty(record.db_workload),
            "license_model": lower_or_empty(record.license_model),
            "compute_model": lower_or_empty(record.compute_model),
            "ocpu_count": lower_or_empty(record.ocpu_count),
            "ecpu_count": lower_or_empty(record.ecpu_count),
            "cpu_core_count": lower_or_empty(record.cpu_core_count),
            "storage_tb": lower_or_empty(record.data_storage_size_in_tbs),
            "storage_gb": lower_or_empty(record.data_storage_size_in_gbs),
            "vcn_id": lower_or_empty(record.vcn_id),
            "vcn_name": lower_or_empty(record.vcn_name),
            "subnet_id": lower_or_empty(record.subnet_id),
            "subnet_name": lower_or_empty(record.subnet_name),
            "private_endpoint": lower_or_empty(record.private_endpoint),
            "private_endpoint_ip": lower_or_empty(record.private_endpoint_ip),
            "private_endpoint_label": lower_or_empty(record.private_endpoint_label),
            "whitelisted_ips": join_lower(record.whitelisted_ips, ","),
            "nsg_names": join_lower(record.nsg_names, ","),
            "nsg_ids": join_lower(record.nsg_ids, ","),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "state",
            "db_version",
            "workload",
            "license_model",
            "compute_model",
            "ocpu_count",
            "ecpu_count",
            "cpu_core_count",
            "storage_tb",
            "storage_gb",
            "vcn_id",
            "vcn_name",
            "subnet_id",
            "subnet_name",
            "private_endpoint",
            "private_endpoint_ip",
            "private_endpoint_label",
            "whitelisted_ips",
            "nsg_names",
            "nsg_ids",
            "tags_kv",
            "tags_val",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "vcn_name", "subnet_name")


class HeatWaveDatabaseAdapter(IndexableAdapter[HeatWaveDatabase]):
    def to_indexable(self, record: HeatWaveDatabase) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.display_name),
            "ocid": lower_or_empty(record.id),
            "state": lower_or_empty(record.lifecycle_state),
            "description": lower_or_empty(record.description),
            "mysql_version": lower_or_empty(record.mysql_version),
            "shape_name": lower_or_empty(record.shape_name),
            "storage_gb": lower_or_empty(record.data_storage_size_in_gbs),
            "database_mode": lower_or_empty(record.database_mode),
            "access_mode": lower_or_empty(record.access_mode),
            "vcn_id": lower_or_empty(record.vcn_id),
            "vcn_name": lower_or_empty(record.vcn_name),
            "subnet_id": lower_or_empty(record.subnet_id),
            "subnet_name": lower_or_empty(record.subnet_name),
            "hostname_label": lower_or_empty(record.hostname_label),
            "ip_address": lower_or_empty(record.ip_address),
            "nsg_names": join_lower(record.nsg_names, ","),
            "nsg_ids": join_lower(record.nsg_ids, ","),
            "cluster_size": lower_or_empty(record.heatwave_cluster_size),
            "availability_domain": lower_or_empty(record.availability_domain),
            "fault_domain": lower_or_empty(record.fault_domain),
            "crash_recovery": lower_or_empty(record.crash_recovery),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "state",
            "description",
            "mysql_version",
            "shape_name",
            "storage_gb",
            "database_mode",
            "access_mode",
            "vcn_id",
            "vcn_name",
            "subnet_id",
            "subnet_name",
            "hostname_label",
            "ip_address",
            "nsg_names",
            "nsg_ids",
            "cluster_size",
            "availability_domain",
            "fault_domain",
            "crash_recovery",
            "tags_kv",
            "tags_val",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "vcn_name", "subnet_name", "ip_address")


def _count_or_empty(value: int) -> str:
    return str(value) if value > 0 else ""


class CacheClusterAdapter(IndexableAdapter[CacheCluster]):
    """Zero node and shard counts index as blanks; memory is rounded to whole gigabytes."""

    def to_indexable(self, record: CacheCluster) -> dict[str, IndexValue]:
        memory = f"{record.node_memory_in_gbs:.0f}" if record.node_memory_in_gbs > 0 else ""
        return {
            "name": lower_or_empty(record.display_name),
            "ocid": lower_or_empty(record.id),
            "state": lower_or_empty(record.lifecycle_state),
            "software_version": lower_or_empty(record.software_version),
            "cluster_mode": lower_or_empty(record.cluster_mode),
            "node_count": _count_or_empty(record.node_count),
            "shard_count": _count_or_empty(record.shard_count),
            "node_memory_gb": memory,
            "primary_fqdn": lower_or_empty(record.primary_fqdn),
            "primary_endpoint_ip": lower_or_empty(record.primary_endpoint_ip_address),
            "replicas_fqdn": lower_or_empty(record.replicas_fqdn),
            "replicas_endpoint_ip": lower_or_empty(record.replicas_endpoint_ip_address),
            "discovery_fqdn": lower_or_empty(record.discovery_fqdn),
            "discovery_endpoint_ip": lower_or_empty(record.discovery_endpoint_ip_address),
            "vcn_id": lower_or_empty(record.vcn_id),
            "vcn_name": lower_or_empty(record.vcn_name),
            "subnet_id": lower_or_empty(record.subnet_id),
            "subnet_name": lower_or_empty(record.subnet_name),
            "nsg_names": join_lower(record.nsg_names, ","),
            "nsg_ids": join_lower(record.nsg_ids, ","),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "state",
            "software_version",
            "cluster_mode",
            "node_count",
            "shard_count",
            "node_memory_gb",
            "primary_fqdn",
            "primary_endpoint_ip",
            "replicas_fqdn",
            "replicas_endpoint_ip",
            "discovery_fqdn",
            "discovery_endpoint_ip",
            "vcn_id",
            "vcn_name",
            "subnet_id",
            "subnet_name",
            "nsg_names",
            "nsg_ids",
            "tags_kv",
            "tags_val",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "vcn_name", "subnet_name", "primary_fqdn")
