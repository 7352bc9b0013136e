"""Adapters for compute resources: images, instances and OKE clusters."""

from __future__ import annotations

from resource_search.adapters.base import IndexableAdapter
from resource_search.adapters.fields import extract_tag_values, flatten_tags, join_lower, lower_or_empty
from resource_search.domain.resources import Cluster, Image, Instance
from resource_search.search.index import IndexValue


_IMAGE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class ImageAdapter(IndexableAdapter[Image]):
    def to_indexable(self, record: Image) -> dict[str, IndexValue]:
        created = record.time_created.strftime(_IMAGE_TIME_FORMAT) if record.time_created else ""
        return {
            "name": lower_or_empty(record.display_name),
            "created": created,
            "operating_system": lower_or_empty(record.operating_system),
            "os_version": lower_or_empty(record.operating_system_version),
            "ocid": lower_or_empty(record.ocid),
            "launch_mode": lower_or_empty(record.launch_mode),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return ("name", "operating_system", "os_version", "ocid", "launch_mode")

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "operating_system", "os_version")


class InstanceAdapter(IndexableAdapter[Instance]):
    """Core instance fields plus network placement and tags; name and hostname boosted."""

    def to_indexable(self, record: Instance) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.display_name),
            "hostname": lower_or_empty(record.hostname),
            "primary_ip": lower_or_empty(record.primary_ip),
            "image_name": lower_or_empty(record.image_name),
            "image_os": lower_or_empty(record.image_os),
            "shape": lower_or_empty(record.shape),
            "ocid": lower_or_empty(record.ocid),
            "vcn_name": lower_or_empty(record.vcn_name),
            "subnet_name": lower_or_empty(record.subnet_name),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "hostname",
            "primary_ip",
            "image_name",
            "image_os",
            "shape",
            "ocid",
            "vcn_name",
            "subnet_name",
            "tags_kv",
            "tags_val",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "hostname")


class ClusterAdapter(IndexableAdapter[Cluster]):
    def to_indexable(self, record: Cluster) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.display_name),
            "ocid": lower_or_empty(record.ocid),
            "k8s_version": lower_or_empty(record.kubernetes_version),
            "state": lower_or_empty(record.state),
            "vcn_ocid": lower_or_empty(record.vcn_ocid),
            "private_endpoint": lower_or_empty(record.private_endpoint),
            "public_endpoint": lower_or_empty(record.public_endpoint),
            "node_pools": join_lower((np.display_name for np in record.node_pools), ","),
            "node_shapes": join_lower((np.node_shape for np in record.node_pools), ","),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "k8s_version",
            "state",
            "vcn_ocid",
            "private_endpoint",
            "public_endpoint",
            "node_pools",
            "node_shapes",
            "tags_kv",
            "tags_val",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "node_pools", "node_shapes")
