"""Adapter for object storage buckets."""

from __future__ import annotations

from resource_search.adapters.base import IndexableAdapter
from resource_search.adapters.fields import extract_tag_values, flatten_tags, lower_or_empty
from resource_search.domain.resources import Bucket
from resource_search.search.index import IndexValue


class BucketAdapter(IndexableAdapter[Bucket]):
    def to_indexable(self, record: Bucket) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.name),
            "ocid": lower_or_empty(record.ocid),
            "namespace": lower_or_empty(record.namespace),
            "storage_tier": lower_or_empty(record.storage_tier),
            "visibility": lower_or_empty(record.visibility),
            "encryption": lower_or_empty(record.encryption),
            "versioning": lower_or_empty(record.versioning),
            "replication_enabled": lower_or_empty(record.replication_enabled),
            "is_read_only": lower_or_empty(record.is_read_only),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "namespace",
            "storage_tier",
            "visibility",
            "encryption",
            "versioning",
            "replication_enabled",
            "is_read_only",
            "tags_kv",
            "tags_val",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "namespace", "tags_kv", "tags_val")
