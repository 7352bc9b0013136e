"""Adapters for identity resources: policies and compartments."""

from __future__ import annotations

from resource_search.adapters.base import IndexableAdapter
from resource_search.adapters.fields import extract_tag_values, flatten_tags, join_lower, lower_or_empty
from resource_search.domain.resources import Compartment, Policy
from resource_search.search.index import IndexValue


class PolicyAdapter(IndexableAdapter[Policy]):
    """Policies are searchable by their statements as well as their name."""

    def to_indexable(self, record: Policy) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.name),
            "description": lower_or_empty(record.description),
            "ocid": lower_or_empty(record.id),
            "statements": join_lower(record.statements),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return ("name", "description", "ocid", "statements", "tags_kv", "tags_val")

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "statements", "tags_kv", "tags_val")


class CompartmentAdapter(IndexableAdapter[Compartment]):
    def to_indexable(self, record: Compartment) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.display_name),
            "description": lower_or_empty(record.description),
            "ocid": lower_or_empty(record.ocid),
            "state": lower_or_empty(record.lifecycle_state),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return ("name", "description", "ocid", "state", "tags_kv", "tags_val")

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "tags_kv", "tags_val")
