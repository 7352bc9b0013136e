"""Adapters for virtual cloud networks and load balancers."""

from __future__ import annotations

from resource_search.adapters.base import IndexableAdapter
from resource_search.adapters.fields import extract_tag_values, flatten_tags, join_lower, lower_or_empty
from resource_search.domain.resources import LoadBalancer, Vcn
from resource_search.search.index import IndexValue


class VcnAdapter(IndexableAdapter[Vcn]):
    """Attached gateways, subnets, NSGs, route tables and security lists are searchable by name."""

    def to_indexable(self, record: Vcn) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.display_name),
            "ocid": lower_or_empty(record.ocid),
            "state": lower_or_empty(record.lifecycle_state),
            "cidrs": join_lower(record.cidr_blocks),
            "dns_label": lower_or_empty(record.dns_label),
            "domain_name": lower_or_empty(record.domain_name),
            "tags_kv": flatten_tags(record.freeform_tags, record.defined_tags),
            "tags_val": extract_tag_values(record.freeform_tags, record.defined_tags),
            "gateways": join_lower(g.display_name for g in record.gateways),
            "subnets": join_lower(s.display_name for s in record.subnets),
            "nsgs": join_lower(n.display_name for n in record.nsgs),
            "route_tables": join_lower(r.display_name for r in record.route_tables),
            "security_lists": join_lower(sl.display_name for sl in record.security_lists),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "state",
            "cidrs",
            "dns_label",
            "domain_name",
            "tags_kv",
            "tags_val",
            "gateways",
            "subnets",
            "nsgs",
            "route_tables",
            "security_lists",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "dns_label", "domain_name", "tags_kv", "tags_val")


class LoadBalancerAdapter(IndexableAdapter[LoadBalancer]):
    def to_indexable(self, record: LoadBalancer) -> dict[str, IndexValue]:
        return {
            "name": lower_or_empty(record.name),
            "ocid": lower_or_empty(record.ocid),
            "type": lower_or_empty(record.type),
            "state": lower_or_empty(record.state),
            "vcn_name": lower_or_empty(record.vcn_name),
            "shape": lower_or_empty(record.shape),
            "ip_addresses": join_lower(record.ip_addresses),
            "hostnames": join_lower(record.hostnames),
            "ssl_certificates": join_lower(record.ssl_certificates),
            "subnets": join_lower(record.subnets),
        }

    def searchable_fields(self) -> tuple[str, ...]:
        return (
            "name",
            "ocid",
            "type",
            "state",
            "vcn_name",
            "shape",
            "ip_addresses",
            "hostnames",
            "ssl_certificates",
            "subnets",
        )

    def boosted_fields(self) -> tuple[str, ...]:
        return ("name", "ocid", "hostnames")
