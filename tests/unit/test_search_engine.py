"""Unit tests for the tiered fuzzy search engine."""

import logging

import pytest
from prometheus_client import REGISTRY

from resource_search.adapters.base import IndexableAdapter
from resource_search.search.engine import (
    EXACT_LIMIT,
    GENERAL_LIMIT,
    FuzzySearchEngine,
    SearchOutcome,
    Tier,
    general_query,
)
from resource_search.search.errors import IndexBuildError, QueryError


@pytest.fixture
def engine():
    return FuzzySearchEngine()


def _search(engine, records, pattern, fields=("name",), boosted=()):
    index = engine.build_index(records, fields)
    return engine.search(index, pattern, fields, boosted)


def _run(engine, records, pattern, fields=("name",), boosted=()):
    index = engine.build_index(records, fields)
    return engine.run(index, pattern, fields, boosted)


@pytest.mark.unit
class TestEmptyPatterns:
    @pytest.mark.parametrize("pattern", ["", "   ", "\t\n"])
    def test_blank_pattern_returns_nothing(self, engine, name_records, pattern):
        assert _search(engine, name_records, pattern) == []

    def test_blank_pattern_outcome(self, engine, name_records):
        assert _run(engine, name_records, "  ") == SearchOutcome.empty()


@pytest.mark.unit
class TestSpecificTiers:
    """Exact, then substring, then the general tier."""

    def test_exact_match_short_circuits(self, engine):
        records = [{"name": "prod-web"}, {"name": "prod-web-01"}]

        outcome = _run(engine, records, "prod-web")

        assert outcome.tier is Tier.EXACT
        assert outcome.specific is True
        assert outcome.positions == (0,)

    def test_exact_match_ignores_case_and_whitespace_of_pattern(self, engine):
        records = [{"name": "prod-web"}, {"name": "prod-web-01"}]

        assert _search(engine, records, "  PROD-Web ") == [0]

    def test_substring_fallback(self, engine):
        records = [{"name": "prod-web-01"}, {"name": "staging"}]

        outcome = _run(engine, records, "web-01")

        assert outcome.tier is Tier.SUBSTRING
        assert outcome.positions == (0,)

    def test_end_to_end_prod_web(self, engine, name_records):
        positions = _search(engine, name_records, "prod-web", boosted=("name",))

        # order not guaranteed among equal scores
        assert sorted(positions) == [0, 1]
        assert 2 not in positions

    def test_specific_pattern_falls_back_to_general(self, engine):
        records = [{"name": "database"}, {"name": "web"}]

        outcome = _run(engine, records, "databse-")

        assert outcome.specific is True
        assert outcome.tier is Tier.GENERAL
        assert outcome.positions == (0,)

    def test_ocid_exact_match_across_fields(self, engine):
        records = [
            {"name": "web", "ocid": "ocid1.instance.oc1..aaa"},
            {"name": "db", "ocid": "ocid1.instance.oc1..bbb"},
        ]

        outcome = _run(engine, records, "OCID1.instance.oc1..bbb", fields=("name", "ocid"))

        assert outcome.tier is Tier.EXACT
        assert outcome.positions == (1,)


@pytest.mark.unit
class TestGeneralTier:
    def test_fuzzy_tolerates_one_and_two_edits(self, engine):
        records = [{"name": "database"}, {"name": "alpha"}]

        assert _search(engine, records, "databse") == [0]
        assert _search(engine, records, "dtabse") == [0]

    def test_three_edits_do_not_match(self, engine):
        assert _search(engine, [{"name": "alpha"}], "xyzha") == []

    def test_no_match_outcome(self, engine):
        outcome = _run(engine, [{"name": "alpha"}], "xyzha")

        assert outcome.tier is Tier.NONE
        assert outcome.positions == ()

    def test_prefix_match(self, engine, name_records):
        assert _search(engine, name_records, "stag") == [2]

    def test_partial_word_match(self, engine, name_records):
        # order not guaranteed among equal scores
        assert sorted(_search(engine, name_records, "prod")) == [0, 1]

    def test_two_edit_neighbours_rank_below_direct_matches(self, engine, name_records):
        # "web" is two edits from "db"
        positions = _search(engine, name_records, "web")

        # order not guaranteed among equal scores
        assert sorted(positions[:2]) == [0, 1]
        assert positions[2:] == [2]

    def test_boosted_field_ranks_at_or_above(self, engine):
        records = [
            {"name": "alpha", "description": "web server"},
            {"name": "web", "description": "web server"},
        ]

        positions = _search(engine, records, "web", fields=("name", "description"), boosted=("name",))

        assert positions == [1, 0]

    def test_boosted_fields_must_be_searchable(self, engine, name_records):
        index = engine.build_index(name_records, ["name"])

        with pytest.raises(QueryError, match="not searchable"):
            engine.search(index, "web", ["name"], ["ocid"])

    def test_general_query_clause_count(self):
        query = general_query("web", ["name", "ocid"], ["name"])

        assert len(query.children) == 4 * 2 + 1


@pytest.mark.unit
class TestBuildIndex:
    def test_bad_record_names_position(self, engine):
        with pytest.raises(IndexBuildError, match="indexing 1") as excinfo:
            engine.build_index([{"name": "web"}, {"name": None}], ["name"])

        assert excinfo.value.position == 1

    def test_bad_schema(self, engine):
        with pytest.raises(IndexBuildError, match="building schema"):
            engine.build_index([{"name": "web"}], ["name", ""])

    def test_empty_records(self, engine):
        index = engine.build_index([], ["name"])

        assert engine.search(index, "web", ["name"]) == []


@pytest.mark.unit
def test_limits_are_tiered():
    assert EXACT_LIMIT < GENERAL_LIMIT


@pytest.mark.unit
class TestObservability:
    def test_search_emits_span(self, engine, name_records, span_exporter):
        _search(engine, name_records, "prod-web")

        spans = {span.name: span for span in span_exporter.get_finished_spans()}
        assert "resource_search.build_index" in spans
        search_span = spans["resource_search.search"]
        assert search_span.attributes["search.tier"] == "substring"
        assert search_span.attributes["search.hits"] == 2
        assert search_span.attributes["search.specific"] is True

    def test_search_counts_queries_by_tier(self, engine, name_records):
        labels = {"tier": "general"}
        before = REGISTRY.get_sample_value("resource_search_queries_total", labels) or 0.0

        _search(engine, name_records, "web")

        assert REGISTRY.get_sample_value("resource_search_queries_total", labels) == before + 1

    def test_search_logs_summary(self, engine, name_records, caplog):
        caplog.set_level(logging.INFO, logger="resource_search.search.engine")

        _search(engine, name_records, "prod")

        assert "Search matched 2 of 3 records (tier=general" in caplog.text

    def test_custom_logger(self, name_records, caplog):
        custom = logging.getLogger("tests.custom_engine")
        caplog.set_level(logging.INFO, logger="tests.custom_engine")

        _search(FuzzySearchEngine(logger=custom), name_records, "web")

        assert any(record.name == "tests.custom_engine" for record in caplog.records)


class _NameAdapter(IndexableAdapter[dict]):
    def to_indexable(self, record):
        return {"name": record["label"].lower()}

    def searchable_fields(self):
        return ("name",)

    def boosted_fields(self):
        return ("name",)


@pytest.mark.unit
class TestSearchRecords:
    def test_reprojects_positions_onto_records(self, engine):
        records = [{"label": "Prod-Web-01"}, {"label": "Staging-DB-01"}]

        assert engine.search_records(records, _NameAdapter(), "staging") == [records[1]]

    def test_blank_pattern(self, engine):
        assert engine.search_records([{"label": "web"}], _NameAdapter(), " ") == []
