"""Unit tests for the resource search service layer."""

import logging
from unittest.mock import Mock

from opentelemetry.trace import StatusCode
import pytest

from resource_search.adapters import BucketAdapter, InstanceAdapter
from resource_search.domain import Bucket, Instance
from resource_search.search.engine import FuzzySearchEngine
from resource_search.search.errors import IndexBuildError, SearchError
from resource_search.service_layer import RecordSourceError, ResourceSearchService


@pytest.fixture
def instances():
    return [
        Instance(display_name="prod-web-01", ocid="ocid1.instance.oc1..aaa"),
        Instance(display_name="prod-web-02", ocid="ocid1.instance.oc1..bbb"),
        Instance(display_name="staging-db-01", ocid="ocid1.instance.oc1..ccc"),
    ]


@pytest.mark.unit
class TestResourceSearchService:
    def test_returns_matching_records(self, instances):
        service = ResourceSearchService(lambda: instances, InstanceAdapter())

        matches = service.fuzzy_search("prod-web")

        # order not guaranteed among equal scores
        assert sorted(m.display_name for m in matches) == ["prod-web-01", "prod-web-02"]

    def test_source_is_read_on_every_search(self, instances):
        source = Mock(return_value=instances)
        service = ResourceSearchService(source, InstanceAdapter())

        service.fuzzy_search("web")
        service.fuzzy_search("db")

        assert source.call_count == 2

    def test_blank_pattern_skips_source(self):
        source = Mock(return_value=[])
        service = ResourceSearchService(source, InstanceAdapter())

        assert service.fuzzy_search("   ") == []
        source.assert_not_called()

    def test_empty_source(self):
        service = ResourceSearchService(lambda: [], BucketAdapter())

        assert service.fuzzy_search("backups") == []

    def test_none_from_source_is_treated_as_empty(self):
        service = ResourceSearchService(lambda: None, BucketAdapter())

        assert service.fuzzy_search("backups") == []

    def test_source_failure_is_wrapped(self):
        def failing_source():
            raise ConnectionError("listing buckets timed out")

        service = ResourceSearchService(failing_source, BucketAdapter())

        with pytest.raises(RecordSourceError, match="BucketAdapter records failed: listing buckets timed out") as excinfo:
            service.fuzzy_search("backups")

        assert isinstance(excinfo.value, SearchError)
        assert isinstance(excinfo.value.__cause__, ConnectionError)

    def test_engine_errors_propagate(self):
        class BrokenAdapter(BucketAdapter):
            def to_indexable(self, record):
                indexable = super().to_indexable(record)
                indexable["name"] = None
                return indexable

        service = ResourceSearchService(lambda: [Bucket(name="a")], BrokenAdapter())

        with pytest.raises(IndexBuildError) as excinfo:
            service.fuzzy_search("a")

        assert excinfo.value.position == 0

    def test_uses_supplied_engine(self, instances):
        engine = Mock(spec=FuzzySearchEngine)
        engine.search_records.return_value = [instances[2]]
        service = ResourceSearchService(lambda: instances, InstanceAdapter(), engine)

        assert service.fuzzy_search("staging") == [instances[2]]
        engine.search_records.assert_called_once_with(instances, service.adapter, "staging")

    def test_logger_is_shared_with_default_engine(self, instances, caplog):
        custom = logging.getLogger("tests.service")
        caplog.set_level(logging.INFO, logger="tests.service")
        service = ResourceSearchService(lambda: instances, InstanceAdapter(), logger=custom)

        service.fuzzy_search("staging")

        assert service.engine.logger is custom
        assert "Pattern matched 1 of 3 records" in caplog.text

    def test_search_span_parents_engine_spans(self, instances, span_exporter):
        ResourceSearchService(lambda: instances, InstanceAdapter()).fuzzy_search("prod-web")

        spans = {span.name: span for span in span_exporter.get_finished_spans()}
        parent = spans["resource_search.fuzzy_search"]
        assert parent.attributes["search.adapter"] == "InstanceAdapter"
        for child in ("resource_search.build_index", "resource_search.search"):
            assert spans[child].parent.span_id == parent.context.span_id
            assert spans[child].context.trace_id == parent.context.trace_id

    def test_source_failure_marks_span_as_error(self, span_exporter):
        def failing_source():
            raise ConnectionError("timed out")

        with pytest.raises(RecordSourceError):
            ResourceSearchService(failing_source, BucketAdapter()).fuzzy_search("backups")

        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
