"""Unit tests for BM25 statistics helpers."""

import math

import pytest

from resource_search.search.stats import FieldLengthStats, bm25, calculate_idf, compute_field_length_stats


@pytest.mark.unit
def test_compute_field_length_stats_averages_per_field():
    stats = compute_field_length_stats({"name": {"0": 2, "1": 4}, "ocid": {}})

    assert stats["name"].total_terms == 6
    assert stats["name"].document_count == 2
    assert stats["name"].average_length == 3.0
    assert stats["ocid"].average_length == 0.0


@pytest.mark.unit
def test_field_length_stats_ignores_negative_lengths():
    stats = compute_field_length_stats({"name": {"0": -3, "1": 3}})

    assert stats["name"] == FieldLengthStats(field="name", total_terms=3, document_count=2)


@pytest.mark.unit
class TestCalculateIdf:
    def test_rare_terms_weigh_more(self):
        assert calculate_idf(1, 100) > calculate_idf(50, 100)

    def test_never_negative_on_tiny_corpora(self):
        assert calculate_idf(2, 2) > 0

    def test_empty_corpus(self):
        assert calculate_idf(0, 0) == 0.0

    def test_single_document_value(self):
        assert calculate_idf(1, 1) == pytest.approx(math.log(1 / 3 + 1e-6) + 1.0)


@pytest.mark.unit
class TestBm25:
    def test_zero_frequency_scores_zero(self):
        assert bm25(0, 5, 5.0) == 0.0

    def test_shorter_fields_score_higher(self):
        assert bm25(1, 1, 3.0) > bm25(1, 6, 3.0)

    def test_saturates_with_frequency(self):
        assert bm25(10, 10, 10.0) < 1.2 + 1

    def test_average_length_document(self):
        assert bm25(1, 4, 4.0) == pytest.approx(1.0)
