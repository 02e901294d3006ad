"""Tests for cluster identity and status buckets."""

import pytest

from clusterreview.models import (
    StatusBuckets,
    cluster_display_id,
    cluster_status_key,
    is_pseudo_cluster,
    parse_cluster_id,
)


def test_pseudo_cluster_display_ids():
    assert cluster_display_id(-1) == "unclusterable"
    assert cluster_display_id(-2) == "ignorable"


@pytest.mark.parametrize("cluster_id", [0, 1, 5, 9999, -3])
def test_other_ids_display_as_themselves(cluster_id):
    assert cluster_display_id(cluster_id) == cluster_id
    assert not is_pseudo_cluster(cluster_id)


def test_status_key_uses_raw_id():
    assert cluster_status_key("RunA", 5) == "RunA-5"
    assert cluster_status_key("RunA", -1) == "RunA--1"


def test_parse_cluster_id_accepts_names_and_numbers():
    assert parse_cluster_id("12") == 12
    assert parse_cluster_id("-2") == -2
    assert parse_cluster_id("Unclusterable") == -1
    assert parse_cluster_id("ignorable") == -2
    with pytest.raises(ValueError):
        parse_cluster_id("twelve")


def test_missing_status_is_empty_not_error():
    buckets = StatusBuckets()
    assert buckets.get("endpoint") == []
    assert buckets.count("endpoint-attach") == 0
    assert buckets.counts() == {}


def test_buckets_keep_insertion_order_and_count_none():
    buckets = StatusBuckets()
    buckets.add("endpoint", "b")
    buckets.add(None, "x")
    buckets.add("endpoint", "a")

    assert buckets.get("endpoint") == ["b", "a"]
    assert buckets.get(None) == ["x"]
    assert buckets.counts() == {"endpoint": 2, "none": 1}
    assert len(buckets) == 3


def test_get_returns_a_copy():
    buckets = StatusBuckets()
    buckets.add("endpoint", "a")
    buckets.get("endpoint").append("b")
    assert buckets.get("endpoint") == ["a"]
