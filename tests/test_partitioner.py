"""Tests for partitioning clusters and deriving review sets."""

from clusterreview.review import ClusterPartitioner

from conftest import FakeCluster, FakeItem, FakeServices, statuses


def _partitioner(services, reporter=None):
    return ClusterPartitioner(services, services, reporter)


def test_partition_by_status_groups_members_in_order():
    e1 = FakeItem("e1", statuses("RunA", 5, "endpoint"))
    m1 = FakeItem("m1", statuses("RunA", 5, "thread"))
    e2 = FakeItem("e2", statuses("RunA", 5, "endpoint"))
    other = FakeItem("o1", statuses("RunB", 5, "endpoint"))
    cluster = FakeCluster(5, [e1, m1, e2, other])

    buckets = _partitioner(FakeServices()).partition_by_status("RunA", cluster)

    assert buckets.get("endpoint") == [e1, e2]
    assert buckets.get("thread") == [m1]
    assert buckets.get(None) == [other]


def test_worked_example():
    e1 = FakeItem("e1", statuses("RunA", 5, "endpoint"))
    e2 = FakeItem("e2", statuses("RunA", 5, "endpoint-attach"))
    t1 = FakeItem("t1", statuses("RunA", 5, "thread-attach"))
    a1, a2 = FakeItem("a1"), FakeItem("a2")
    services = FakeServices({e2: [a1], t1: [a2]})

    review = _partitioner(services).review("RunA", FakeCluster(5, [e1, e2, t1]))

    assert review.items == [e1, e2, a1, a2]
    assert services.descendant_calls == [[e2, t1]]
    assert review.descendants_found == 2
    assert review.descendants_added == 2


def test_all_endpoints_review_set_is_members():
    members = [FakeItem(f"e{i}", statuses("RunA", 3, "endpoint")) for i in range(4)]

    review = _partitioner(FakeServices()).review("RunA", FakeCluster(3, members))

    assert review.items == members


def test_thread_attach_alone_is_not_reviewed():
    t1 = FakeItem("t1", statuses("RunA", 2, "thread-attach"))
    m1 = FakeItem("m1", statuses("RunA", 2, "thread"))
    services = FakeServices({t1: [FakeItem("a1")]})

    review = _partitioner(services).review("RunA", FakeCluster(2, [t1, m1]))

    assert review.items == []
    assert services.descendant_calls == []


def test_thread_attach_without_endpoint_attach_keeps_endpoints_only():
    e1 = FakeItem("e1", statuses("RunA", 2, "endpoint"))
    t1 = FakeItem("t1", statuses("RunA", 2, "thread-attach"))
    services = FakeServices({t1: [FakeItem("a1")]})

    review = _partitioner(services).review("RunA", FakeCluster(2, [t1, e1]))

    assert review.items == [e1]


def test_descendants_are_deduplicated():
    e2 = FakeItem("e2", statuses("RunA", 1, "endpoint-attach"))
    t1 = FakeItem("t1", statuses("RunA", 1, "thread-attach"))
    a1 = FakeItem("a1", digest="same")
    a1_copy = FakeItem("a1-copy", digest="same")
    a2 = FakeItem("a2")
    services = FakeServices({e2: [a1, a2], t1: [a1_copy]})

    review = _partitioner(services).review("RunA", FakeCluster(1, [e2, t1]))

    assert review.items == [e2, a1, a2]
    assert review.descendants_found == 3
    assert review.descendants_added == 2


def test_direct_members_are_not_deduplicated():
    e1 = FakeItem("e1", statuses("RunA", 1, "endpoint"), digest="same")
    e2 = FakeItem("e2", statuses("RunA", 1, "endpoint"), digest="same")

    review = _partitioner(FakeServices()).review("RunA", FakeCluster(1, [e1, e2]))

    assert review.items == [e1, e2]


def test_pseudo_cluster_status_key():
    u1 = FakeItem("u1", {"RunA--1": "endpoint"})

    review = _partitioner(FakeServices()).review("RunA", FakeCluster(-1, [u1]))

    assert review.items == [u1]


def test_review_set_stays_within_cluster_and_descendants():
    e2 = FakeItem("e2", statuses("RunA", 4, "endpoint-attach"))
    t1 = FakeItem("t1", statuses("RunA", 4, "thread-attach"))
    m1 = FakeItem("m1", statuses("RunA", 4, "thread"))
    a1, a2 = FakeItem("a1"), FakeItem("a2")
    services = FakeServices({e2: [a1], t1: [a2], m1: [FakeItem("not-reviewed")]})
    cluster = FakeCluster(4, [e2, t1, m1])

    review = _partitioner(services).review("RunA", cluster)

    allowed = set(cluster.members()) | {a1, a2}
    assert set(review.items) <= allowed
    assert m1 not in review.items and t1 not in review.items


def test_empty_cluster():
    review = _partitioner(FakeServices()).review("RunA", FakeCluster(9, []))
    assert review.items == []
    assert len(review.buckets) == 0


def test_reports_counts(reporter):
    e1 = FakeItem("e1", statuses("RunA", 5, "endpoint"))
    e2 = FakeItem("e2", statuses("RunA", 5, "endpoint-attach"))
    services = FakeServices({e2: [FakeItem("a1")]})

    _partitioner(services, reporter).review("RunA", FakeCluster(5, [e1, e2]))

    assert "Adding 1 items with status: endpoint" in reporter.messages
    assert "Found 1 descendants" in reporter.messages
    assert "Adding 1 deduplicated items (attachments)" in reporter.messages
