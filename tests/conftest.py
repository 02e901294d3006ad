"""Shared fixtures and in-memory fakes of the case services."""

from pathlib import Path
from typing import Dict, List, Optional

import pytest
import yaml

from clusterreview.case import Cluster, ClusterRun, Deduplicator, DescendantResolver, Item, TagService
from clusterreview.review import ProgressReporter


class FakeItem(Item):
    def __init__(self, name: str, statuses: Optional[Dict[str, str]] = None, digest: Optional[str] = None):
        self.name = name
        self.statuses = statuses or {}
        self.digest = digest or name

    def endpoint_status(self, key):
        return self.statuses.get(key)

    def __repr__(self):
        return self.name


class FakeCluster(Cluster):
    def __init__(self, cluster_id: int, members: List[FakeItem]):
        self._id = cluster_id
        self._members = members

    @property
    def id(self):
        return self._id

    def members(self):
        return list(self._members)


class FakeClusterRun(ClusterRun):
    def __init__(self, name: str, clusters: List[FakeCluster]):
        self._name = name
        self._clusters = clusters

    @property
    def name(self):
        return self._name

    def clusters(self):
        return list(self._clusters)


class FakeServices(DescendantResolver, Deduplicator, TagService):
    """Descendants from a parent -> children map, dedup by digest, tags recorded."""

    def __init__(self, children: Optional[Dict[FakeItem, List[FakeItem]]] = None):
        self.children = children or {}
        self.descendant_calls: List[List[FakeItem]] = []
        self.tag_calls: List[tuple] = []
        self.tags: Dict[FakeItem, set] = {}

    def find_descendants(self, items):
        self.descendant_calls.append(list(items))
        found = []
        for item in items:
            found.extend(self.children.get(item, []))
        return found

    def deduplicate(self, items):
        unique = {}
        for item in items:
            unique.setdefault(item.digest, item)
        return set(unique.values())

    def apply_tag(self, label, items):
        self.tag_calls.append((label, list(items)))
        for item in items:
            self.tags.setdefault(item, set()).add(label)


class RecordingReporter(ProgressReporter):
    def __init__(self):
        self.messages: List[str] = []
        self.aborted_counts = None
        self.was_completed = False

    def main_status(self, message):
        self.messages.append(message)

    def sub_status(self, message):
        self.messages.append(message)

    def log(self, message):
        self.messages.append(message)

    def completed(self):
        self.was_completed = True

    def aborted(self, completed, total):
        self.aborted_counts = (completed, total)


def statuses(run: str, cluster_id: int, status: str) -> Dict[str, str]:
    return {f"{run}-{cluster_id}": status}


@pytest.fixture
def services():
    return FakeServices()


@pytest.fixture
def reporter():
    return RecordingReporter()


CASE_DATA = {
    "items": [
        {"id": "e1", "md5": "aaa", "endpoint_status": {"RunA-5": "endpoint"}},
        {"id": "e2", "md5": "bbb", "endpoint_status": {"RunA-5": "endpoint-attach"}},
        {"id": "t1", "md5": "ccc", "endpoint_status": {"RunA-5": "thread-attach"}},
        {"id": "m1", "md5": "ddd", "endpoint_status": {"RunA-5": "thread"}},
        {"id": "a1", "md5": "111", "parent": "e2"},
        {"id": "a2", "md5": "222", "parent": "t1"},
        {"id": "a3", "md5": "111", "parent": "t1"},
        {"id": "n1", "md5": "333", "parent": "a2"},
        {"id": "u1", "md5": "eee", "endpoint_status": {"RunA--1": "endpoint"}},
        {"id": "g1", "md5": "fff", "endpoint_status": {"RunA--2": "endpoint"}},
        {"id": "x1", "md5": "ggg", "endpoint_status": {"RunA-7": "thread-attach"}},
        {"id": "x2", "md5": "hhh", "parent": "x1"},
    ],
    "cluster_runs": [
        {
            "name": "RunA",
            "clusters": [
                {"id": 7, "members": ["x1"]},
                {"id": 5, "members": ["e1", "e2", "t1", "m1"]},
                {"id": -1, "members": ["u1"]},
                {"id": -2, "members": ["g1"]},
            ],
        },
        {"name": "RunB", "clusters": []},
    ],
}


@pytest.fixture
def case_file(tmp_path) -> Path:
    path = tmp_path / "case.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(CASE_DATA, f, sort_keys=False)
    return path
