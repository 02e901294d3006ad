"""Cluster identity and endpoint status buckets."""

from typing import Dict, List, Optional, Union

UNCLUSTERABLE_ID = -1
IGNORABLE_ID = -2

PSEUDO_CLUSTER_NAMES = {
    UNCLUSTERABLE_ID: "unclusterable",
    IGNORABLE_ID: "ignorable",
}

DisplayId = Union[int, str]


def cluster_display_id(cluster_id: int) -> DisplayId:
    """
    Resolve a cluster ID to its display ID.

    Args:
        cluster_id: Raw cluster ID from the clustering engine

    Returns:
        The pseudo-cluster name for reserved negative IDs, else the ID itself
    """
    return PSEUDO_CLUSTER_NAMES.get(cluster_id, cluster_id)


def is_pseudo_cluster(cluster_id: int) -> bool:
    """Whether the ID is one of the reserved pseudo-cluster IDs."""
    return cluster_id in PSEUDO_CLUSTER_NAMES


def cluster_sort_key(cluster) -> int:
    """Sort key ordering clusters by raw ID (pseudo-clusters first)."""
    return cluster.id


def cluster_status_key(cluster_run_name: str, cluster_id: int) -> str:
    """Key under which an item's endpoint status is recorded for a cluster."""
    return f"{cluster_run_name}-{cluster_id}"


class StatusBuckets:
    """Items of one cluster grouped by endpoint status.

    Buckets exist only for statuses that occur. Looking up any other status
    returns an empty list.
    """

    def __init__(self) -> None:
        self._buckets: Dict[Optional[str], List] = {}

    def add(self, status: Optional[str], item) -> None:
        """Append an item to the bucket for its status."""
        self._buckets.setdefault(status, []).append(item)

    def get(self, status: Optional[str]) -> List:
        """Items with the status, in cluster order (empty if none)."""
        return list(self._buckets.get(status, ()))

    def count(self, status: Optional[str]) -> int:
        return len(self._buckets.get(status, ()))

    def counts(self) -> Dict[str, int]:
        """Item count per status; items without a status count as 'none'."""
        return {
            status if status is not None else "none": len(items)
            for status, items in self._buckets.items()
        }

    def __len__(self) -> int:
        return sum(len(items) for items in self._buckets.values())


def parse_cluster_id(value: str) -> int:
    """Parse a cluster ID or pseudo-cluster name (e.g. '5', '-1', 'unclusterable')."""
    text = str(value).strip().lower()
    for cluster_id, name in PSEUDO_CLUSTER_NAMES.items():
        if text == name:
            return cluster_id
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid cluster ID: {value}")
