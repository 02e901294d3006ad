"""Data models for cluster review tagging."""

from .cluster import (
    IGNORABLE_ID,
    UNCLUSTERABLE_ID,
    DisplayId,
    StatusBuckets,
    cluster_display_id,
    cluster_sort_key,
    cluster_status_key,
    is_pseudo_cluster,
    parse_cluster_id,
)
from .run import RUN_ABORTED, RUN_COMPLETED, ClusterTagResult, TagRunResult

__all__ = [
    "IGNORABLE_ID",
    "UNCLUSTERABLE_ID",
    "DisplayId",
    "StatusBuckets",
    "cluster_display_id",
    "cluster_sort_key",
    "cluster_status_key",
    "is_pseudo_cluster",
    "parse_cluster_id",
    "RUN_ABORTED",
    "RUN_COMPLETED",
    "ClusterTagResult",
    "TagRunResult",
]
