"""Endpoint status partitioning and review tagging."""

from .partitioner import (
    ENDPOINT,
    ENDPOINT_ATTACH,
    THREAD_ATTACH,
    ClusterPartitioner,
    ReviewSet,
    ordered_union,
)
from .progress import CancellationToken, ConsoleProgressReporter, ProgressReporter
from .selection import select_clusters, sorted_clusters
from .tagger import TAG_PREFIX, ClusterTagger, build_tag_label

__all__ = [
    "ENDPOINT",
    "ENDPOINT_ATTACH",
    "THREAD_ATTACH",
    "ClusterPartitioner",
    "ReviewSet",
    "ordered_union",
    "CancellationToken",
    "ConsoleProgressReporter",
    "ProgressReporter",
    "select_clusters",
    "sorted_clusters",
    "TAG_PREFIX",
    "ClusterTagger",
    "build_tag_label",
]
