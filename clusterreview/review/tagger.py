"""Tag the review set of each selected cluster."""

from typing import Optional, Sequence

import pendulum

from ..case.interfaces import Cluster, Deduplicator, DescendantResolver, TagService
from ..models import (
    RUN_ABORTED,
    RUN_COMPLETED,
    ClusterTagResult,
    TagRunResult,
    cluster_display_id,
)
from .partitioner import ClusterPartitioner
from .progress import CancellationToken, ProgressReporter

TAG_PREFIX = "ClusterReview"


def build_tag_label(cluster_run_name: str, cluster_id: int) -> str:
    """Tag label for a cluster, e.g. ClusterReview|RunA|5."""
    return f"{TAG_PREFIX}|{cluster_run_name}|{cluster_display_id(cluster_id)}"


class ClusterTagger:
    """Tags items for review, one cluster at a time."""

    def __init__(
        self,
        tag_service: Optional[TagService],
        descendant_resolver: DescendantResolver,
        deduplicator: Deduplicator,
        reporter: Optional[ProgressReporter] = None,
        cancellation=None,
    ) -> None:
        """
        Initialize cluster tagger.

        Args:
            tag_service: Service that applies labels (None derives review sets only)
            descendant_resolver: Finds attachments of items
            deduplicator: Reduces attachments to unique items
            reporter: Progress sink
            cancellation: Object with is_set(), polled once per cluster
        """
        self.tag_service = tag_service
        self.reporter = reporter or ProgressReporter()
        self.cancellation = cancellation or CancellationToken()
        self.partitioner = ClusterPartitioner(descendant_resolver, deduplicator, self.reporter)

    def tag_cluster(self, cluster_run_name: str, cluster: Cluster) -> ClusterTagResult:
        """Tag the review set of a single cluster."""
        display_id = cluster_display_id(cluster.id)
        self.reporter.main_status(f"Tagging Cluster {cluster_run_name}-{display_id}")

        review = self.partitioner.review(cluster_run_name, cluster)
        label = build_tag_label(cluster_run_name, cluster.id)

        if self.tag_service is not None:
            self.reporter.sub_status(f"Tagging {len(review)} items with: {label}")
            self.reporter.sub_progress(0)
            self.tag_service.apply_tag(label, review.items)
        else:
            self.reporter.sub_status(f"Dry run: {len(review)} items would be tagged with: {label}")

        return ClusterTagResult(
            cluster_id=cluster.id,
            display_id=display_id,
            label=label,
            status_counts=review.buckets.counts(),
            descendants_found=review.descendants_found,
            descendants_added=review.descendants_added,
            tagged_items=len(review),
        )

    def tag_all(self, cluster_run_name: str, clusters: Sequence[Cluster]) -> TagRunResult:
        """
        Tag every cluster in order, stopping early if cancellation is requested.

        Cancellation is checked after each cluster is tagged, before the next
        one starts, so a request during the last cluster still completes the
        run. Clusters already tagged stay tagged. Errors from the services are
        not caught.

        Args:
            cluster_run_name: Cluster run the clusters belong to
            clusters: Selected clusters

        Returns:
            Run result with per-cluster outcomes
        """
        clusters = list(clusters)
        result = TagRunResult(
            cluster_run=cluster_run_name,
            total_clusters=len(clusters),
            started_at=pendulum.now(),
        )

        self.reporter.main_status(f"Tagging {cluster_run_name}")
        self.reporter.main_progress(0, len(clusters))

        for index, cluster in enumerate(clusters):
            self.reporter.main_progress(index)
            result.clusters.append(self.tag_cluster(cluster_run_name, cluster))
            result.completed_clusters = index + 1
            self.reporter.main_progress(index + 1)

            if index + 1 < len(clusters) and self.cancellation.is_set():
                result.status = RUN_ABORTED
                break

        result.finished_at = pendulum.now()
        if result.aborted:
            self.reporter.main_status("Aborted")
            self.reporter.aborted(result.completed_clusters, result.total_clusters)
        else:
            result.status = RUN_COMPLETED
            self.reporter.completed()
        return result
