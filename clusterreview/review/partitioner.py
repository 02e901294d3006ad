"""Partition cluster members by endpoint status and pick the items for review."""

from typing import List, Optional, Sequence

from ..case.interfaces import Cluster, Deduplicator, DescendantResolver, Item
from ..models import StatusBuckets, cluster_status_key
from .progress import ProgressReporter

ENDPOINT = "endpoint"
ENDPOINT_ATTACH = "endpoint-attach"
THREAD_ATTACH = "thread-attach"


class ReviewSet:
    """Items selected for review from one cluster."""

    def __init__(self, items: List[Item], buckets: StatusBuckets) -> None:
        self.items = items
        self.buckets = buckets
        self.descendants_found = 0
        self.descendants_added = 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def ordered_union(*groups: Sequence[Item]) -> List[Item]:
    """Union of item groups, keeping first-seen order."""
    return list(dict.fromkeys(item for group in groups for item in group))


class ClusterPartitioner:
    """Sort a cluster's items by endpoint status and find the items for review.

    Items for review are:
     - items with status endpoint or endpoint-attach
     - deduplicated descendants of endpoint-attach or thread-attach items,
       only when the cluster has at least one endpoint-attach item
    """

    def __init__(
        self,
        descendant_resolver: DescendantResolver,
        deduplicator: Deduplicator,
        reporter: Optional[ProgressReporter] = None,
    ) -> None:
        self.descendant_resolver = descendant_resolver
        self.deduplicator = deduplicator
        self.reporter = reporter or ProgressReporter()

    def partition_by_status(self, cluster_run_name: str, cluster: Cluster) -> StatusBuckets:
        """
        Group a cluster's members by their endpoint status.

        Args:
            cluster_run_name: Name of the cluster run the cluster belongs to
            cluster: Cluster to partition

        Returns:
            Buckets in member order, keyed by status (None for no status)
        """
        self.reporter.sub_status("Sorting by endpoint status")
        key = cluster_status_key(cluster_run_name, cluster.id)
        members = cluster.members()
        buckets = StatusBuckets()

        self.reporter.sub_progress(0, len(members))
        for index, item in enumerate(members, 1):
            buckets.add(item.endpoint_status(key), item)
            self.reporter.sub_progress(index)

        return buckets

    def _add_status(self, buckets: StatusBuckets, status: str) -> List[Item]:
        items = buckets.get(status)
        self.reporter.log(f"Adding {len(items)} items with status: {status}")
        return items

    def _attachments(self, buckets: StatusBuckets, review: ReviewSet) -> List[Item]:
        """Deduplicated descendants of endpoint-attach and thread-attach items."""
        self.reporter.sub_status("Getting attachments")
        self.reporter.sub_progress(1, 5)
        sources = ordered_union(buckets.get(ENDPOINT_ATTACH), buckets.get(THREAD_ATTACH))
        self.reporter.log(
            f"Finding attachments from {len(sources)} items with status: "
            f"{ENDPOINT_ATTACH} OR {THREAD_ATTACH}"
        )

        self.reporter.sub_progress(2)
        descendants = list(self.descendant_resolver.find_descendants(sources))
        review.descendants_found = len(descendants)
        self.reporter.log(f"Found {len(descendants)} descendants")

        self.reporter.sub_progress(3)
        unique = self.deduplicator.deduplicate(descendants)
        # Keep the resolver's order; the deduplicator only decides membership
        attachments = [item for item in ordered_union(descendants) if item in unique]
        review.descendants_added = len(attachments)
        self.reporter.log(f"Adding {len(attachments)} deduplicated items (attachments)")
        self.reporter.sub_progress(4)
        return attachments

    def derive_review_set(self, buckets: StatusBuckets) -> ReviewSet:
        """Pick the items for review from partitioned members."""
        self.reporter.sub_status("Finding items to review")
        self.reporter.sub_progress(0)
        review = ReviewSet(self._add_status(buckets, ENDPOINT), buckets)

        if buckets.count(ENDPOINT_ATTACH):
            review.items.extend(self._add_status(buckets, ENDPOINT_ATTACH))
            review.items.extend(self._attachments(buckets, review))

        self.reporter.sub_progress(1, 1)
        return review

    def review(self, cluster_run_name: str, cluster: Cluster) -> ReviewSet:
        """Partition a cluster and derive its review set."""
        return self.derive_review_set(self.partition_by_status(cluster_run_name, cluster))
