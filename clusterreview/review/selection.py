"""Choosing which clusters of a run to tag."""

from typing import Iterable, List, Optional

from ..case.interfaces import Cluster, ClusterRun
from ..errors import ClusterReviewError, EmptyClusterSelectionError
from ..models import cluster_sort_key, is_pseudo_cluster


def sorted_clusters(cluster_run: ClusterRun) -> List[Cluster]:
    """Clusters of a run ordered by ID, pseudo-clusters first."""
    return sorted(cluster_run.clusters(), key=cluster_sort_key)


def select_clusters(
    cluster_run: ClusterRun,
    cluster_ids: Optional[Iterable[int]] = None,
    include_pseudo: bool = False,
) -> List[Cluster]:
    """
    Select clusters of a run for tagging.

    With no IDs every cluster is selected, except pseudo-clusters unless
    include_pseudo is set. Explicit IDs are always honoured. Clusters are
    ordered by ID, as in the clusters table.

    Raises:
        ClusterReviewError: If an explicit ID is not a cluster of the run
        EmptyClusterSelectionError: If nothing ends up selected
    """
    clusters = sorted_clusters(cluster_run)

    if cluster_ids:
        wanted = set(cluster_ids)
        unknown = wanted - {c.id for c in clusters}
        if unknown:
            missing = ", ".join(str(i) for i in sorted(unknown))
            raise ClusterReviewError(f"Clusters not found in {cluster_run.name}: {missing}")
        selected = [c for c in clusters if c.id in wanted]
    else:
        selected = [c for c in clusters if include_pseudo or not is_pseudo_cluster(c.id)]

    if not selected:
        raise EmptyClusterSelectionError()
    return selected
