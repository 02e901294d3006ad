"""Interfaces to the case data and services that tagging depends on."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Set

from ..errors import ClusterRunNotFoundError


class Item(ABC):
    """Opaque reference to an item in the case.

    Implementations must be hashable; their equality decides what counts as
    the same item in unions and deduplication.
    """

    @abstractmethod
    def endpoint_status(self, key: str) -> Optional[str]:
        """
        Get the item's endpoint status for a cluster run and cluster.

        Args:
            key: "<cluster run name>-<cluster id>"

        Returns:
            Status string (e.g. "endpoint"), or None if none is recorded
        """
        pass


class Cluster(ABC):
    """A cluster of items from one cluster run."""

    @property
    @abstractmethod
    def id(self) -> int:
        """Raw cluster ID (-1 and -2 are pseudo-clusters)."""
        pass

    @abstractmethod
    def members(self) -> Sequence[Item]:
        """Member items in engine order."""
        pass


class ClusterRun(ABC):
    """A named execution of the clustering engine."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def clusters(self) -> Sequence[Cluster]:
        pass


class CaseStore(ABC):
    """Read access to the cluster runs of a case."""

    @abstractmethod
    def cluster_runs(self) -> Sequence[ClusterRun]:
        pass

    def get_cluster_run(self, name: str) -> ClusterRun:
        """Get a cluster run by name."""
        for cluster_run in self.cluster_runs():
            if cluster_run.name == name:
                return cluster_run
        raise ClusterRunNotFoundError(name)


class DescendantResolver(ABC):
    """Finds items attached to or embedded in other items."""

    @abstractmethod
    def find_descendants(self, items: Sequence[Item]) -> Sequence[Item]:
        pass


class Deduplicator(ABC):
    """Reduces a set of items to one item per duplicate group."""

    @abstractmethod
    def deduplicate(self, items: Sequence[Item]) -> Set[Item]:
        pass


class TagService(ABC):
    """Applies tag labels to items."""

    @abstractmethod
    def apply_tag(self, label: str, items: Sequence[Item]) -> None:
        """Add the label to every item. Applying it again must be harmless."""
        pass
