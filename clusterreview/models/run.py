"""Result models for tagging runs."""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

RUN_COMPLETED = "completed"
RUN_ABORTED = "aborted"


class ClusterTagResult(BaseModel):
    """Outcome of tagging a single cluster."""

    cluster_id: int = Field(..., description="Raw cluster ID")
    display_id: Union[int, str] = Field(..., description="Cluster display ID")
    label: str = Field(..., description="Tag label applied to the review set")
    status_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Member count per endpoint status"
    )
    descendants_found: int = Field(0, description="Descendants of attach items")
    descendants_added: int = Field(0, description="Deduplicated descendants added")
    tagged_items: int = Field(0, description="Items in the review set")


class TagRunResult(BaseModel):
    """Outcome of tagging the selected clusters of a cluster run."""

    cluster_run: str = Field(..., description="Cluster run name")
    status: str = Field(RUN_COMPLETED, description="Run status (completed, aborted)")
    total_clusters: int = Field(..., description="Clusters selected for tagging")
    completed_clusters: int = Field(0, description="Clusters tagged")
    clusters: List[ClusterTagResult] = Field(default_factory=list)
    started_at: datetime = Field(..., description="When tagging started")
    finished_at: Optional[datetime] = Field(None, description="When tagging stopped")

    @property
    def aborted(self) -> bool:
        return self.status == RUN_ABORTED

    @property
    def tagged_items(self) -> int:
        return sum(c.tagged_items for c in self.clusters)
