"""Case file models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class ItemRecord(BaseModel):
    """An item in the case file."""

    id: str = Field(..., description="Unique item ID")
    name: Optional[str] = Field(None, description="Item name")
    md5: Optional[str] = Field(None, description="Content digest used for deduplication")
    parent: Optional[str] = Field(None, description="ID of the parent item")
    endpoint_status: Dict[str, str] = Field(
        default_factory=dict,
        description="Endpoint status keyed by '<cluster run>-<cluster id>'"
    )
    tags: List[str] = Field(default_factory=list, description="Applied tags")

    @field_validator("id", "parent", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Allow numeric item IDs in YAML."""
        return None if v is None else str(v)

    @field_validator("md5")
    @classmethod
    def normalize_md5(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else None


class ClusterRecord(BaseModel):
    """A cluster and its member item IDs."""

    id: int = Field(..., description="Cluster ID (-1 unclusterable, -2 ignorable)")
    members: List[str] = Field(default_factory=list, description="Member item IDs")

    @field_validator("members", mode="before")
    @classmethod
    def coerce_members(cls, v):
        return [str(m) for m in v] if v is not None else []


class ClusterRunRecord(BaseModel):
    """A cluster run and its clusters."""

    name: str = Field(..., description="Cluster run name")
    clusters: List[ClusterRecord] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        """Allow numeric cluster run names in YAML."""
        return v if v is None else str(v)

    @model_validator(mode="after")
    def check_cluster_ids(self) -> "ClusterRunRecord":
        ids = [c.id for c in self.clusters]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate cluster IDs in cluster run {self.name}")
        return self


class CaseFileModel(BaseModel):
    """Contents of a case file."""

    items: List[ItemRecord] = Field(default_factory=list)
    cluster_runs: List[ClusterRunRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self) -> "CaseFileModel":
        """Validate uniqueness and that every referenced item exists."""
        item_ids = [i.id for i in self.items]
        known = set(item_ids)
        if len(item_ids) != len(known):
            raise ValueError("Duplicate item IDs")

        run_names = [r.name for r in self.cluster_runs]
        if len(run_names) != len(set(run_names)):
            raise ValueError("Duplicate cluster run names")

        for item in self.items:
            if item.parent is not None and item.parent not in known:
                raise ValueError(f"Item {item.id} has unknown parent {item.parent}")

        for run in self.cluster_runs:
            for cluster in run.clusters:
                missing = [m for m in cluster.members if m not in known]
                if missing:
                    raise ValueError(
                        f"Cluster {run.name}-{cluster.id} references unknown items: "
                        f"{', '.join(missing)}"
                    )
        return self
