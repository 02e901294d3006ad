"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class ConfigModel(BaseModel):
    """Main configuration model."""

    case_path: Optional[str] = Field(None, description="Default case file")
    include_pseudo_clusters: bool = Field(
        False,
        description="Select the unclusterable/ignorable pseudo-clusters when tagging all clusters"
    )
    save_tags: bool = Field(True, description="Write applied tags back to the case file")
    report_dir: Optional[str] = Field(None, description="Directory for JSON run reports")
    log_timestamps: bool = Field(True, description="Timestamp console log lines")
