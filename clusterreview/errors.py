"""Exceptions raised by cluster review tagging."""


class ClusterReviewError(Exception):
    """Base class for cluster review errors."""


class EmptyClusterSelectionError(ClusterReviewError):
    """No clusters were chosen for tagging."""

    def __init__(self, message: str = "Please select clusters") -> None:
        super().__init__(message)


class ClusterRunNotFoundError(ClusterReviewError):
    """The requested cluster run does not exist in the case."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cluster run not found: {name}")


class CaseFileError(ClusterReviewError):
    """The case file could not be parsed or failed validation."""
