"""Case data access for cluster review tagging."""

from .interfaces import CaseStore, Cluster, ClusterRun, Deduplicator, DescendantResolver, Item, TagService
from .models import CaseFileModel, ClusterRecord, ClusterRunRecord, ItemRecord
from .yaml_case import CaseItem, YamlCase, load_case, save_case

__all__ = [
    "CaseStore",
    "Cluster",
    "ClusterRun",
    "Deduplicator",
    "DescendantResolver",
    "Item",
    "TagService",
    "CaseFileModel",
    "ClusterRecord",
    "ClusterRunRecord",
    "ItemRecord",
    "CaseItem",
    "YamlCase",
    "load_case",
    "save_case",
]
