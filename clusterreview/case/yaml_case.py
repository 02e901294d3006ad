"""Case backed by a YAML file."""

from collections import deque
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set

import yaml
from pydantic import ValidationError

from ..errors import CaseFileError
from .interfaces import CaseStore, Cluster, ClusterRun, Deduplicator, DescendantResolver, Item, TagService
from .models import CaseFileModel, ClusterRecord, ClusterRunRecord, ItemRecord


class CaseItem(Item):
    """Item from a case file. Items are equal when their IDs are."""

    def __init__(self, record: ItemRecord) -> None:
        self.record = record

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def md5(self) -> Optional[str]:
        return self.record.md5

    @property
    def tags(self) -> List[str]:
        return self.record.tags

    def endpoint_status(self, key: str) -> Optional[str]:
        return self.record.endpoint_status.get(key)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CaseItem) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"CaseItem({self.id!r})"


class CaseCluster(Cluster):
    def __init__(self, record: ClusterRecord, items: Dict[str, CaseItem]) -> None:
        self.record = record
        self._members = [items[m] for m in record.members]

    @property
    def id(self) -> int:
        return self.record.id

    def members(self) -> Sequence[CaseItem]:
        return list(self._members)


class CaseClusterRun(ClusterRun):
    def __init__(self, record: ClusterRunRecord, items: Dict[str, CaseItem]) -> None:
        self.record = record
        self._clusters = [CaseCluster(c, items) for c in record.clusters]

    @property
    def name(self) -> str:
        return self.record.name

    def clusters(self) -> Sequence[CaseCluster]:
        return list(self._clusters)


class YamlCase(CaseStore, DescendantResolver, Deduplicator, TagService):
    """Case store, descendant resolver, deduplicator and tag service over a case file."""

    def __init__(self, model: CaseFileModel, path: Optional[Path] = None) -> None:
        """
        Initialize case.

        Args:
            model: Parsed case file
            path: File the case was loaded from (default target for save)
        """
        self.model = model
        self.path = path
        self.items: Dict[str, CaseItem] = {r.id: CaseItem(r) for r in model.items}
        self._children: Dict[str, List[CaseItem]] = {}
        for item in self.items.values():
            if item.record.parent is not None:
                self._children.setdefault(item.record.parent, []).append(item)
        self._runs = [CaseClusterRun(r, self.items) for r in model.cluster_runs]

    @classmethod
    def load(cls, path: Path) -> "YamlCase":
        return cls(load_case(path), path)

    def cluster_runs(self) -> Sequence[CaseClusterRun]:
        return list(self._runs)

    def get_item(self, item_id: str) -> CaseItem:
        return self.items[str(item_id)]

    def find_descendants(self, items: Sequence[CaseItem]) -> List[CaseItem]:
        """All transitive children of the items, breadth first, each once."""
        found: Dict[CaseItem, None] = {}
        queue = deque(items)
        while queue:
            for child in self._children.get(queue.popleft().id, ()):
                if child not in found:
                    found[child] = None
                    queue.append(child)
        return list(found)

    def deduplicate(self, items: Sequence[CaseItem]) -> Set[CaseItem]:
        """First item per MD5; items without an MD5 are all kept."""
        unique: Dict[object, CaseItem] = {}
        for item in items:
            key = item.md5 if item.md5 else ("id", item.id)
            unique.setdefault(key, item)
        return set(unique.values())

    def deduplicated_count(self, items: Sequence[CaseItem]) -> int:
        return len(self.deduplicate(items))

    def apply_tag(self, label: str, items: Sequence[CaseItem]) -> None:
        for item in items:
            if label not in item.record.tags:
                item.record.tags.append(label)

    def tagged_with(self, label: str) -> List[CaseItem]:
        return [i for i in self.items.values() if label in i.tags]

    def save(self, path: Optional[Path] = None) -> Path:
        """Write the case, including tags, back to YAML."""
        path = path or self.path
        if path is None:
            raise ValueError("No path to save the case to")
        save_case(self.model, path)
        return path


def load_case(case_path: Path) -> CaseFileModel:
    """Load a case from a YAML file."""
    if not case_path.exists():
        raise FileNotFoundError(f"Case file not found: {case_path}")

    try:
        with open(case_path) as f:
            case_data = yaml.safe_load(f)

        if case_data is None:
            case_data = {}

        return CaseFileModel(**case_data)
    except yaml.YAMLError as e:
        raise CaseFileError(f"Invalid YAML in case file: {e}")
    except (ValidationError, TypeError) as e:
        raise CaseFileError(f"Invalid case file: {e}")


def save_case(case: CaseFileModel, case_path: Path) -> None:
    """Save a case to a YAML file."""
    case_path.parent.mkdir(parents=True, exist_ok=True)

    with open(case_path, "w") as f:
        yaml.dump(case.model_dump(), f, default_flow_style=False, sort_keys=False)
