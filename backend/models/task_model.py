from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

PRIORITIES = ("High", "Medium", "Low")
ALL = "All"

# Fields a PATCH may merge over an existing task
MERGEABLE_FIELDS = ("title", "description", "dueDate", "priority", "status")


@dataclass
class Task:
    title: Optional[str] = None
    description: Optional[str] = None
    dueDate: Optional[Any] = None
    priority: Optional[str] = None  # High | Medium | Low
    status: Optional[str] = None
    createdAt: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "Task":
        return cls(**{name: doc.get(name) for name in MERGEABLE_FIELDS + ("createdAt",)})

    def merged_with(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay ``changes`` on this task; falsy values never replace stored ones."""
        return {name: changes.get(name) or getattr(self, name) for name in MERGEABLE_FIELDS}
