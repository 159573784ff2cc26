from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass
class User:
    name: str
    email: str
    password: str  # hashed
    createdAt: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            name=doc.get("name"),
            email=doc.get("email"),
            password=doc.get("password"),
            createdAt=doc.get("createdAt"),
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
        )

    def to_doc(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "createdAt": self.createdAt,
        }

    def public(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}

    def claims(self) -> Dict[str, Any]:
        return {"subjectId": self.id, "name": self.name, "email": self.email}
