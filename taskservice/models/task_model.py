from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from taskservice.errors import ValidationError


def _as_object(payload: Any) -> dict:
    # Arrays, strings and null bodies carry no fields
    return payload if isinstance(payload, dict) else {}


def _is_set(value: Any) -> bool:
    # Only null, false, 0 and "" are unset; empty arrays and objects are values
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def _or_default(value: Any, default: Any) -> Any:
    return value if _is_set(value) else default


@dataclass
class TaskCreate:
    title: Any
    description: Any = ""
    complete: Any = False

    @classmethod
    def from_payload(cls, payload: Any) -> "TaskCreate":
        payload = _as_object(payload)
        title = payload.get("title")
        if not _is_set(title):
            raise ValidationError("Title is required")
        return cls(
            title=title,
            description=_or_default(payload.get("description"), ""),
            complete=_or_default(payload.get("complete"), False),
        )

    def to_document(self, now: datetime) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "complete": self.complete,
            "createdAt": now,
            "updatedAt": now,
        }


@dataclass
class TaskUpdate:
    """Body of a PUT. Omitted fields are written as null, not preserved."""

    title: Optional[Any] = None
    description: Optional[Any] = None
    complete: Optional[Any] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "TaskUpdate":
        payload = _as_object(payload)
        return cls(
            title=payload.get("title"),
            description=payload.get("description"),
            complete=payload.get("complete"),
        )

    def to_update(self, now: datetime) -> dict:
        return {
            "$set": {
                "title": self.title,
                "description": self.description,
                "complete": self.complete,
                "updatedAt": now,
            }
        }
