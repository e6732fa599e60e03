# tests/test_models.py

from datetime import datetime, timezone

import pytest

from taskservice.errors import ValidationError
from taskservice.models.task_model import TaskCreate, TaskUpdate


def test_create_defaults() -> None:
    payload = TaskCreate.from_payload({"title": "Buy milk"})
    assert payload == TaskCreate(title="Buy milk", description="", complete=False)

    now = datetime.now(timezone.utc)
    doc = payload.to_document(now)
    assert doc == {
        "title": "Buy milk",
        "description": "",
        "complete": False,
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.mark.parametrize("payload", [None, {}, {"title": None}, {"title": ""}, ["title"]])
def test_create_rejects_missing_title(payload) -> None:
    with pytest.raises(ValidationError) as info:
        TaskCreate.from_payload(payload)
    assert info.value.message == "Title is required"
    assert info.value.status_code == 400


def test_update_writes_every_field() -> None:
    now = datetime.now(timezone.utc)
    update = TaskUpdate.from_payload({"complete": True}).to_update(now)
    assert update == {
        "$set": {"title": None, "description": None, "complete": True, "updatedAt": now}
    }
    assert TaskUpdate.from_payload("garbage") == TaskUpdate()
