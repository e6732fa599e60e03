from datetime import datetime, timezone

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from taskservice.errors import NotFound, ValidationError
from taskservice.models.task_model import TaskCreate, TaskUpdate
from taskservice.utils.db import get_store, to_object_id, transform_task_document


tasks_bp = Blueprint("tasks", __name__)


def _now():
    return datetime.now(timezone.utc)


def _json_body():
    # A body declared as JSON must parse; any other body carries no fields
    if request.is_json and request.get_data(cache=True):
        try:
            return request.get_json()
        except BadRequest as exc:
            raise ValidationError("Request body is not valid JSON") from exc
    return request.get_json(silent=True)


@tasks_bp.get("")
@tasks_bp.get("/", strict_slashes=False)
def list_tasks():
    query = {}
    complete = request.args.get("complete")
    if complete is not None:
        query = {"complete": complete == "true"}
    docs = [transform_task_document(d) for d in get_store().find(query)]
    return jsonify(docs), 200


@tasks_bp.get("/<task_id>")
def get_task(task_id):
    doc = get_store().find_by_id(to_object_id(task_id))
    if doc is None:
        raise NotFound(task_id)
    return jsonify(transform_task_document(doc)), 200


@tasks_bp.post("")
@tasks_bp.post("/", strict_slashes=False)
def create_task():
    payload = TaskCreate.from_payload(_json_body())
    store = get_store()
    inserted_id = store.insert(payload.to_document(_now()))
    # Answered with the stored document as-is (``_id``, no ``id``)
    created = store.find_by_id(inserted_id)
    if created is None:
        raise NotFound(str(inserted_id))
    return jsonify(created), 201


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    object_id = to_object_id(task_id)
    payload = TaskUpdate.from_payload(_json_body())
    updated = get_store().update_by_id(object_id, payload.to_update(_now()))
    if updated is None:
        raise NotFound(task_id)
    return jsonify(transform_task_document(updated)), 200


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    deleted = get_store().delete_by_id(to_object_id(task_id))
    if deleted == 0:
        raise NotFound(task_id)
    return jsonify(message="Task deleted successfully"), 200
