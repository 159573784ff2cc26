from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from backend.models.task_model import Task
from backend.utils.db import serialize_doc, serialize_value, tasks_collection, to_object_id
from backend.utils.errors import NotFound, ValidationError
from backend.utils.query import build_task_pipeline

tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.get("")
def list_tasks():
    args = request.args
    pipeline = build_task_pipeline(
        priority=args.get("priority"),
        status=args.get("status"),
        sort_by=args.get("sortBy"),
        order=args.get("order"),
    )
    docs = [serialize_doc(d) for d in tasks_collection().aggregate(pipeline)]
    return jsonify(docs), 200


@tasks_bp.get("/<task_id>")
def get_task(task_id):
    doc = tasks_collection().find_one({"_id": to_object_id(task_id)})
    if doc is None:
        raise NotFound("Task not found.")
    return jsonify(serialize_doc(doc)), 200


@tasks_bp.post("")
def create_task():
    payload = request.get_json(silent=True)
    if not payload or not isinstance(payload, dict):
        raise ValidationError("Task body is required.")
    if "_id" in payload:
        raise ValidationError("Task id is assigned by the server.")
    if any(key.startswith("$") for key in payload):
        raise ValidationError("Field names must not start with '$'.")

    doc = dict(payload)
    doc.setdefault("createdAt", datetime.now(timezone.utc))
    result = tasks_collection().insert_one(doc)
    return (
        jsonify(
            message="Task Created Successfully",
            result={"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)},
        ),
        201,
    )


@tasks_bp.patch("/<task_id>")
def update_task(task_id):
    query = {"_id": to_object_id(task_id)}
    tasks = tasks_collection()

    existing = tasks.find_one(query)
    if existing is None:
        raise NotFound("Task not found.")

    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        raise ValidationError("Task body must be a JSON object.")
    current_app.logger.debug("Updating task %s fields %s", task_id, sorted(payload))

    result = tasks.update_one(query, {"$set": Task.from_doc(existing).merged_with(payload)})
    return (
        jsonify(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=serialize_value(result.upserted_id),
        ),
        200,
    )


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    result = tasks_collection().delete_one({"_id": to_object_id(task_id)})
    return jsonify(acknowledged=result.acknowledged, deletedCount=result.deleted_count), 200
