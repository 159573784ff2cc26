import atexit
from datetime import date, datetime

from bson import ObjectId
from flask import current_app
from pymongo import MongoClient
from pymongo.server_api import ServerApi

from backend.utils.errors import ValidationError


def init_app(app, client=None):
    """Attach one process-wide MongoClient to ``app``.

    The client owns its connection pool and lives as long as the process; it
    is closed on interpreter shutdown. Tests pass their own ``client``.
    """
    if client is None:
        client = MongoClient(
            app.config["MONGO_URI"],
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        atexit.register(close_client, client)
    app.extensions["mongo"] = client
    app.logger.info("Using MongoDB database %s", app.config["MONGO_DB_NAME"])


def close_client(client):
    client.close()


def get_client():
    return current_app.extensions["mongo"]


def get_db():
    return get_client()[current_app.config["MONGO_DB_NAME"]]


def tasks_collection():
    return get_db()[current_app.config["TASKS_COLLECTION"]]


def users_collection():
    return get_db()[current_app.config["USERS_COLLECTION"]]


def ping():
    get_client().admin.command("ping")


def to_object_id(value):
    # ObjectId(None) would mint a fresh id, so only accept well-formed values
    if not ObjectId.is_valid(value):
        raise ValidationError("Invalid id.")
    return ObjectId(value)


def serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_doc(doc, exclude=("password",)):
    """Make a MongoDB document JSON friendly, dropping ``exclude`` fields."""
    if doc is None:
        return None
    return {key: serialize_value(value) for key, value in doc.items() if key not in exclude}
