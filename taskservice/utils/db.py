from bson import ObjectId
from bson.errors import InvalidId
from flask import current_app
from pymongo import MongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from taskservice.errors import InvalidIdentifier, StorageError

EXTENSION_KEY = "task_store"


class TaskStore:
    """Gateway to the tasks collection.

    Holds the collection (and, when it built one, the owning client) for the
    whole process lifetime. Every call is attempted once; driver failures are
    re-raised as StorageError carrying the driver's message.
    """

    def __init__(self, collection, client=None):
        self.collection = collection
        self.client = client

    @classmethod
    def from_uri(cls, uri, db_name, collection_name="tasks", timeout_ms=5000):
        try:
            client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms, tz_aware=True)
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc
        return cls(client[db_name][collection_name], client=client)

    def ping(self):
        if self.client is None:
            return
        try:
            self.client.admin.command("ping")
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    def close(self):
        if self.client is not None:
            self.client.close()

    def insert(self, doc):
        try:
            return self.collection.insert_one(doc).inserted_id
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    def find_by_id(self, object_id):
        try:
            return self.collection.find_one({"_id": object_id})
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    def find(self, query=None):
        try:
            return list(self.collection.find(query or {}))
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    def update_by_id(self, object_id, update):
        try:
            return self.collection.find_one_and_update(
                {"_id": object_id},
                update,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    def delete_by_id(self, object_id):
        try:
            return self.collection.delete_one({"_id": object_id}).deleted_count
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc


def init_app(app, store=None):
    """Attach a TaskStore to ``app``; build one from config if none is given."""
    if store is None:
        store = TaskStore.from_uri(
            app.config["MONGODB_URI"],
            app.config["MONGO_DB_NAME"],
            app.config["MONGO_COLLECTION"],
            app.config["MONGO_TIMEOUT_MS"],
        )
    app.extensions[EXTENSION_KEY] = store
    return store


def get_store():
    return current_app.extensions[EXTENSION_KEY]


def to_object_id(value):
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifier(str(exc)) from exc


def transform_task_document(doc):
    # Clients read ``id``; ``_id`` stays alongside it.
    if not doc:
        return None
    task = dict(doc)
    task["id"] = str(doc["_id"])
    return task
