import os
from datetime import date, datetime, timezone

from bson import ObjectId
from flask import Flask, jsonify, send_from_directory
from flask.json.provider import DefaultJSONProvider
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from taskservice.errors import TaskServiceError


class MongoJSONProvider(DefaultJSONProvider):
    """JSON provider that understands BSON values coming out of pymongo."""

    sort_keys = False

    @staticmethod
    def default(o):
        if isinstance(o, ObjectId):
            return str(o)
        if isinstance(o, datetime):
            # Stored dates are UTC even when read back naive
            if o.tzinfo is None:
                o = o.replace(tzinfo=timezone.utc)
            return o.isoformat()
        if isinstance(o, date):
            return o.isoformat()
        return DefaultJSONProvider.default(o)


def create_app(test_config=None, store=None):
    # Static files are served by the fallback route below, not Flask's own
    app = Flask(__name__, static_folder=None)
    app.config.from_object("taskservice.config.Config")
    if test_config:
        app.config.update(test_config)
    app.json = MongoJSONProvider(app)

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    from taskservice.utils.db import init_app as init_db

    init_db(app, store)

    from taskservice.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Task API"), 200

    @app.get("/", defaults={"path": ""})
    @app.get("/<path:path>")
    def serve_client(path):
        folder = app.config["STATIC_FOLDER"]
        if path and os.path.isfile(os.path.join(folder, path)):
            return send_from_directory(folder, path)
        # Client-side routes all resolve to the single-page entry point
        return send_from_directory(folder, "index.html")

    @app.errorhandler(TaskServiceError)
    def task_error(exc):
        if exc.status_code >= 500:
            app.logger.error("%s: %s", type(exc).__name__, exc.message, exc_info=exc)
        return jsonify(error=exc.message), exc.status_code

    @app.errorhandler(HTTPException)
    def http_error(exc):
        original = getattr(exc, "original_exception", None)
        if original is not None:
            return jsonify(error=str(original)), 500
        return jsonify(error=exc.name), exc.code

    return app
