"""Run the task API: ``python -m taskservice``.

Connects to MongoDB once, serves until SIGINT/SIGTERM, then closes the
connection. A failed initial connection exits with status 1.
"""

import logging
import signal
import sys

from taskservice.app import create_app
from taskservice.config import Config
from taskservice.errors import StorageError
from taskservice.utils.db import TaskStore

logger = logging.getLogger("taskservice")


def main():
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = None
    try:
        store = TaskStore.from_uri(
            Config.MONGODB_URI,
            Config.MONGO_DB_NAME,
            Config.MONGO_COLLECTION,
            Config.MONGO_TIMEOUT_MS,
        )
        store.ping()
    except StorageError as exc:
        logger.error("Failed to connect to MongoDB: %s", exc.message)
        if store is not None:
            store.close()
        sys.exit(1)
    logger.info("Connected to MongoDB successfully")

    def shutdown(signum, _frame):
        store.close()
        logger.info("MongoDB connection closed due to %s", signal.Signals(signum).name)
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    app = create_app(store=store)
    logger.info("Server is listening on port %s", app.config["PORT"])
    # Reloader would fork a second process holding its own connection
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
        use_reloader=False,
    )


if __name__ == "__main__":
    main()
