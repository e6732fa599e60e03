import os

from dotenv import load_dotenv

# Load .env from the working directory so local MONGODB_URI / PORT are picked up
load_dotenv()

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Config:
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))

    MONGODB_URI = os.environ.get("MONGODB_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "nodetask")
    MONGO_COLLECTION = os.environ.get("MONGO_COLLECTION", "tasks")
    MONGO_TIMEOUT_MS = int(os.environ.get("MONGO_TIMEOUT_MS", "5000"))

    # Single-page client served for every unmatched GET
    STATIC_FOLDER = os.environ.get("STATIC_FOLDER", os.path.join(PROJECT_ROOT, "static"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
