import os
from datetime import timedelta
from urllib.parse import quote_plus

# Load .env from project root so local development credentials are picked up
from dotenv import load_dotenv

load_dotenv()


def build_mongo_uri(environ=None):
    """Resolve the MongoDB connection string from the environment.

    ``MONGO_URI`` wins when set. Otherwise an Atlas style ``mongodb+srv`` URI
    is assembled from ``DB_USER``, ``DB_PASS`` and ``DB_HOST``.
    """
    env = os.environ if environ is None else environ
    uri = env.get("MONGO_URI")
    if uri:
        return uri

    user = env.get("DB_USER")
    password = env.get("DB_PASS")
    host = env.get("DB_HOST")
    if user and password and host:
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/"
            "?retryWrites=true&w=majority"
        )
    return "mongodb://localhost:27017"


class Config:
    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", "3000"))
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-this-jwt-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)

    MONGO_URI = build_mongo_uri()
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "TaskDB")
    TASKS_COLLECTION = "tasks"
    USERS_COLLECTION = "users"

    CORS_ORIGIN = os.environ.get("CORS_ORIGIN", "http://localhost:5173")

    JSON_SORT_KEYS = False


class TestingConfig(Config):
    TESTING = True
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length"
    MONGO_URI = "mongodb://localhost:27017"
    MONGO_DB_NAME = "TaskDB_test"
