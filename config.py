import os

from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


def _origins(raw):
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL") or "sqlite:///" + os.path.join(basedir, "contacts.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = os.environ.get("SQLALCHEMY_ECHO", "false").lower() in ["true", "on", "1"]
    SECRET_KEY = os.environ.get("SECRET_KEY") or "a-dev-secret-key-that-is-not-so-secret"

    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")
    API_PORT = int(os.environ.get("API_PORT", 3000))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Vite dev server by default
    CORS_ORIGINS = _origins(os.environ.get("CORS_ORIGIN", "http://localhost:5173,http://127.0.0.1:5173"))


class TestConfig(Config):
    TESTING = True
    ENVIRONMENT = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = "WARNING"
