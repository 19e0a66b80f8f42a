import os

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "local-library-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "sqlite:///locallibrary.db"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
    if SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
        # pooled connections move between the request thread and query workers
        SQLALCHEMY_ENGINE_OPTIONS["connect_args"] = {"check_same_thread": False}

    # Independent read queries (index counts, detail pages) share this pool
    CATALOG_QUERY_WORKERS = int(os.getenv("CATALOG_QUERY_WORKERS", "5"))

    # Missing tables are created at start-up unless turned off
    CATALOG_CREATE_TABLES = os.getenv("CATALOG_CREATE_TABLES", "1") == "1"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # FlaskForm checks a CSRF token on every create form when on
    WTF_CSRF_ENABLED = os.getenv("WTF_CSRF_ENABLED", "1") == "1"


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"
    WTF_CSRF_ENABLED = False
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URI", "sqlite:///test_locallibrary.db")
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True, "connect_args": {"check_same_thread": False}}
