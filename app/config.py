import os

class Config:
    raw_db_url = os.getenv("DATABASE_URL")

    if raw_db_url:
        if raw_db_url.startswith("postgres://"):
            raw_db_url = raw_db_url.replace("postgres://", "postgresql://", 1)
        SQLALCHEMY_DATABASE_URI = raw_db_url
        SQLALCHEMY_ENGINE_OPTIONS = {
            "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
            "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "5")),
            "pool_pre_ping": True,
        }
    else:
        SQLALCHEMY_DATABASE_URI = "sqlite:///competitions.db"

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-dev-secret")

    # Listing pagination
    API_DEFAULT_PER_PAGE = int(os.getenv("API_DEFAULT_PER_PAGE", "25"))
    API_MAX_PER_PAGE = int(os.getenv("API_MAX_PER_PAGE", "100"))

    # "tokens" or "substring", see helpers/competition_query.py
    COMPETITION_SEARCH_MODE = os.getenv("COMPETITION_SEARCH_MODE", "tokens")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    API_DEFAULT_PER_PAGE = 25
    API_MAX_PER_PAGE = 100
    COMPETITION_SEARCH_MODE = "tokens"
