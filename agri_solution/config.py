import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def env_flag(name, default=True):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# --------------------------------
# Base de données
# --------------------------------
def database_uri():
    # DATABASE_URL prioritaire, sinon construite depuis les variables PG_*
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    url = URL.create(
        "postgresql+psycopg2",
        username=os.getenv("PG_USER", "espoir"),
        password=os.getenv("PG_PASSWORD") or None,
        host=os.getenv("PG_HOST", "localhost"),
        port=int(os.getenv("PG_PORT", 5432)),
        database=os.getenv("PG_DATABASE", "agri_solution"),
    )
    return url.render_as_string(hide_password=False)


class Config:
    SQLALCHEMY_DATABASE_URI = database_uri()
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))

    # Identifiants de connexion (provisoire, pas de vraie gestion des comptes)
    AUTH_USERNAME = os.getenv("AUTH_USERNAME", "ESPOIR")
    AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "chou")

    # 100 requêtes par IP toutes les 15 minutes
    RATE_LIMIT_ENABLED = env_flag("RATE_LIMIT_ENABLED")
    RATE_LIMIT_WINDOW = int(os.getenv("RATE_LIMIT_WINDOW", 15 * 60))
    RATE_LIMIT_MAX = int(os.getenv("RATE_LIMIT_MAX", 100))

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
