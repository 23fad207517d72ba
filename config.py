import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./backoffice.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Schema is created from the models; there is no migration tooling
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))

    # Admin bootstrap
    BOOTSTRAP_ADMIN_ON_STARTUP = bool(data.get("BOOTSTRAP_ADMIN_ON_STARTUP", True))
    ADMIN_EMAIL = data.get("ADMIN_EMAIL", "admin@xperiecia.com")
    LEGACY_ADMIN_EMAIL = data.get("LEGACY_ADMIN_EMAIL", "admin@codexcore.com")
    ADMIN_NAME = data.get("ADMIN_NAME", "Administrador")
    ADMIN_ROLE_NAME = data.get("ADMIN_ROLE_NAME", "Administrador")
    ADMIN_PASSWORD_HASH = data.get("ADMIN_PASSWORD_HASH", None)  # precomputed, stored as-is
    ADMIN_PHONE = data.get("ADMIN_PHONE", None)
