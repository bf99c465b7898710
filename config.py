import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def as_bool(value) -> bool:
    """YAML booleans pass through; quoted strings like "false" or "0" are False"""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# Placeholder signing secret, acceptable for local development only
DEFAULT_JWT_SECRET = "dev-secret-key-change-in-production"


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./feedback.db")
    DB_AUTO_CREATE = as_bool(data.get("DB_AUTO_CREATE", True))
    # Unset selects the in-memory password reset store
    RESET_STORE_DB_URI = data.get("RESET_STORE_DB_URI")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = as_bool(data.get("CORS_ALLOW_CREDENTIALS", False))
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", DEFAULT_JWT_SECRET)
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:5173")
    MAIL_ENABLED = as_bool(data.get("MAIL_ENABLED", False))
    MAIL_HOST = data.get("MAIL_HOST", "smtp.mailtrap.io")
    MAIL_PORT = int(data.get("MAIL_PORT", 2525))
    MAIL_USERNAME = data.get("MAIL_USERNAME", "")
    MAIL_PASSWORD = data.get("MAIL_PASSWORD", "")
    MAIL_USE_TLS = as_bool(data.get("MAIL_USE_TLS", True))
    MAIL_FROM = data.get("MAIL_FROM", "no-reply@example.com")
