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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./app.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    # Login tokens carry no exp claim unless this is set
    JWT_EXPIRES_MINUTES = data.get("JWT_EXPIRES_MINUTES", None)
    # Empty key -> emails are logged instead of sent
    SENDGRID_API_KEY = data.get("SENDGRID_API_KEY", "")
    SENDGRID_SENDER_EMAIL = data.get("SENDGRID_SENDER_EMAIL", "no-reply@mapacademyapi.com")
    SENDGRID_API_URL = data.get("SENDGRID_API_URL", "https://api.sendgrid.com/v3/mail/send")
    NOTIFIER_MAX_ATTEMPTS = int(data.get("NOTIFIER_MAX_ATTEMPTS", 3))
    NOTIFIER_BACKOFF_SECONDS = float(data.get("NOTIFIER_BACKOFF_SECONDS", 0.5))
    NOTIFIER_TIMEOUT = float(data.get("NOTIFIER_TIMEOUT", 10.0))
    RESET_URL_BASE = data.get("RESET_URL_BASE", "https://mapacademyapi.com")
    RESET_EMAIL_SUBJECT = data.get("RESET_EMAIL_SUBJECT", "[Map Academy] Password reset request")
