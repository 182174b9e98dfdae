import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # "console" logs outgoing mail, "smtp" delivers it
    MAIL_BACKEND = data.get("MAIL_BACKEND", "console")
    MAIL_FROM = data.get("MAIL_FROM", "no-reply@localhost")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))

    # Client pages linked from account emails
    CLIENT_HOST = data.get("CLIENT_HOST", "http://localhost:3000")
    CLIENT_ACCOUNT_VERIFICATION_PATH = data.get(
        "CLIENT_ACCOUNT_VERIFICATION_PATH", "/account-verification"
    )
    CLIENT_FORGOT_PASSWORD_PATH = data.get(
        "CLIENT_FORGOT_PASSWORD_PATH", "/renew-password"
    )
