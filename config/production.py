import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "offboarding_db"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))

PORT = int(os.getenv("PORT", "3601"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# Comma separated list of allowed origins for the HR web client.
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
