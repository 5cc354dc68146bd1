import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_management_test"),
}

DEBUG = False
TESTING = True

REPOSITORY_BACKEND = os.getenv("REPOSITORY_BACKEND", "memory")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
