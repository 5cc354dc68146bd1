"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_DB_PORT = 3306
DEFAULT_DB_NAME = "student_management_db"
DEFAULT_LOG_LEVEL = "INFO"

BACKEND_MYSQL = "mysql"
BACKEND_MEMORY = "memory"
REPOSITORY_BACKENDS = (BACKEND_MYSQL, BACKEND_MEMORY)
