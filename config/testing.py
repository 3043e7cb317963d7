import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "asistencia_test"),
}

DB_POOL_SIZE = 2
DB_POOL_TIMEOUT = 0.2

CORS_ORIGIN = "http://testserver"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
