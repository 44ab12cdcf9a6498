import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "qr_attendance_test"),
}

JWT_SECRET = "test-jwt-secret-0123456789abcdef"
JWT_EXPIRES_HOURS = 24

ATTENDANCE_TIMEZONE = "UTC"

QR_TTL_MINUTES = 5
QR_RENDER_IMAGE = False

ENABLE_SCHEDULER = False

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
