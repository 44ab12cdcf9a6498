import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "qr_attendance"),
}

# Teacher session tokens
JWT_SECRET = os.getenv("JWT_SECRET", "secretkey")
JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "24"))

# "today" for attendance records is computed in this zone everywhere
ATTENDANCE_TIMEZONE = os.getenv("ATTENDANCE_TIMEZONE", "UTC")

QR_TTL_MINUTES = int(os.getenv("QR_TTL_MINUTES", "5"))
QR_RENDER_IMAGE = bool(int(os.getenv("QR_RENDER_IMAGE", "1")))

ENABLE_SCHEDULER = bool(int(os.getenv("ENABLE_SCHEDULER", "1")))
SWEEP_HOUR = int(os.getenv("SWEEP_HOUR", "23"))
SWEEP_MINUTE = int(os.getenv("SWEEP_MINUTE", "59"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
