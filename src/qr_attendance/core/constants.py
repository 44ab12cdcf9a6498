"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

QR_SESSION_TTL_MINUTES = 5
QR_ID_SUFFIX_LENGTH = 6

PRESENT_SCORE_CHANGE = 1
ABSENT_SCORE_CHANGE = -3

DEFAULT_TIMEZONE = "UTC"
DEFAULT_TOKEN_HOURS = 24

SWEEP_HOUR = 23
SWEEP_MINUTE = 59

# column widths in schema.sql
REG_NUMBER_MAX_LENGTH = 64
SUBJECT_MAX_LENGTH = 191
EMAIL_MAX_LENGTH = 255
