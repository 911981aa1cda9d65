"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 1
DEFAULT_DATABASE_NAME = "employee_records"
MIN_PASSWORD_LENGTH = 6

EMPLOYEE_COLLECTION = "employee_records"
USER_COLLECTION = "users"

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."
