import os

SECRET_KEY = "test-secret"

DATABASE_URI = os.getenv("DATABASE_URI", "mongodb://localhost:27017/employee_records_test")

DEBUG = False
TESTING = True
SHOW_ERROR_DETAIL = True
LOG_LEVEL = "WARNING"

SESSION_DAYS = 1

AUTO_INIT_DB = False

ADMIN_USERNAME = None
ADMIN_PASSWORD = None
