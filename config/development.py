import os

from config import database_uri_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# The only required input: mongodb://, mongodb+srv:// or mysql:// connection string
DATABASE_URI = database_uri_from_env()

DEBUG = True
SHOW_ERROR_DETAIL = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "1"))

# If enabled, app creates indexes (MongoDB) or applies schema.sql (MySQL) on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Optional: make sure this account exists on startup
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
