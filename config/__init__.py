from __future__ import annotations

import os

def get_settings_module() -> str:
    # Read the environment name from APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Everything else runs with the development settings
    return "config.development"


def database_uri_from_env() -> str | None:
    # MONGODB_URI is accepted as an alias for DATABASE_URI
    return os.getenv("DATABASE_URI") or os.getenv("MONGODB_URI")
