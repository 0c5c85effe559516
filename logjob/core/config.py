import os
from functools import lru_cache

import dotenv

from logjob.core.settings import AppSettings, app_settings_constructor
from logjob.core.settings.static import BASE_DIR

ENV = BASE_DIR.joinpath(".env")

dotenv.load_dotenv(ENV)
PRODUCTION = os.getenv("PRODUCTION", "False").capitalize() == "True"
TESTING = os.getenv("TESTING", "False").capitalize() == "True"


def determine_log_mode() -> str:
    """Determine which bundled logging configuration applies to the environment."""
    if TESTING:
        return "testing"

    if PRODUCTION:
        return "production"

    return "development"


@lru_cache
def get_app_settings() -> AppSettings:
    """Get the application settings."""
    return app_settings_constructor(
        env_file=ENV,
        production=PRODUCTION,
    )
