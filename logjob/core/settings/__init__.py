from .settings import DEFAULT_LOG_JOB_DELAY_MS, AppSettings, app_settings_constructor

__all__ = [
    "DEFAULT_LOG_JOB_DELAY_MS",
    "AppSettings",
    "app_settings_constructor",
]
