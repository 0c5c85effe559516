import logging

from logjob.core.config import determine_log_mode, get_app_settings
from logjob.core.logger.config import configured_logger

APP_LOGGER_NAME = "logjob"

__root_logger: logging.Logger | None = None


def get_logger(module: str | None = None) -> logging.Logger:
    """
    Get a logger under the application namespace, configuring logging on first use.

    `module` may be a short name ("scheduler") or a dotted module path
    (`__name__`) already inside the `logjob` package.
    """
    global __root_logger

    if __root_logger is None:
        app_settings = get_app_settings()
        substitutions = {"LOG_LEVEL": app_settings.LOG_LEVEL.upper()}

        configured_logger(
            mode=determine_log_mode(),
            config_override=app_settings.LOG_CONFIG_OVERRIDE,
            substitutions=substitutions,
        )
        __root_logger = logging.getLogger(APP_LOGGER_NAME)

    if module is None:
        return __root_logger

    if module == APP_LOGGER_NAME or module.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(module)

    return __root_logger.getChild(module)
