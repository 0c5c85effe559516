"""
Logging configuration for logjob.

Each mode (production, development, testing) has a bundled `dictConfig` JSON
file next to this module. `${NAME}` placeholders in a file are filled from the
substitutions before the config is applied; a placeholder left without a value
is an error rather than a level name logging would reject later.
"""

import json
import logging
import pathlib
import re
import typing
from logging import config as logging_config

CONFIG_DIR = pathlib.Path(__file__).parent

MODE_CONFIGS = {
    "production": "logconf.prod.json",
    "development": "logconf.dev.json",
    "testing": "logconf.test.json",
}

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")

__conf: dict[str, typing.Any] | None = None


def config_path(mode: str) -> pathlib.Path:
    """Path of the bundled config for `mode`."""
    try:
        return CONFIG_DIR / MODE_CONFIGS[mode]
    except KeyError:
        raise ValueError(f"Invalid mode: {mode}") from None


def load_log_config(path: pathlib.Path, substitutions: dict[str, str] | None = None) -> dict[str, typing.Any]:
    """
    Reads a JSON logging config and fills its `${NAME}` placeholders.

    Raises:
        ValueError: If a placeholder has no substitution.
    """
    substitutions = substitutions or {}
    contents = path.read_text()

    missing = sorted({name for name in _PLACEHOLDER.findall(contents) if name not in substitutions})
    if missing:
        raise ValueError(f"Logging config {path} has no value for placeholder(s): {', '.join(missing)}")

    contents = _PLACEHOLDER.sub(lambda match: substitutions[match.group(1)], contents)
    return json.loads(contents)


def log_config() -> dict[str, typing.Any]:
    """
    Returns the logging configuration applied last.

    Raises:
        ValueError: If the logger has not been configured yet.
    """
    if __conf is None:
        raise ValueError("Logger not configured, must call configured_logger first")
    return __conf


def configured_logger(
    *,
    mode: str,
    config_override: pathlib.Path | None = None,
    substitutions: dict[str, str] | None = None,
) -> logging.Logger:
    """
    Apply the logging config for `mode`, or `config_override` when given, and
    return the root logger.
    """
    global __conf

    path = config_override if config_override else config_path(mode)
    __conf = load_log_config(path, substitutions)

    logging_config.dictConfig(config=__conf)
    return logging.getLogger()
