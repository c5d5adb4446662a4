"""Loading the YAML configuration and merging it over the defaults."""

import copy
import logging
import shlex
from pathlib import Path
from typing import Any

import yaml

from meta_open.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".sf-meta-open.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "org": {
        "target_org": None,
        "api_version": "60.0",
        "sf_executable": "sf",
    },
    "browser": {
        # e.g. ["firefox", "--new-tab", "{url}"]
        "command": None,
    },
    "logging": {
        "level": "WARNING",
    },
}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge user settings into known sections, ignoring unknown keys."""
    result = copy.deepcopy(base)
    for section, values in update.items():
        if section not in result:
            logger.warning("Ignoring unknown config section: %s", section)
            continue
        if not isinstance(values, dict):
            msg = f"Config section '{section}' must be a mapping"
            raise InvalidInputError(msg)
        for key, value in values.items():
            if key not in result[section]:
                logger.warning("Ignoring unknown config key: %s.%s", section, key)
                continue
            result[section][key] = value
    return result


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    """Normalize the browser command and check the log level name.

    A string command is split like a shell line; anything else must be a list
    of strings.
    """
    command = config["browser"]["command"]
    if isinstance(command, str):
        command = shlex.split(command)
    if command is not None and (
        not isinstance(command, list)
        or not command
        or not all(isinstance(arg, str) for arg in command)
    ):
        msg = "browser.command must be a list of arguments"
        raise InvalidInputError(msg)
    config["browser"]["command"] = command or None

    level = str(config["logging"]["level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        msg = f"Unknown logging.level: {config['logging']['level']}"
        raise InvalidInputError(msg)
    config["logging"]["level"] = level
    return config


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without ``path`` the default file in the working directory is used when
    present. An explicit path that does not exist is an error.
    """
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise InvalidInputError(msg)
    else:
        p = Path(DEFAULT_CONFIG_FILE)
        if not p.exists():
            return copy.deepcopy(DEFAULT_CONFIG)

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {p}: {e}"
        raise InvalidInputError(msg) from e
    if not isinstance(user_config, dict):
        msg = f"Config file {p} must contain a mapping"
        raise InvalidInputError(msg)

    logger.debug("Loaded config from %s", p)
    return validate_config(merge_config(DEFAULT_CONFIG, user_config))
