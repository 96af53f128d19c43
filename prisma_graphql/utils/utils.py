"""
This module contains low-level helpers for reading configuration files.

Design Rationale:
Config files may reference environment variables as `${VAR}`. The raw text
is expanded *before* it is handed to the YAML parser, so placeholders never
have to survive YAML quoting rules.
"""

import os
import re
import yaml
from typing import Dict, Any

from prisma_graphql.core.exceptions import ConfigError

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z0-9_]+)\}")


def expand_env_vars(content: str) -> str:
    """
    Expands environment variables of the form `${VAR}` in a string.

    Example:
        If `os.getenv("SCHEMA_DIR")` is "apps/web", the input string
        `"output: ${SCHEMA_DIR}/models.graphql"` becomes
        `"output: apps/web/models.graphql"`.

    Raises:
        ConfigError: If an environment variable referenced in the string is not set.
    """

    def replacer(match):
        var_name = match.group(1)
        var_value = os.getenv(var_name)
        if var_value is None:
            raise ConfigError(
                f"Configuration error: Environment variable '{var_name}' is not set, "
                "but is referenced in the config file."
            )
        return var_value

    return ENV_VAR_PATTERN.sub(replacer, content)


def load_config(config_file: str) -> Dict[str, Any]:
    """
    Loads a configuration from a YAML file and expands environment variables.

    An empty file yields an empty dictionary.

    Raises:
        FileNotFoundError: If the configuration file is not found.
        yaml.YAMLError: If there is an error parsing the YAML file.
        ConfigError: If a referenced environment variable is not set, or the
            document is not a mapping.
    """
    with open(config_file, "r", encoding="utf-8") as file:
        raw_content = file.read()

    config = yaml.safe_load(expand_env_vars(raw_content)) or {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Configuration file '{config_file}' must contain a mapping."
        )
    return config
